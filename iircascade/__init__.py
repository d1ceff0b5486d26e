"""Cascaded biquad IIR filtering and frequency response analysis."""
from .dsp import (
    BiquadCascade,
    BiquadStage,
    ConfigurationError,
    FrequencyResponsePoint,
    IIRFilter,
    ResponseAnalysis,
)

__version__ = "0.1.0"

__all__ = [
    "BiquadCascade",
    "BiquadStage",
    "ConfigurationError",
    "FrequencyResponsePoint",
    "IIRFilter",
    "ResponseAnalysis",
]
