"""DSP package exports for the biquad cascade."""
from .cascade import BiquadCascade, Extremum, ResponseAnalysis
from .complexnum import ComplexNumber
from .engine import IIRFilter
from .response import FrequencyResponseAnalyzer, FrequencyResponsePoint, biquad_response, unwrap_phase
from .stages import BiquadStage, ConfigurationError, parse_stages
from . import signals

__all__ = [
    "BiquadCascade",
    "BiquadStage",
    "ComplexNumber",
    "ConfigurationError",
    "Extremum",
    "FrequencyResponseAnalyzer",
    "FrequencyResponsePoint",
    "IIRFilter",
    "ResponseAnalysis",
    "biquad_response",
    "parse_stages",
    "signals",
    "unwrap_phase",
]
