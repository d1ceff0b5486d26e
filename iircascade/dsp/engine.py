"""High-level filter object that ties the cascade and its response together."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

import numpy as np

from .cascade import BiquadCascade, ResponseAnalysis
from .response import FrequencyResponseAnalyzer, FrequencyResponsePoint
from .stages import BiquadStage, StageLike


@dataclass
class IIRFilter:
    """Cascaded biquad filter built from pre-computed coefficients.

    Each entry of ``coefficients`` is a :class:`BiquadStage` or a mapping such as
    ``{"k": 1, "a": [a1, a2], "b": [b0, b1, b2], "z": [0, 0]}``.
    """

    coefficients: Sequence[StageLike] = ()
    _cascade: BiquadCascade = field(init=False, repr=False, compare=False)
    _analyzer: FrequencyResponseAnalyzer = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._cascade = BiquadCascade(self.coefficients)
        self._analyzer = FrequencyResponseAnalyzer(self._cascade.stages)

    @property
    def stages(self) -> List[BiquadStage]:
        return self._cascade.stages

    def single_step(self, sample: float) -> float:
        return self._cascade.single_step(sample)

    def multi_step(self, samples: Iterable[float]) -> np.ndarray:
        return self._cascade.multi_step(samples)

    def reset(self) -> None:
        """Clear the streaming state."""
        self._cascade.reset()

    def simulate(self, samples: Iterable[float]) -> np.ndarray:
        return self._cascade.simulate(samples)

    def step_response(self, length: int) -> ResponseAnalysis:
        return self._cascade.step_response(length)

    def impulse_response(self, length: int) -> ResponseAnalysis:
        return self._cascade.impulse_response(length)

    def response_point(self, fs: float, fr: float) -> FrequencyResponsePoint:
        return self._analyzer.response_point(fs, fr)

    def response(self, resolution: int) -> List[FrequencyResponsePoint]:
        return self._analyzer.response(resolution)
