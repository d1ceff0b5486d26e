"""Time-domain biquad cascade with streaming and simulation modes."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from .signals import unit_impulse, unit_step
from .stages import BiquadStage, StageLike, parse_stages

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extremum:
    """Sample index and value of a detected peak or trough."""

    sample: int
    value: float


@dataclass
class ResponseAnalysis:
    """Simulated output plus the first peak and the first trough after it."""

    out: np.ndarray
    max: Optional[Extremum] = None
    min: Optional[Extremum] = None


def run_stage(stage: BiquadStage, sample: float) -> float:
    """Advance one stage by one sample (transposed direct form II)."""
    a1, a2 = stage.a
    b0, b1, b2 = stage.b
    z = stage.z
    temp = sample * stage.k - a1 * z[0] - a2 * z[1]
    out = b0 * temp + b1 * z[0] + b2 * z[1]
    # z1 must take the old z0 before z0 is overwritten
    z[1] = z[0]
    z[0] = temp
    return out


def run_filter(sample: float, stages: Iterable[BiquadStage]) -> float:
    out = sample
    for stage in stages:
        out = run_stage(stage, out)
    return out


def run_multi_filter(samples: Iterable[float], stages: List[BiquadStage]) -> np.ndarray:
    return np.array([run_filter(x, stages) for x in samples], dtype=np.float64)


def find_extrema(out: np.ndarray) -> Tuple[Optional[Extremum], Optional[Extremum]]:
    """Return the first local maximum and the first local minimum after it.

    Oscillating responses can have more extrema; only this first pair is
    reported. Without a maximum no minimum is searched for.
    """
    peak: Optional[Extremum] = None
    trough: Optional[Extremum] = None
    for i in range(len(out) - 1):
        if peak is None and out[i] > out[i + 1]:
            peak = Extremum(i, float(out[i]))
        if peak is not None and out[i] < out[i + 1]:
            trough = Extremum(i, float(out[i]))
            break
    return peak, trough


class BiquadCascade:
    """Series chain of biquad stages, processed first to last."""

    def __init__(self, stages: Iterable[StageLike] = ()):
        self._stages: List[BiquadStage] = parse_stages(stages)
        log.debug("Built biquad cascade with %d stage(s)", len(self._stages))

    @property
    def stages(self) -> List[BiquadStage]:
        return list(self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    # Streaming ----------------------------------------------------------
    def single_step(self, sample: float) -> float:
        """Filter one sample through the persistent state."""
        return run_filter(sample, self._stages)

    def multi_step(self, samples: Iterable[float]) -> np.ndarray:
        """Filter a block through the persistent state; state carries over."""
        return run_multi_filter(samples, self._stages)

    def reset(self) -> None:
        for stage in self._stages:
            stage.reset()

    # Simulation ---------------------------------------------------------
    def reinit(self) -> List[BiquadStage]:
        """Independent copy of the stages with zeroed delay lines."""
        return [stage.fresh_copy() for stage in self._stages]

    def simulate(self, samples: Iterable[float]) -> np.ndarray:
        """Filter ``samples`` from rest without touching the persistent state."""
        stages = self.reinit()
        out = run_multi_filter(samples, stages)
        log.debug("Simulated %d sample(s) through %d stage(s)", out.size, len(stages))
        return out

    def step_response(self, length: int) -> ResponseAnalysis:
        return self._predefined_response(unit_step, length)

    def impulse_response(self, length: int) -> ResponseAnalysis:
        return self._predefined_response(unit_impulse, length)

    def _predefined_response(self, signal: Callable[[int], np.ndarray], length: int) -> ResponseAnalysis:
        out = self.simulate(signal(length))
        peak, trough = find_extrema(out)
        return ResponseAnalysis(out=out, max=peak, min=trough)
