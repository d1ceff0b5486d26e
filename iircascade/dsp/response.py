"""Frequency response of a biquad cascade evaluated directly from H(z)."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, MutableSequence, Tuple

import numpy as np

from .complexnum import ONE, ComplexNumber
from .stages import BiquadStage

log = logging.getLogger(__name__)


@dataclass
class FrequencyResponsePoint:
    magnitude: float
    phase: float
    db_magnitude: float


@dataclass(frozen=True)
class ComplexStage:
    """Stage coefficients lifted to complex values once, ahead of evaluation."""

    b0: ComplexNumber
    b1: ComplexNumber
    b2: ComplexNumber
    a1: ComplexNumber
    a2: ComplexNumber
    k: ComplexNumber

    @classmethod
    def from_stage(cls, stage: BiquadStage) -> "ComplexStage":
        b0, b1, b2 = (ComplexNumber.real(v) for v in stage.b)
        a1, a2 = (ComplexNumber.real(v) for v in stage.a)
        return cls(b0, b1, b2, a1, a2, ComplexNumber.real(stage.k))


def biquad_response(stage: ComplexStage, fs: float, fr: float) -> Tuple[float, float]:
    """Magnitude and wrapped phase of one stage at frequency ``fr`` for rate ``fs``.

    ``z`` below stands for z^-1 = exp(-j*2*pi*fr/fs); the numerator and
    denominator are evaluated in nested (Horner) form:

        k * (b0 + z*(b1 + z*b2)) / (1 + z*(a1 + z*a2))
    """
    theta = -2 * math.pi * (fr / fs)
    z = ComplexNumber.unit(theta)
    p = stage.k.mul(stage.b0.add(z.mul(stage.b1.add(stage.b2.mul(z)))))
    q = ONE.add(z.mul(stage.a1.add(stage.a2.mul(z))))
    h = p.div(q)
    return h.magnitude, h.phase


def to_db(magnitude: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(20 * np.log10(magnitude))


def unwrap_phase(points: MutableSequence[FrequencyResponsePoint]) -> None:
    """Make the ``phase`` of consecutive points continuous, in place.

    Non-finite phases (a pole on the evaluation point) are left as they are
    and skipped, so they do not spill into the neighbouring points.
    """
    phases = np.array([p.phase for p in points], dtype=np.float64)
    finite = np.flatnonzero(np.isfinite(phases))
    if finite.size == 0:
        return
    for index, phase in zip(finite, np.unwrap(phases[finite])):
        points[index].phase = float(phase)


class FrequencyResponseAnalyzer:
    """Read-only view of a cascade's coefficients for frequency analysis."""

    def __init__(self, stages: Iterable[BiquadStage]):
        self._stages = [ComplexStage.from_stage(s) for s in stages]

    def calc_response(self, fs: float, fr: float) -> FrequencyResponsePoint:
        magnitude = 1.0
        phase = 0.0
        # H_cascade(z) = H_0(z) * H_1(z) * ... * H_n(z)
        for stage in self._stages:
            m, p = biquad_response(stage, fs, fr)
            magnitude *= m
            # wrapped per stage, the sum is unwrapped by the caller
            phase += p
        db = to_db(magnitude)
        if not math.isfinite(db):
            log.debug("Non-finite response at fr=%g fs=%g (magnitude=%g)", fr, fs, magnitude)
        return FrequencyResponsePoint(magnitude=magnitude, phase=phase, db_magnitude=db)

    def response_point(self, fs: float, fr: float) -> FrequencyResponsePoint:
        return self.calc_response(fs, fr)

    def response(self, resolution: int) -> List[FrequencyResponsePoint]:
        """Sweep ``resolution`` points over [0, Nyquist) with unwrapped phase."""
        fs = resolution * 2
        points = [self.calc_response(fs, fr) for fr in range(resolution)]
        unwrap_phase(points)
        return points
