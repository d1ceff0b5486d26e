"""Helpers for visualising the cascade's frequency response."""
from __future__ import annotations

from typing import Tuple

import numpy as np
from matplotlib.figure import Figure

from iircascade.dsp import IIRFilter


def response_curve(filt: IIRFilter, resolution: int, sample_rate: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (frequency in Hz, magnitude in dB, unwrapped phase) over [0, Nyquist)."""
    points = filt.response(resolution)
    freqs = np.arange(resolution) * sample_rate / (2.0 * resolution)
    magnitude = np.array([p.db_magnitude for p in points], dtype=np.float64)
    phase = np.array([p.phase for p in points], dtype=np.float64)
    return freqs, magnitude, phase


def draw_response(filt: IIRFilter, resolution: int, sample_rate: float) -> Figure:
    fig = Figure(figsize=(6, 4), tight_layout=True)
    mag_ax = fig.add_subplot(211)
    phase_ax = fig.add_subplot(212, sharex=mag_ax)
    freqs, magnitude, phase = response_curve(filt, resolution, sample_rate)
    mag_ax.plot(freqs, magnitude, color="orange")
    mag_ax.set_ylabel("Gain (dB)")
    mag_ax.grid(True, which="both", ls=":", lw=0.5)
    phase_ax.plot(freqs, np.degrees(phase))
    phase_ax.set_xlabel("Frequency (Hz)")
    phase_ax.set_ylabel("Phase (deg)")
    phase_ax.grid(True, which="both", ls=":", lw=0.5)
    return fig
