"""Synthetic signals used for simulating and exercising the cascade."""
from __future__ import annotations

import numpy as np


def unit_step(length: int) -> np.ndarray:
    return np.ones(max(length, 0), dtype=np.float64)


def unit_impulse(length: int) -> np.ndarray:
    x = np.zeros(max(length, 0), dtype=np.float64)
    if x.size:
        x[0] = 1.0
    return x


def sine_wave(freq: float, sample_rate: float, duration: float, amplitude: float = 0.5) -> np.ndarray:
    t = np.arange(int(sample_rate * duration)) / sample_rate
    return amplitude * np.sin(2 * np.pi * freq * t)


def sweep(start_freq: float, end_freq: float, sample_rate: float, duration: float, amplitude: float = 0.5) -> np.ndarray:
    t = np.linspace(0, duration, int(sample_rate * duration), endpoint=False)
    phase = 2 * np.pi * (start_freq * t + (end_freq - start_freq) * t**2 / (2 * duration))
    return amplitude * np.sin(phase)
