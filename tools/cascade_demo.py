"""Quick harness for the biquad cascade using synthetic audio."""
from __future__ import annotations

import argparse
import logging

import numpy as np

from iircascade.dsp import IIRFilter, signals

# Two cascaded second-order Butterworth low-pass sections at fs/10.
DEFAULT_STAGES = [
    {"k": 0.0674552738890719, "a": [-1.1429805025399011, 0.4128015980961886], "b": [1.0, 2.0, 1.0]},
    {"k": 0.0674552738890719, "a": [-1.1429805025399011, 0.4128015980961886], "b": [1.0, 2.0, 1.0]},
]


def rms(block: np.ndarray) -> float:
    if block.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(block), dtype=np.float64)))


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline biquad cascade smoke test")
    parser.add_argument("--freq", type=float, default=1000.0, help="Test sine frequency in Hz")
    parser.add_argument("--sample-rate", type=float, default=48000.0, help="Sample rate in Hz")
    parser.add_argument("--duration", type=float, default=0.5, help="Seconds of audio to process")
    parser.add_argument("--resolution", type=int, default=512, help="Frequency response points")
    parser.add_argument("--length", type=int, default=64, help="Impulse/step response length")
    parser.add_argument("--sweep", action="store_true", help="Use a 20 Hz to Nyquist sweep instead of a sine")
    parser.add_argument("--plot", metavar="PATH", help="Save the response plot to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    filt = IIRFilter(DEFAULT_STAGES)
    if args.sweep:
        test_signal = signals.sweep(20.0, args.sample_rate / 2, args.sample_rate, args.duration)
    else:
        test_signal = signals.sine_wave(args.freq, args.sample_rate, args.duration)

    block_size = 1024
    processed = np.zeros_like(test_signal)
    for i in range(0, len(test_signal), block_size):
        block = test_signal[i : i + block_size]
        processed[i : i + len(block)] = filt.multi_step(block)

    print("Input RMS:", rms(test_signal))
    print("Output RMS:", rms(processed))

    step = filt.step_response(args.length)
    print("Step response peak:", step.max)
    print("Step response trough:", step.min)

    point = filt.response_point(args.sample_rate, args.freq)
    print(f"Gain at {args.freq:g} Hz: {point.db_magnitude:.2f} dB")

    if args.plot:
        from iircascade.plotting import draw_response

        draw_response(filt, args.resolution, args.sample_rate).savefig(args.plot)
        print("Saved plot to", args.plot)


if __name__ == "__main__":
    main()
