"""setuptools entry point for the iircascade package."""
from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="iircascade",
    version="0.1.0",
    description="Cascaded biquad IIR filtering and frequency response analysis",
    packages=find_packages(include=["iircascade", "iircascade.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
