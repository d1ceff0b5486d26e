"""Small immutable complex value type used by the response analyzer."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ComplexNumber:
    re: float
    im: float = 0.0

    @classmethod
    def real(cls, value: float) -> "ComplexNumber":
        return cls(float(value), 0.0)

    @classmethod
    def unit(cls, theta: float) -> "ComplexNumber":
        """Point on the unit circle at angle ``theta`` (radians)."""
        return cls(math.cos(theta), math.sin(theta))

    def add(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.re + other.re, self.im + other.im)

    def mul(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def div(self, other: "ComplexNumber") -> "ComplexNumber":
        """Complex division; a zero divisor gives inf/nan parts instead of raising."""
        denom = np.float64(other.re * other.re + other.im * other.im)
        with np.errstate(divide="ignore", invalid="ignore"):
            if denom == 0:
                # x / 0 -> +-inf per part, 0 / 0 -> nan
                re = np.float64(self.re) / denom
                im = np.float64(self.im) / denom
            else:
                re = (self.re * other.re + self.im * other.im) / denom
                im = (self.im * other.re - self.re * other.im) / denom
        return ComplexNumber(float(re), float(im))

    @property
    def magnitude(self) -> float:
        return math.hypot(self.re, self.im)

    @property
    def phase(self) -> float:
        return math.atan2(self.im, self.re)

    __add__ = add
    __mul__ = mul
    __truediv__ = div

    def __abs__(self) -> float:
        return self.magnitude

    def __complex__(self) -> complex:
        return complex(self.re, self.im)


ONE = ComplexNumber(1.0, 0.0)
