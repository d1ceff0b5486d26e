"""Biquad stage definitions and coefficient parsing."""
from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, List, Tuple, Union


class ConfigurationError(ValueError):
    """Raised when a stage descriptor has malformed coefficients."""


@dataclass
class BiquadStage:
    """One second-order section in normalized form (a0 == 1).

    ``b`` holds ``(b0, b1, b2)``, ``a`` holds ``(a1, a2)`` and ``k`` is the input
    gain applied ahead of the feedback network. ``z`` is the two-element delay
    line and the only field that changes while filtering.
    """

    b: Tuple[float, float, float]
    a: Tuple[float, float]
    k: float = 1.0
    z: List[float] = field(default_factory=lambda: [0.0, 0.0])

    def __post_init__(self) -> None:
        self.b = _coefficients(self.b, 3, "b")
        self.a = _coefficients(self.a, 2, "a")
        self.k = _number(self.k, "k")
        self.z = list(_coefficients(self.z, 2, "z"))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BiquadStage":
        """Build a stage from a ``{k, a, b, z}`` descriptor; ``z`` is optional."""
        try:
            b = data["b"]
            a = data["a"]
            k = data["k"]
        except KeyError as exc:
            raise ConfigurationError(f"missing coefficient {exc.args[0]!r}") from exc
        z = data.get("z")
        if z is None:
            z = [0.0, 0.0]
        return cls(b=b, a=a, k=k, z=z)

    def copy(self) -> "BiquadStage":
        """Independent copy, delay line included."""
        return BiquadStage(b=self.b, a=self.a, k=self.k, z=list(self.z))

    def fresh_copy(self) -> "BiquadStage":
        """Copy the coefficients with a zeroed delay line."""
        return BiquadStage(b=self.b, a=self.a, k=self.k)

    def reset(self) -> None:
        self.z[0] = 0.0
        self.z[1] = 0.0


StageLike = Union[BiquadStage, Mapping[str, Any]]


def parse_stages(stages: Iterable[StageLike]) -> List[BiquadStage]:
    """Normalise a sequence of stages or descriptors, keeping their order."""
    parsed: List[BiquadStage] = []
    for index, stage in enumerate(stages):
        try:
            if isinstance(stage, BiquadStage):
                parsed.append(stage.copy())
            elif isinstance(stage, Mapping):
                parsed.append(BiquadStage.from_mapping(stage))
            else:
                raise ConfigurationError(f"unsupported descriptor type {type(stage).__name__}")
        except ConfigurationError as exc:
            raise ConfigurationError(f"stage {index}: {exc}") from exc
    return parsed


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a real number, got {value!r}")
    return float(value)


def _coefficients(values: Any, count: int, name: str) -> Tuple[float, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ConfigurationError(f"{name} must be a sequence of {count} numbers")
    values = list(values)
    if len(values) != count:
        raise ConfigurationError(f"{name} needs exactly {count} coefficients, got {len(values)}")
    return tuple(_number(v, f"{name}[{i}]") for i, v in enumerate(values))
