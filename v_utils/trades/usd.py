"""A US-dollar amount newtype."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from v_utils.formatting import _display_float, _parse_spec, fmt_with_width
from v_utils.percent import _parse_float


def _operand(other: Any) -> float | None:
    if isinstance(other, Usd):
        return other.value
    if isinstance(other, Real) and not isinstance(other, bool):
        return float(other)
    return None


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Usd:
    """A dollar amount."""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls, s: str) -> Usd:
        return cls(_parse_float(s))

    def __format__(self, spec: str) -> str:
        parsed = _parse_spec(spec)
        if parsed.precision is not None:
            s = f"{self.value:.{parsed.precision}f}"
        elif not (math.isfinite(self.value) and self.value.is_integer()):
            s = f"{self.value:.2f}"
        else:
            s = _display_float(self.value)
        return fmt_with_width(s, spec)

    def __str__(self) -> str:
        return format(self, "")

    def __float__(self) -> float:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Usd):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Usd):
            return NotImplemented
        return self.value < other.value

    def __add__(self, other: Any) -> Usd:
        if not isinstance(other, Usd):
            return NotImplemented
        return Usd(self.value + other.value)

    def __sub__(self, other: Any) -> Usd:
        if not isinstance(other, Usd):
            return NotImplemented
        return Usd(self.value - other.value)

    def __mul__(self, other: Any) -> Usd:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Usd(self.value * other_value)

    def __rmul__(self, other: Any) -> Usd:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Usd:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Usd(self.value / other_value)

    def __neg__(self) -> Usd:
        return Usd(-self.value)