"""A fraction-valued percentage type with lenient parsing and compact display."""

from __future__ import annotations

import functools
import math
import re
from dataclasses import dataclass
from numbers import Real
from typing import Any

from v_utils.formatting import _display_float, _parse_spec, fmt_with_width, format_significant_digits

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_U64_MAX = 2**64 - 1


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def _as_float(other: Any) -> float | None:
    if isinstance(other, Percent):
        return other.value
    if isinstance(other, Real) and not isinstance(other, bool):
        return float(other)
    return None


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Percent:
    """A percentage stored as a fraction: ``Percent(0.5)`` is 50%."""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls, s: str) -> Percent:
        """Parse ``"50"``/``"50%"`` as 0.5, ``"0.5"`` as 0.5 and ``"0.5%"`` as 0.005."""
        stripped = s.rstrip("%")
        if _INT_RE.fullmatch(stripped) and _I64_MIN <= int(stripped) <= _I64_MAX:
            return cls(float(int(stripped)) / 100.0)
        try:
            number = _parse_float(stripped)
        except ValueError:
            raise ValueError(f'Failed to parse "{s}" to percent') from None
        return cls(number / 100.0 if s.endswith("%") else number)

    @classmethod
    def from_json(cls, value: Any) -> Percent:
        """Build from a decoded JSON value: a float, a non-negative integer or a string."""
        if isinstance(value, bool):
            raise TypeError("expected a float, an integer, a string percentage, or '<number>x' format")
        if isinstance(value, int):
            if not 0 <= value <= _U64_MAX:
                raise ValueError(f"invalid value {value}: expected a non-negative integer")
            return cls(float(value) / 100.0)
        if isinstance(value, float):
            return cls(value)
        if isinstance(value, str):
            if value.endswith("x"):
                try:
                    return cls(_parse_float(value[:-1]))
                except ValueError:
                    raise ValueError(f"Invalid 'x' format: {value}") from None
            return cls.parse(value)
        raise TypeError("expected a float, an integer, a string percentage, or '<number>x' format")

    def to_json(self) -> str:
        percent_number = self.value * 100.0
        if math.isfinite(percent_number) and percent_number.is_integer():
            return f"{int(percent_number)}%"
        return f"{_display_float(percent_number)}%"

    def __format__(self, spec: str) -> str:
        parsed = _parse_spec(spec)
        percent_number = self.value * 100.0
        if math.isfinite(percent_number) and percent_number.is_integer():
            s = f"{int(percent_number)}%"
        elif parsed.precision is not None:
            s = f"{percent_number:.{parsed.precision}f}%"
        else:
            s = f"{format_significant_digits(percent_number, 2)}%"
        if parsed.sign == "+" and self.value >= 0.0:
            s = "+" + s
        return fmt_with_width(s, spec)

    def __str__(self) -> str:
        return format(self, "")

    def __float__(self) -> float:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        other_value = _as_float(other)
        if other_value is None:
            return NotImplemented
        return self.value == other_value

    def __lt__(self, other: Any) -> bool:
        other_value = _as_float(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __add__(self, other: Any) -> Percent:
        if not isinstance(other, Percent):
            return NotImplemented
        return Percent(self.value + other.value)

    def __sub__(self, other: Any) -> Percent:
        if not isinstance(other, Percent):
            return NotImplemented
        return Percent(self.value - other.value)

    def __mul__(self, other: Any) -> Percent:
        other_value = _as_float(other)
        if other_value is None:
            return NotImplemented
        return Percent(self.value * other_value)

    def __rmul__(self, other: Any) -> Percent:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Percent:
        other_value = _as_float(other)
        if other_value is None:
            return NotImplemented
        return Percent(self.value / other_value)

    def __neg__(self) -> Percent:
        return Percent(-self.value)