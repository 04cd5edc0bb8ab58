"""Durations in seconds written as ``SS``, ``MM:SS`` or ``H:MM:SS``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_U32_MAX = 2**32 - 1
_UINT_RE = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def time_to_units(time: str) -> int:
    """Convert ``%H:%M:%S``, ``%M:%S`` (or ``%H:%M``) or plain seconds to a count of units."""
    if ":" not in time:
        try:
            return _parse_u32(time)
        except ValueError:
            raise ValueError(f"Invalid time format: Could not parse '{time}' as seconds") from None

    message = f"Invalid time format: Expected one of %H:%M, %H:%M:%S, or %M:%S, got '{time}'"
    parts = time.split(":")
    if len(parts) > 3:
        raise ValueError(message)
    try:
        numbers = [_parse_u32(p) for p in parts]
    except ValueError:
        raise ValueError(message) from None

    if len(numbers) == 3:
        units = numbers[0] * 3600 + numbers[1] * 60 + numbers[2]
    else:
        units = numbers[0] * 60 + numbers[1]
    if units > _U32_MAX:
        raise ValueError(message)
    return units


@dataclass(frozen=True, order=True)
class Timelike:
    """A non-negative count of time units (seconds, or minutes for ``%H:%M``)."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U32_MAX:
            raise ValueError(f"Timelike value out of range: {self.value}")

    @classmethod
    def from_json(cls, value: Any) -> Timelike:
        """Build from a decoded JSON string or non-negative integer."""
        if isinstance(value, str):
            return cls(time_to_units(value))
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= _U32_MAX:
            return cls(value)
        raise ValueError(f"expected a time string or a non-negative integer, got {value!r}")

    def to_json(self) -> str:
        return str(self)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        v = self.value
        if v < 60:
            return f"{v:02}"
        if v < 3600:
            return f"{v // 60:02}:{v % 60:02}"
        return f"{v // 3600}:{(v % 3600) // 60:02}:{v % 60:02}"