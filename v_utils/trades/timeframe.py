"""Candle timeframes such as ``5m`` or ``1d``."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from datetime import timedelta

_UINT_RE = re.compile(r"\+?[0-9]+")

_BINANCE_VALID = (
    "1s", "5s", "15s", "30s", "1m", "3m", "5m", "15m", "30m", "1h", "2h", "4h",
    "6h", "8h", "12h", "1d", "3d", "1w", "1M",
)
_BYBIT_VALID = ("1", "3", "5", "15", "30", "60", "120", "240", "360", "720", "D", "W", "M")


class TimeframeDesignator(enum.Enum):
    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"
    WEEKS = "w"
    MONTHS = "M"
    QUARTERS = "Q"
    YEARS = "y"

    def as_seconds(self) -> int:
        """Length in seconds; months, quarters and years are approximate."""
        return _DESIGNATOR_SECONDS[self]

    def as_str(self) -> str:
        return self.as_str_binance()

    def as_str_binance(self) -> str:
        return self.value

    def as_str_bybit(self) -> str:
        try:
            return _BYBIT_STRS[self]
        except KeyError:
            raise ValueError(f"Invalid timeframe designator for Bybit: {self.name}") from None

    @classmethod
    def parse(cls, s: str) -> TimeframeDesignator:
        """Parse a designator; only ``m`` (minutes) and ``M`` (months) are case-sensitive."""
        try:
            return _DESIGNATOR_CODES[s]
        except KeyError:
            raise ValueError(f"Invalid timeframe designator: {s}") from None


_DAY = 24 * 60 * 60
_DESIGNATOR_SECONDS = {
    TimeframeDesignator.SECONDS: 1,
    TimeframeDesignator.MINUTES: 60,
    TimeframeDesignator.HOURS: 60 * 60,
    TimeframeDesignator.DAYS: _DAY,
    TimeframeDesignator.WEEKS: 7 * _DAY,
    TimeframeDesignator.MONTHS: 30 * _DAY,
    TimeframeDesignator.QUARTERS: 30 * _DAY * 3,
    TimeframeDesignator.YEARS: 30 * _DAY * 12,
}
_BYBIT_STRS = {
    TimeframeDesignator.MINUTES: "",
    TimeframeDesignator.DAYS: "D",
    TimeframeDesignator.WEEKS: "W",
    TimeframeDesignator.MONTHS: "M",
}
_DESIGNATOR_CODES = {
    "s": TimeframeDesignator.SECONDS,
    "m": TimeframeDesignator.MINUTES,
    "h": TimeframeDesignator.HOURS,
    "H": TimeframeDesignator.HOURS,
    "d": TimeframeDesignator.DAYS,
    "D": TimeframeDesignator.DAYS,
    "w": TimeframeDesignator.WEEKS,
    "W": TimeframeDesignator.WEEKS,
    "M": TimeframeDesignator.MONTHS,
    "q": TimeframeDesignator.QUARTERS,
    "Q": TimeframeDesignator.QUARTERS,
    "y": TimeframeDesignator.YEARS,
    "Y": TimeframeDesignator.YEARS,
}


@dataclass(frozen=True)
class Timeframe:
    designator: TimeframeDesignator = TimeframeDesignator.SECONDS
    n: int = 0

    def as_seconds(self) -> int:
        return self.n * self.designator.as_seconds()

    def duration(self) -> timedelta:
        return timedelta(seconds=self.as_seconds())

    def display(self) -> str:
        return f"{self.n}{self.designator.as_str()}"

    def format_binance(self) -> str:
        tf_string = f"{self.n}{self.designator.as_str_binance()}"
        if tf_string not in _BINANCE_VALID:
            raise ValueError(
                f"The Timeframe '{tf_string}' does not match exactly any of the values accepted by Binance API"
            )
        return tf_string

    def format_bybit(self) -> str:
        if self.n == 1 and self.designator is not TimeframeDesignator.MINUTES:
            tf_string = self.designator.as_str_bybit()
        else:
            tf_string = f"{self.n}{self.designator.as_str_bybit()}"
        if tf_string not in _BYBIT_VALID:
            raise ValueError(
                f"The Timeframe does not match exactly any of the values accepted by Bybit API: {tf_string}"
            )
        return tf_string

    @classmethod
    def parse(cls, s: str) -> Timeframe:
        return parse_timeframe(s)

    def __str__(self) -> str:
        return self.display()

    def __format__(self, spec: str) -> str:
        return format(self.display(), spec)


def parse_timeframe(s: str) -> Timeframe:
    """Parse strings like ``5s``, ``3M`` or ``h`` (a count of one)."""
    hint = "Expected a string representing a timeframe like '5s' or '3M'"
    if not s:
        raise ValueError(f"Timeframe string is empty. {hint}")
    n_str, designator_str = s[:-1], s[-1]

    if not n_str:
        n = 1
    elif _UINT_RE.fullmatch(n_str):
        n = int(n_str)
    else:
        raise ValueError(f"Invalid number in timeframe '{n_str}'. {hint}")

    try:
        designator = TimeframeDesignator.parse(designator_str)
    except ValueError:
        raise ValueError(f"Invalid or missing timeframe designator '{designator_str}'. {hint}") from None
    return Timeframe(designator=designator, n=n)