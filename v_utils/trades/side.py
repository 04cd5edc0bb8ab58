"""Trade side: buy or sell."""

from __future__ import annotations

import enum


class Side(enum.Enum):
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def parse(cls, s: str) -> Side:
        """Parse ``buy``/``sell`` in any case."""
        upper = s.upper()
        if upper == "BUY":
            return cls.BUY
        if upper == "SELL":
            return cls.SELL
        raise ValueError(f"Invalid side: {s}")

    def to_str(self) -> str:
        return self.value

    def __invert__(self) -> Side:
        return Side.SELL if self is Side.BUY else Side.BUY

    def __str__(self) -> str:
        return self.to_str()

    def __format__(self, spec: str) -> str:
        return format(self.to_str(), spec)