"""Trading assets and pairs, with lenient pair parsing."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

_ASSET_CAPACITY = 16
_DELIMITERS = (",", "-", "_", "/")
_CURRENCIES = (
    "EURI", "EUR", "USD", "GBP", "USDP", "USDS", "PLN", "RON", "CZK", "TRY", "JPY", "BRL",
    "RUB", "AUD", "NGN", "MXN", "COP", "ARS", "BKRW", "IDRT", "UAH", "BIDR", "BVND", "ZAR",
)
_CRYPTO = (
    "USDT", "USDC", "UST", "BTC", "WETH", "ETH", "BNB", "SOL", "XRP", "PAX", "DAI", "VAI",
    "DOGE", "DOT", "TRX",
)


def _check_suffix_order(names: Sequence[str]) -> None:
    """Ensure no name is listed before a longer name it is a suffix of."""
    for i, short in enumerate(names):
        for longer in names[i + 1:]:
            if len(short) < len(longer) and longer.endswith(short):
                raise AssertionError(f"{short} is a suffix of {longer}")


_check_suffix_order(_CURRENCIES)
_check_suffix_order(_CRYPTO)
_RECOGNIZED_QUOTES = _CURRENCIES + _CRYPTO


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Asset:
    """An upper-cased ticker of at most 16 bytes."""

    name: str

    def __post_init__(self) -> None:
        upper = self.name.upper()
        if len(upper.encode()) > _ASSET_CAPACITY:
            raise ValueError(f"Asset name longer than {_ASSET_CAPACITY} bytes: {upper!r}")
        object.__setattr__(self, "name", upper)

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Asset):
            return self.name == other.name
        if isinstance(other, str):
            return self.name == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.name.encode() < other.name.encode()


class InvalidPairError(ValueError):
    """Raised when a string cannot be read as a pair."""

    def __init__(self, provided_str: str, allowed_delimiters: Iterable[str]) -> None:
        self.provided_str = provided_str
        self.allowed_delimiters = list(allowed_delimiters)
        super().__init__(
            f"Invalid pair format '{provided_str}'. Expected two assets separated by one of: "
            f"[{' '.join(self.allowed_delimiters)}]"
        )


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Pair:
    base: Asset
    quote: Asset

    def __post_init__(self) -> None:
        if not isinstance(self.base, Asset):
            object.__setattr__(self, "base", Asset(self.base))
        if not isinstance(self.quote, Asset):
            object.__setattr__(self, "quote", Asset(self.quote))

    def is_usdt(self) -> bool:
        return self.quote == "USDT" and self.base != "BTCST"

    def fmt_binance(self) -> str:
        return f"{self.base}{self.quote}"

    def fmt_bybit(self) -> str:
        return f"{self.base}{self.quote}"

    def fmt_mexc(self) -> str:
        return f"{self.base}_{self.quote}"

    @classmethod
    def parse(cls, s: str) -> Pair:
        """Parse ``BTC-USD``, ``eth/usdt``, or a joined form like ``DOGEUSDT`` with a known quote."""
        for delimiter in _DELIMITERS:
            if delimiter in s:
                parts = [p.strip() for p in s.split(delimiter)]
                parts = [p for p in parts if p]
                if len(parts) == 2:
                    return cls(parts[0], parts[1])
                raise InvalidPairError(s, _DELIMITERS)

        quote = next((q for q in _RECOGNIZED_QUOTES if s.endswith(q)), None)
        if quote is not None and len(s) > len(quote):
            return cls(s[: -len(quote)], quote)

        raise InvalidPairError(s, _DELIMITERS)

    def __str__(self) -> str:
        return f"{self.base}{self.quote}"

    def __hash__(self) -> int:
        return hash((self.base, self.quote))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pair):
            return (self.base, self.quote) == (other.base, other.quote)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return (self.base, self.quote) < (other.base, other.quote)