"""Candlestick data and conversion of price series into candles."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from v_utils.trades.timeframe import Timeframe

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class Ohlc:
    open: float
    high: float
    low: float
    close: float


@dataclass
class Kline:
    """A complete candle; partial or interrupted candles are never represented."""

    open_time: datetime
    ohlc: Ohlc
    volume_quote: float
    trades: int | None = None
    taker_buy_volume_quote: float | None = None

    @property
    def open(self) -> float:
        return self.ohlc.open

    @property
    def high(self) -> float:
        return self.ohlc.high

    @property
    def low(self) -> float:
        return self.ohlc.low

    @property
    def close(self) -> float:
        return self.ohlc.close


def _as_utc(ts: datetime) -> datetime:
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts


def _nanos_since_epoch(ts: datetime) -> int:
    return (_as_utc(ts) - _EPOCH) // timedelta(microseconds=1) * 1000


def _truncated_rem(a: int, b: int) -> int:
    return a % b if a >= 0 else -((-a) % b)


def p_to_ohlc(p: Sequence[tuple[float, datetime]], timeframe: Timeframe) -> list[Ohlc]:
    """Group ``(price, timestamp)`` points into candles of ``timeframe``.

    The last, ongoing candle is kept only if earlier candles were closed and its open differs
    from the previous candle's open.
    """
    if not p:
        return []

    duration = timeframe.duration()
    duration_nanos = duration // timedelta(microseconds=1) * 1000
    first_price, first_ts = p[0]
    current = Ohlc(first_price, first_price, first_price, first_price)
    current_start = _as_utc(first_ts)
    candles: list[Ohlc] = []

    for price, timestamp in p:
        timestamp = _as_utc(timestamp)
        if timestamp >= current_start + duration:
            if duration_nanos == 0:
                raise ValueError("Timeframe has zero duration")
            candles.append(current)
            rem = _truncated_rem(_nanos_since_epoch(timestamp), duration_nanos)
            current_start = timestamp - timedelta(microseconds=rem // 1000)
            current = Ohlc(price, price, price, price)
        else:
            current.high = max(current.high, price)
            current.low = min(current.low, price)
            current.close = price

    if candles and current.open != candles[-1].open:
        candles.append(current)
    return candles


def mock_p_to_ohlc(p: Sequence[float], step: int) -> list[Ohlc]:
    """Treat ``p`` as evenly spaced and fold every ``step`` prices into one candle."""
    if step <= 0:
        raise ValueError("step must be positive")
    candles = []
    for start in range(0, len(p), step):
        chunk = p[start:start + step]
        if any(math.isnan(x) for x in chunk):
            raise ValueError("prices contain NaN")
        candles.append(Ohlc(open=chunk[0], high=max(chunk), low=min(chunk), close=chunk[-1]))
    return candles