"""Best-effort conversion of timestamp strings to UTC datetimes."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_UINT_RE = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS_PER_UNIT = {10: 1_000_000_000, 13: 1_000_000, 16: 1_000, 19: 1}


def _parse_iso(timestamp: str) -> datetime | None:
    try:
        dt = datetime.fromisoformat(timestamp)
    except ValueError:
        return None
    if dt.tzinfo is None:
        return None
    return dt.astimezone(timezone.utc)


def guess_timestamp_unsafe(timestamp: str) -> datetime:
    """Read an ISO 8601 timestamp with offset, or epoch seconds/ms/us/ns guessed by digit count.

    Negative timestamps are not supported. Sub-microsecond precision is dropped.
    """
    dt = _parse_iso(timestamp)
    if dt is not None:
        return dt

    if _UINT_RE.fullmatch(timestamp) and int(timestamp) <= _U64_MAX:
        num = int(timestamp)
        length = len(timestamp)
        try:
            multiplier = _NANOS_PER_UNIT[length]
        except KeyError:
            raise ValueError(
                f"Invalid timestamp length for guessing: {length}\nTimestamp: {timestamp}"
            ) from None
        nanos = num * multiplier
        return _EPOCH + timedelta(microseconds=nanos // 1000)

    raise ValueError(f"Couldn't parse timestamp: {timestamp}")