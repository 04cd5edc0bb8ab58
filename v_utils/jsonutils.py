"""Helpers for cleaning up decoded JSON values."""

from __future__ import annotations

import copy
from typing import Any


def strip_nulls(value: Any) -> None:
    """Remove ``None`` entries from every mapping inside ``value``, in place."""
    if isinstance(value, dict):
        for key in [k for k, v in value.items() if v is None]:
            del value[key]
        for v in value.values():
            strip_nulls(v)
    elif isinstance(value, list):
        for v in value:
            strip_nulls(v)


def filter_nulls(value: Any) -> Any:
    """Return a copy of ``value`` with ``None`` entries removed from all mappings."""
    result = copy.deepcopy(value)
    strip_nulls(result)
    return result