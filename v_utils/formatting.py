"""Number formatting helpers and width/alignment handling for format specs."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

_SPEC_RE = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>^=]))?"
    r"(?P<sign>[+\- ])?"
    r"(?P<alt>#)?"
    r"(?P<zero>0)?"
    r"(?P<width>[0-9]+)?"
    r"(?P<grouping>[,_])?"
    r"(?:\.(?P<precision>[0-9]+))?"
    r"(?P<type>[a-zA-Z%])?",
    re.DOTALL,
)


@dataclass(frozen=True)
class _FormatSpec:
    fill: str | None
    align: str | None
    sign: str | None
    width: int | None
    precision: int | None


def _parse_spec(spec: str) -> _FormatSpec:
    """Split a standard format specifier into the parts this package honours."""
    match = _SPEC_RE.fullmatch(spec)
    if match is None:
        raise ValueError(f"Invalid format specifier {spec!r}")
    width = match["width"]
    precision = match["precision"]
    return _FormatSpec(
        fill=match["fill"],
        align=match["align"],
        sign=match["sign"],
        width=int(width) if width is not None else None,
        precision=int(precision) if precision is not None else None,
    )


def _display_float(x: float) -> str:
    """Shortest round-trip representation of ``x`` in positional notation."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return format(Decimal(repr(x)).normalize(), "f")


def format_significant_digits(n: float, sig_digits: int) -> str:
    """Format ``n`` keeping decimals only up to ``sig_digits`` significant digits."""
    if n == 0.0:
        return "0"

    full = f"{abs(n):.12f}"
    if "." not in full:
        return f"{n:.1f}"

    first_sig = next((i for i, c in enumerate(full) if c not in "0."), 0)

    last_pos = len(full)
    sig_count = 0
    for i, c in enumerate(full[first_sig:], start=first_sig):
        if c != ".":
            sig_count += 1
            if sig_count == sig_digits:
                last_pos = i + 1
                break

    _, _, decimals = full[:last_pos].partition(".")
    return f"{n:.{len(decimals)}f}"


def fmt_with_width(s: str, spec: str) -> str:
    """Pad ``s`` to the width and alignment named in ``spec``; custom fills are refused."""
    parsed = _parse_spec(spec)
    if parsed.fill not in (None, " "):
        raise NotImplementedError(
            "Specifying fill is not supported; use str() and pad the result yourself."
        )
    if parsed.width is None:
        return s
    align = parsed.align or "<"
    if align == "=":
        raise ValueError("'=' alignment is not allowed for this value")
    return f"{s:{align}{parsed.width}}"