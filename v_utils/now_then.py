"""A pair of current and previous values, displayed compactly as value plus change."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from v_utils.formatting import _display_float, fmt_with_width
from v_utils.percent import Percent

_SUFFIXES = ("", "K", "M", "B", "T", "Q")


def _signed(x: float) -> str:
    s = _display_float(x)
    return s if s.startswith("-") else f"+{s}"


def _lower_exp(x: float) -> str:
    """Shortest scientific notation, e.g. ``6.942e4``."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    sign = "-" if math.copysign(1.0, x) < 0 else ""
    if x == 0:
        return f"{sign}0e0"
    parts = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    exponent = parts.exponent + len(digits) - 1
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{exponent}"


def _relative_error(n: float, candidate: float) -> float:
    if n == 0:
        return math.nan
    return abs((n - candidate) / n)


def format_number_compactly(n: float, precision: float) -> tuple[float, str]:
    """Round ``n`` as far as ``precision`` (a relative error) allows and pick a thousands suffix."""
    if not precision >= 0.0:
        raise ValueError(f"Precision can't be negative: {precision!r}")
    if precision == 0.0:
        raise ValueError("Precision must be positive")

    thousands = 0
    while abs(n) >= 1000.0:
        n /= 1000.0
        thousands += 1

    sure_n_digits = max(math.ceil(math.log(precision) / math.log(0.1)), 0) + 1
    countdown = sure_n_digits + 2
    kept = []
    for c in _display_float(n):
        kept.append(c)
        if c != ".":
            countdown -= 1
        if countdown == 0:
            break
    n_str = "".join(kept)

    while "." in n_str:
        n_precision = len(n_str.rsplit(".", 1)[1])
        if n_precision == 0:
            break
        candidate = f"{n:.{n_precision - 1}f}"
        if _relative_error(n, float(candidate)) > precision:
            break
        n_str = candidate

    rounded = float(n_str)
    if abs(rounded) >= 1000.0:
        rounded /= 1000.0
        thousands += 1

    if thousands >= len(_SUFFIXES):
        raise ValueError("Number is too large to format compactly")
    return rounded, _SUFFIXES[thousands]


@dataclass(frozen=True)
class NowThen:
    """A current value and the value it is compared against."""

    now: float = 0.0
    then: float = 0.0

    def __str__(self) -> str:
        diff = self.now - self.then
        now_f, now_suffix = format_number_compactly(self.now, 0.03)
        diff_f, diff_suffix = format_number_compactly(diff, 0.005)
        if now_suffix == diff_suffix:
            now_suffix = ""
        return f"{_display_float(now_f)}{now_suffix}{_signed(diff_f)}{diff_suffix}"

    def __format__(self, spec: str) -> str:
        if spec.endswith("e"):
            diff = Percent((self.now - self.then) / self.then)
            return f"{_lower_exp(self.now)}{diff:+}"
        return fmt_with_width(str(self), spec)