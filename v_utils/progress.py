"""A minimal terminal progress bar with a time-left estimate."""

from __future__ import annotations

import math
import time

_CLEAR = "\x1b[2J\x1b[1;1H"
_USIZE_MAX = 2**64 - 1


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ProgressBar:
    """Redraws a full-screen bar on every :meth:`progress` call."""

    def __init__(self, total: int) -> None:
        self.bar_width = 133.0
        self.timestamp_ms = _now_ms()
        self.total = float(total)

    def progress(self, i: int) -> None:
        scalar = self.bar_width / self.total
        display_i = int(i * scalar)
        display_total = int(self.total * scalar)
        if display_i > display_total:
            raise ValueError(f"progress {i} exceeds total {self.total:g}")

        print(_CLEAR)
        print(f"[{'*' * display_i}{' ' * (display_total - display_i)}]")

        elapsed_ms = _now_ms() - self.timestamp_ms
        left_scalar = (self.total - i) / i if i else math.inf
        estimate = elapsed_ms * left_scalar / 1000.0 if elapsed_ms else 0.0 * left_scalar
        if math.isnan(estimate) or estimate <= 0:
            left_s = 0
        elif estimate >= _USIZE_MAX:
            left_s = _USIZE_MAX
        else:
            left_s = int(estimate)
        print(f"Time left: ≈ {left_s}s")