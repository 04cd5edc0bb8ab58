"""Text block-character plots of price series, meant for snapshot tests."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from v_utils.formatting import _display_float

_BLOCKS = " ▁▂▃▄▅▆▇█"
SINGLE_PLOT_WIDTH = 90
SINGLE_PLOT_HEIGHT = 12


@dataclass
class _PlotData:
    scale: float
    offset: float

    @classmethod
    def new(cls, min_val: float, max_val: float, height: int) -> _PlotData:
        scale = (height * 8) / (max_val - min_val)
        return cls(scale=scale, offset=min_val * scale)

    def block_index(self, val: float, row: int) -> int:
        level = val * self.scale - self.offset - row * 8.0
        if math.isnan(level):
            return 0
        return int(min(max(level, 0.0), 8.0))

    def block(self, val: float, row: int) -> str:
        return _BLOCKS[self.block_index(val, row)]

    def raise_plot(self) -> None:
        """Raise by the smallest step."""
        self.offset -= 1.0


def _trim_point_zero(s: str) -> str:
    while s.endswith(".0"):
        s = s[:-2]
    return s


def _side_panel(min_val: float, max_val: float, height: int) -> str:
    min_step = (max_val - min_val) / 100.0
    _, _, fraction = _display_float(min_step).partition(".")
    decimals = len(fraction) - len(fraction.lstrip("0")) + 1
    max_str = _trim_point_zero(f"{max_val:.{decimals}f}")
    min_str = _trim_point_zero(f"{min_val:.{decimals}f}")
    filler = " " * max(len(max_str), len(min_str), 1)
    rows = []
    for i in range(height):
        if i == 0:
            rows.append(max_str)
        elif i == height - 1:
            rows.append(min_str)
        else:
            rows.append(filler)
    return "\n".join(rows)


def _join_blocks(left: str, right: str) -> str:
    left_lines = left.split("\n")
    right_lines = right.split("\n")
    if len(left_lines) != len(right_lines):
        raise ValueError("blocks have different heights")
    return "\n".join(l + r for l, r in zip(left_lines, right_lines))


def _column_indices(n: int, width: int) -> list[int]:
    return [int(j * n / width) for j in range(width)]


def _plot_p(prices: Sequence[float], width: int, height: int) -> str:
    if not prices:
        raise ValueError("prices are empty")
    min_val, max_val = min(prices), max(prices)
    if abs(max_val - min_val) < sys.float_info.epsilon:
        return " " * width * height

    side_panel = _side_panel(min_val, max_val, height)
    plot_data = _PlotData.new(min_val, max_val, height)
    top = height - 1
    if plot_data.block_index(prices[0], top) == 0 or plot_data.block_index(prices[-1], top) == 0:
        plot_data.raise_plot()

    columns = _column_indices(len(prices), width)
    rows = [
        "".join(plot_data.block(prices[idx], i) for idx in columns)
        for i in reversed(range(height))
    ]
    return _join_blocks("\n".join(rows), side_panel)


def _plot_p_optional(prices: Sequence[float | None], width: int, height: int) -> str:
    if not prices:
        return " " * width * height
    present = [p for p in prices if p is not None]
    if not present:
        raise ValueError("secondary pane holds no values")
    min_val, max_val = min(present), max(present)

    side_panel = _side_panel(min_val, max_val, height)
    if abs(max_val - min_val) < sys.float_info.epsilon:
        return " " * width * height

    plot_data = _PlotData.new(min_val, max_val, height)
    plot_data.raise_plot()  # keeps present values distinguishable from gaps

    columns = _column_indices(len(prices), width)
    rows = []
    for i in reversed(range(height)):
        cells = []
        for idx in columns:
            val = prices[idx]
            cells.append(" " if val is None else plot_data.block(val, i))
        rows.append("".join(cells))
    return _join_blocks("\n".join(rows), side_panel)


@dataclass(frozen=True)
class SnapshotP:
    """Builder for a price plot with an optional secondary pane below it."""

    prices: tuple[float, ...]
    secondary_pane: tuple[float | None, ...] | None = None
    width: int = SINGLE_PLOT_WIDTH
    height: int = SINGLE_PLOT_HEIGHT

    @classmethod
    def build(cls, prices: Iterable[float]) -> SnapshotP:
        return cls(prices=tuple(float(p) for p in prices))

    def with_secondary_pane_optional(self, secondary_pane: Iterable[float | None]) -> SnapshotP:
        """Attach a secondary pane whose gaps are ``None``; its height is 3/5 of the main pane."""
        pane = tuple(None if x is None else float(x) for x in secondary_pane)
        return replace(self, secondary_pane=pane)

    def with_secondary_pane(self, secondary_pane: Iterable[float]) -> SnapshotP:
        """Attach a secondary pane; its height is 3/5 of the main pane."""
        return replace(self, secondary_pane=tuple(float(x) for x in secondary_pane))

    def with_width(self, width: int) -> SnapshotP:
        return replace(self, width=width)

    def with_height_main_pane(self, height: int) -> SnapshotP:
        return replace(self, height=height)

    def draw(self) -> str:
        """Render the plot; raises ValueError on unusable input."""
        out = _plot_p(self.prices, self.width, self.height)
        if self.secondary_pane is not None:
            separator = "─" * self.width
            secondary = _plot_p_optional(self.secondary_pane, self.width, (self.height * 3) // 5)
            out += f"\n{separator}\n{secondary}"
        return out


def snapshot_plot_orders(
    prices: Sequence[float], orders: Sequence[tuple[int, float | None]]
) -> str:
    """Plot prices with a secondary pane holding each order's price until the next order."""
    prices = [float(p) for p in prices]
    orders = [(i, None if x is None else float(x)) for i, x in orders]
    if not all(i < len(prices) for i, _ in orders):
        raise ValueError("order ordinals must lie within prices")
    if not all(a[0] < b[0] for a, b in zip(orders, orders[1:])):
        raise ValueError("order ordinals must be strictly ascending")

    points: list[float | None] = []
    last_index, last_value = 0, None
    for i, value in orders:
        points.extend([last_value] * max(i - last_index, 0))
        last_index, last_value = i, value
    points.extend([last_value] * max(len(prices) - last_index, 0))

    return SnapshotP.build(prices).with_secondary_pane_optional(points).draw()