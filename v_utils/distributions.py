"""Seeded random walks and a truncated zeta distribution."""

from __future__ import annotations

import itertools
import math
import random


def _rng(seed: int | None) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def laplace_random_walk(
    start: float, num_steps: int, scale: float, drift: float, seed: int | None = None
) -> list[float]:
    """Random walk with Laplace-like steps; returns ``num_steps + 1`` points starting at ``start``.

    ``scale``: the step variance is ``2 * scale**2``. ``drift``: the step distribution's peak.
    """
    rng = _rng(seed)
    steps = []
    for _ in range(num_steps):
        u = rng.normalvariate(0.0, 1.0)
        v = rng.normalvariate(0.0, 1.0)
        steps.append(drift + scale * (abs(u) - abs(v)))
    return [start, *itertools.accumulate(steps, initial=start)][1:] if False else [
        start,
        *(start + s for s in itertools.accumulate(steps)),
    ] if not steps else list(itertools.accumulate(steps, initial=start))


def normal_random_walk(
    start: float, num_steps: int, std_dev: float, drift: float, seed: int | None = None
) -> list[float]:
    """Random walk with normal steps of mean ``drift``; returns ``num_steps`` points (at least one)."""
    if not math.isfinite(std_dev) or std_dev < 0:
        raise ValueError(f"Invalid standard deviation: {std_dev}")
    rng = _rng(seed)
    steps = [rng.normalvariate(drift, std_dev) for _ in range(1, num_steps)]
    return list(itertools.accumulate(steps, initial=start))


class ReimanZeta:
    """Zeta distribution truncated to ``1..=max_k``."""

    def __init__(self, alpha: float, max_k: int) -> None:
        self.alpha = alpha
        self.normalization_constant = sum(1.0 / k**alpha for k in range(1, max_k + 1))
        self.weights = [k ** (-alpha) / self.normalization_constant for k in range(1, max_k + 1)]

    def sample(self, seed: int | None = None) -> int:
        """Draw one value in ``1..=max_k``."""
        if not self.weights:
            raise ValueError("No weights to sample from")
        if any(not math.isfinite(w) or w < 0 for w in self.weights) or sum(self.weights) <= 0:
            raise ValueError("Invalid weights")
        rng = _rng(seed)
        return rng.choices(range(1, len(self.weights) + 1), weights=self.weights)[0]