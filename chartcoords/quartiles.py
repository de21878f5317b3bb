"""Quartiles and Tukey fences of a sample."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence


def _percentile_of_sorted(values: Sequence[float], pct: float) -> float:
    """Linearly interpolated ``pct`` percentile of sorted, non-empty ``values``."""
    if len(values) == 1:
        return values[0]
    if not 0.0 <= pct <= 100.0:
        raise ValueError("percentile must lie in [0, 100]")
    if abs(pct - 100.0) < sys.float_info.epsilon:
        return values[-1]
    rank = pct / 100.0 * (len(values) - 1)
    lower_rank = int(rank)
    fraction = rank - lower_rank
    lo = values[lower_rank]
    hi = values[lower_rank + 1]
    return lo + (hi - lo) * fraction


class Quartiles:
    """The quartiles of a sample together with fences 1.5 IQR beyond them."""

    __slots__ = ("lower_fence", "lower", "median", "upper", "upper_fence")

    def __init__(self, samples: Iterable[float]) -> None:
        ordered = sorted(float(v) for v in samples)
        if not ordered:
            raise ValueError("quartiles need at least one value")
        self.lower = _percentile_of_sorted(ordered, 25.0)
        self.median = _percentile_of_sorted(ordered, 50.0)
        self.upper = _percentile_of_sorted(ordered, 75.0)
        iqr = self.upper - self.lower
        self.lower_fence = self.lower - 1.5 * iqr
        self.upper_fence = self.upper + 1.5 * iqr

    def __repr__(self) -> str:
        return f"Quartiles(values={self.values()!r})"

    def values(self) -> tuple[float, float, float, float, float]:
        """Return (lower fence, lower quartile, median, upper quartile, upper fence)."""
        return (
            self.lower_fence,
            self.lower,
            self.median,
            self.upper,
            self.upper_fence,
        )