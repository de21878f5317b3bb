"""A logarithmically scaled axis."""

from __future__ import annotations

import math
from typing import Any

from chartcoords.numeric import RangedCoordFloat
from chartcoords.ranged import Limit, Ranged


class LogCoord(Ranged):
    """An axis mapping values on a logarithmic scale.

    Integer bounds give integer key points, and an integer zero is shown
    as if it were 0.5 so that it still has a place on the axis.
    """

    def __init__(self, start: Any, end: Any) -> None:
        self.start = start
        self.end = end
        self._integral = all(
            isinstance(v, int) and not isinstance(v, bool) for v in (start, end)
        )
        low, high = self._to_float(start), self._to_float(end)
        if not (low > 0 and high > 0):
            raise ValueError("log axis bounds must be positive")
        self._linear = RangedCoordFloat(math.log(low), math.log(high))

    def __repr__(self) -> str:
        return f"LogCoord({self.start!r}, {self.end!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogCoord):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __hash__(self) -> int:
        return hash((LogCoord, self.start, self.end))

    def _to_float(self, value: Any) -> float:
        if self._integral and value == 0:
            return 0.5
        return float(value)

    def _from_float(self, value: float) -> Any:
        if self._integral:
            return math.floor(value + 0.5)
        return value

    def map(self, value: Any, limit: Limit) -> int:
        scaled = max(self._to_float(value), self._to_float(self.start))
        return self._linear.map(math.log(scaled), limit)

    def key_points(self, max_points: int) -> list:
        low = self._to_float(self.start)
        high = self._to_float(self.end)
        decades = math.floor(abs(math.log10(high / low)))
        if decades == 0:
            raise ValueError("log axis key points need a range spanning a decade")

        if max_points < decades:
            density = 0
        else:
            groups = 1 + (max_points - decades) // decades
            exp = 1
            while exp * 10 <= groups:
                exp *= 10
            density = exp - 1

        multiplier = 10.0
        count = 1
        while max_points < decades // count:
            multiplier *= 10.0
            count += 1

        points = []
        value = 10.0 ** math.ceil(math.log10(low))
        while value <= high:
            points.append(self._from_float(value))
            for i in range(1, density + 1):
                inner = value * (1.0 + multiplier / (density + 1) * i)
                if inner > high:
                    break
                points.append(self._from_float(inner))
            value *= multiplier
        return points

    def range(self) -> tuple:
        return (self.start, self.end)