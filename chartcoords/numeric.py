"""Linear numeric axes over floats and integers, and integer grouping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from chartcoords.ranged import DiscreteRanged, Limit, Ranged, ReversibleRanged

_PIXEL_MIN = -(2**31)
_PIXEL_MAX = 2**31 - 1


def _ratio(num: float, den: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)
    return num / den


def _floor_pixel(x: float) -> int:
    """Floor a float into the 32-bit pixel range, with NaN becoming 0."""
    if math.isnan(x):
        return 0
    if x <= _PIXEL_MIN:
        return _PIXEL_MIN
    if x >= _PIXEL_MAX:
        return _PIXEL_MAX
    return math.floor(x)


def _truncate(x: float) -> int:
    """Truncate a float toward zero, with NaN becoming 0."""
    if math.isnan(x):
        return 0
    return int(x)


def _rem_euclid(a: float, b: float) -> float:
    if b > 0:
        return a - math.floor(a / b) * b
    return a - math.ceil(a / b) * b


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_rem(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _trunc_div(a, b)


def _linear_map(start: Any, end: Any, value: Any, limit: Limit) -> int:
    logic_length = _ratio(float(value - start), float(end - start))
    actual_length = limit[1] - limit[0]
    if actual_length == 0:
        return limit[1]
    return limit[0] + _floor_pixel(actual_length * logic_length + 1e-3)


def _linear_unmap(start: Any, end: Any, pixel: int, limit: Limit) -> float | None:
    low, high = limit
    if pixel < min(low, high) or pixel > max(low, high):
        return None
    offset = _ratio(float(pixel - low), float(high - low))
    return float(end - start) * offset + float(start)


def compute_float_key_points(start: float, end: float, max_points: int) -> list[float]:
    """Pick evenly spaced round values inside ``[start, end]``, at most ``max_points`` of them."""
    if max_points <= 0:
        return []
    lo, hi = float(start), float(end)
    if not hi > lo:
        raise ValueError("float key points need start < end")

    magnitude = math.floor(math.log(hi - lo, 10))
    scale = 10.0**magnitude
    digits = -magnitude + 1

    if 1 + math.floor((hi - lo) / scale) > max_points:
        scale *= 10.0

    while True:
        old_scale = scale
        for divisor in (2.0, 5.0, 10.0):
            step = scale / divisor
            new_left = lo + step - _rem_euclid(lo, step)
            new_right = hi - _rem_euclid(hi, step)
            npoints = 1 + max(0, int((new_right - new_left) / old_scale * divisor))
            if npoints > max_points:
                break
            scale = old_scale / divisor
        else:
            scale = old_scale / 10.0
            if scale < 1.0:
                digits += 1
            continue
        break

    size = 10.0 ** (digits + 1)
    left = lo + scale - _rem_euclid(lo, scale)
    right = hi - _rem_euclid(hi, scale)
    points: list[float] = []
    while left <= right:
        rounded = math.floor(abs(left * size) + 1e-3 + 0.5) / size
        left = -rounded if left < 0 else rounded
        points.append(left)
        left += scale
    return points


def compute_int_key_points(start: int, end: int, max_points: int) -> list[int]:
    """Pick evenly spaced round integers between ``start`` and ``end``."""
    if max_points <= 0:
        return []
    lo, hi = min(start, end), max(start, end)
    span = hi - lo

    def count(step: int) -> int:
        return (span + step - 1) // step

    scale = 1
    while count(scale) > max_points:
        next_scale = scale * 10
        for candidate in (scale * 2, scale * 5, next_scale):
            scale = candidate
            if count(candidate) < max_points:
                break
        else:
            continue
        break

    left = lo + (scale - _trunc_rem(lo, scale)) % scale
    right = hi - _trunc_rem(hi, scale)
    return list(range(left, right + 1, scale))


@dataclass(frozen=True)
class RangedCoordFloat(ReversibleRanged):
    """A linear axis over floating point values."""

    start: float
    end: float

    def map(self, value: float, limit: Limit) -> int:
        return _linear_map(self.start, self.end, value, limit)

    def key_points(self, max_points: int) -> list[float]:
        return compute_float_key_points(self.start, self.end, max_points)

    def range(self) -> tuple:
        return (self.start, self.end)

    def unmap(self, pixel: int, limit: Limit) -> float | None:
        return _linear_unmap(self.start, self.end, pixel, limit)


@dataclass(frozen=True)
class RangedCoordInt(ReversibleRanged, DiscreteRanged):
    """A linear axis over integer values."""

    start: int
    end: int

    def map(self, value: int, limit: Limit) -> int:
        return _linear_map(self.start, self.end, value, limit)

    def key_points(self, max_points: int) -> list[int]:
        return compute_int_key_points(self.start, self.end, max_points)

    def range(self) -> tuple:
        return (self.start, self.end)

    def unmap(self, pixel: int, limit: Limit) -> int | None:
        raw = _linear_unmap(self.start, self.end, pixel, limit)
        return None if raw is None else _truncate(raw)

    def next_value(self, value: int) -> int:
        return value + 1

    def previous_value(self, value: int) -> int:
        return value - 1


@dataclass(frozen=True)
class GroupBy(DiscreteRanged):
    """An integer axis whose key points fall on multiples of ``size``."""

    inner: Ranged
    size: int

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("group size must be positive")

    def map(self, value: int, limit: Limit) -> int:
        return self.inner.map(value, limit)

    def range(self) -> tuple:
        return self.inner.range()

    def key_points(self, max_points: int) -> list[int]:
        start, end = self.inner.range()
        first = _trunc_div(start + self.size - 1, self.size)
        last = _trunc_div(end, self.size)
        return [p * self.size for p in compute_int_key_points(first, last, max_points)]

    def _discrete(self) -> DiscreteRanged:
        if not isinstance(self.inner, DiscreteRanged):
            raise TypeError(f"{type(self.inner).__name__} is not a discrete axis")
        return self.inner

    def next_value(self, value: int) -> int:
        return self._discrete().next_value(value)

    def previous_value(self, value: int) -> int:
        return self._discrete().previous_value(value)