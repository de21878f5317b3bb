"""Ranged axes, the two-axis coordinate system and axis decorators."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from chartcoords.translate import BackendCoord, ReverseCoordTranslate

Limit = tuple[int, int]


def _as_limit(pixels: range | Sequence[int]) -> Limit:
    if isinstance(pixels, range):
        return (pixels.start, pixels.stop)
    start, end = pixels
    return (start, end)


def _half_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


class Ranged(ABC):
    """An ordered, bounded value range that describes one axis."""

    @abstractmethod
    def map(self, value: Any, limit: Limit) -> int:
        """Map a value onto the pixel interval ``limit``."""

    @abstractmethod
    def key_points(self, max_points: int) -> list:
        """Return at most ``max_points`` values suitable for grid lines."""

    @abstractmethod
    def range(self) -> tuple:
        """Return the (start, end) of the value range."""

    def axis_pixel_range(self, limit: Limit) -> range:
        """Return the pixels the axis itself occupies."""
        if limit[0] < limit[1]:
            return range(limit[0], limit[1])
        return range(limit[1] + 1, limit[0] + 1)


class ReversibleRanged(Ranged):
    """An axis whose pixel mapping can be inverted."""

    @abstractmethod
    def unmap(self, pixel: int, limit: Limit) -> Any | None:
        """Return the value at ``pixel``, or None when it lies outside the axis."""


class DiscreteRanged(Ranged):
    """An axis over discrete values, such as those used by histograms."""

    @abstractmethod
    def next_value(self, value: Any) -> Any:
        """Return the smallest value greater than ``value``."""

    @abstractmethod
    def previous_value(self, value: Any) -> Any:
        """Return the largest value smaller than ``value``."""


class MeshKind(enum.Enum):
    """Which axis a mesh line belongs to."""

    X = "x"
    Y = "y"


@dataclass(frozen=True)
class MeshLine:
    """One grid line of a two-axis coordinate system."""

    kind: MeshKind
    start: BackendCoord
    end: BackendCoord
    value: Any


class RangedCoord(ReverseCoordTranslate):
    """A cartesian coordinate system built from two ranged axes."""

    def __init__(
        self,
        x_spec: Ranged,
        y_spec: Ranged,
        x_pixels: range | Sequence[int],
        y_pixels: range | Sequence[int],
    ) -> None:
        self.x_spec = x_spec
        self.y_spec = y_spec
        self.x_pixels = _as_limit(x_pixels)
        self.y_pixels = _as_limit(y_pixels)

    def __repr__(self) -> str:
        return (
            f"RangedCoord({self.x_spec!r}, {self.y_spec!r}, "
            f"{self.x_pixels!r}, {self.y_pixels!r})"
        )

    def draw_mesh(
        self, h_limit: int, v_limit: int, draw: Callable[[MeshLine], Any]
    ) -> None:
        """Call ``draw`` for every vertical, then every horizontal grid line."""
        x_points = self.x_spec.key_points(v_limit)
        y_points = self.y_spec.key_points(h_limit)
        for value in x_points:
            x = self.x_spec.map(value, self.x_pixels)
            draw(MeshLine(MeshKind.X, (x, self.y_pixels[0]), (x, self.y_pixels[1]), value))
        for value in y_points:
            y = self.y_spec.map(value, self.y_pixels)
            draw(MeshLine(MeshKind.Y, (self.x_pixels[0], y), (self.x_pixels[1], y), value))

    def x_range(self) -> tuple:
        return self.x_spec.range()

    def y_range(self) -> tuple:
        return self.y_spec.range()

    def x_axis_pixel_range(self) -> range:
        return self.x_spec.axis_pixel_range(self.x_pixels)

    def y_axis_pixel_range(self) -> range:
        return self.y_spec.axis_pixel_range(self.y_pixels)

    def translate(self, point: tuple) -> BackendCoord:
        return (
            self.x_spec.map(point[0], self.x_pixels),
            self.y_spec.map(point[1], self.y_pixels),
        )

    def reverse_translate(self, point: BackendCoord) -> tuple | None:
        for spec in (self.x_spec, self.y_spec):
            if not isinstance(spec, ReversibleRanged):
                raise TypeError(f"{type(spec).__name__} cannot be unmapped")
        x = self.x_spec.unmap(point[0], self.x_pixels)
        if x is None:
            return None
        y = self.y_spec.unmap(point[1], self.y_pixels)
        if y is None:
            return None
        return (x, y)


class CentricDiscreteRange(DiscreteRanged):
    """Places each value in the middle of the slot between it and its predecessor."""

    def __init__(self, inner: DiscreteRanged) -> None:
        if not isinstance(inner, DiscreteRanged):
            raise TypeError(f"{type(inner).__name__} is not a discrete axis")
        self.inner = inner

    def __repr__(self) -> str:
        return f"CentricDiscreteRange({self.inner!r})"

    def map(self, value: Any, limit: Limit) -> int:
        previous = self.inner.previous_value(value)
        return _half_toward_zero(self.inner.map(previous, limit) + self.inner.map(value, limit))

    def key_points(self, max_points: int) -> list:
        return self.inner.key_points(max_points)

    def range(self) -> tuple:
        return self.inner.range()

    def next_value(self, value: Any) -> Any:
        return self.inner.next_value(value)

    def previous_value(self, value: Any) -> Any:
        return self.inner.previous_value(value)


class PartialAxis(Ranged):
    """An axis whose drawn line covers only part of its value range."""

    def __init__(self, inner: Ranged, axis_range: tuple) -> None:
        self.inner = inner
        start, end = axis_range
        self.axis_range = (start, end)

    def __repr__(self) -> str:
        return f"PartialAxis({self.inner!r}, {self.axis_range!r})"

    def map(self, value: Any, limit: Limit) -> int:
        return self.inner.map(value, limit)

    def key_points(self, max_points: int) -> list:
        return self.inner.key_points(max_points)

    def range(self) -> tuple:
        return self.inner.range()

    def axis_pixel_range(self, limit: Limit) -> range:
        left = self.map(self.axis_range[0], limit)
        right = self.map(self.axis_range[1], limit)
        return range(min(left, right), max(left, right))

    def _discrete(self) -> DiscreteRanged:
        if not isinstance(self.inner, DiscreteRanged):
            raise TypeError(f"{type(self.inner).__name__} is not a discrete axis")
        return self.inner

    def next_value(self, value: Any) -> Any:
        return self._discrete().next_value(value)

    def previous_value(self, value: Any) -> Any:
        return self._discrete().previous_value(value)


def _cast_like(sample: Any, value: float) -> Any | None:
    if isinstance(sample, int) and not isinstance(sample, bool):
        if not math.isfinite(value):
            return None
        return int(value)
    return type(sample)(value)


def make_partial_axis(axis: Ranged, part: tuple[float, float]) -> PartialAxis | None:
    """Build a partial axis where ``axis`` covers the fraction ``part`` of the full axis.

    The axis type must be constructible as ``type(axis)(start, end)``.
    Returns None when the full range cannot be represented.
    """
    start, end = axis.range()
    part_start, part_end = part
    left = float(start)
    right = float(end)
    width = part_end - part_start
    if width == 0:
        return None
    full_size = (right - left) / width
    full_left = _cast_like(start, left - full_size * part_start)
    full_right = _cast_like(end, right + full_size * (1.0 - part_end))
    if full_left is None or full_right is None:
        return None
    return PartialAxis(type(axis)(full_left, full_right), (start, end))