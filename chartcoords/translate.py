"""Coordinate translations from a guest coordinate system to backend pixels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

BackendCoord = tuple[int, int]


class CoordTranslate(ABC):
    """Forward translation from a logical coordinate to a backend pixel."""

    @abstractmethod
    def translate(self, point: Any) -> BackendCoord:
        """Translate a guest coordinate into a backend pixel coordinate."""


class ReverseCoordTranslate(CoordTranslate):
    """A translation that can also map a backend pixel back to a logical coordinate."""

    @abstractmethod
    def reverse_translate(self, point: BackendCoord) -> Any | None:
        """Map a backend pixel back; None when it has no logical counterpart."""


@dataclass(frozen=True)
class Shift(ReverseCoordTranslate):
    """A translation that only moves points by a fixed offset."""

    offset: BackendCoord = (0, 0)

    def translate(self, point: BackendCoord) -> BackendCoord:
        return (point[0] + self.offset[0], point[1] + self.offset[1])

    def reverse_translate(self, point: BackendCoord) -> BackendCoord:
        return (point[0] - self.offset[0], point[1] - self.offset[1])


@dataclass(frozen=True)
class ShiftAndTrans(ReverseCoordTranslate):
    """An arbitrary translation followed by a shift."""

    shift: Shift
    inner: CoordTranslate

    def translate(self, point: Any) -> BackendCoord:
        return self.shift.translate(self.inner.translate(point))

    def reverse_translate(self, point: BackendCoord) -> Any | None:
        if not isinstance(self.inner, ReverseCoordTranslate):
            raise TypeError(
                f"{type(self.inner).__name__} does not support reverse translation"
            )
        return self.inner.reverse_translate(self.shift.reverse_translate(point))