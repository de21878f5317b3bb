"""A categorical axis whose values are the members of a fixed list."""

from __future__ import annotations

from typing import Any, Sequence

from chartcoords.ranged import Limit, Ranged


class Category(Ranged):
    """A named list of categories, usable as an axis.

    A category returned by :meth:`get` or :meth:`range` also refers to one
    element of the list and is the value type of this axis.
    """

    __slots__ = ("name", "elements", "index")

    def __init__(self, name: str, elements: Sequence[Any]) -> None:
        self.name = str(name)
        self.elements = tuple(elements)
        self.index = -1

    def _at(self, index: int) -> Category:
        ref = Category.__new__(Category)
        ref.name = self.name
        ref.elements = self.elements
        ref.index = index
        return ref

    @property
    def element(self) -> Any:
        """The element this category refers to."""
        if not 0 <= self.index < len(self.elements):
            raise ValueError(f"category {self.name!r} does not refer to an element")
        return self.elements[self.index]

    def __len__(self) -> int:
        return len(self.elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return (self.name, self.elements, self.index) == (
            other.name,
            other.elements,
            other.index,
        )

    def __hash__(self) -> int:
        return hash((Category, self.name, len(self.elements), self.index))

    def __repr__(self) -> str:
        return f"Category({self.name!r}, {list(self.elements)!r}, index={self.index})"

    def __str__(self) -> str:
        if 0 <= self.index < len(self.elements):
            return str(self.elements[self.index])
        return self.name

    def get(self, value: Any) -> Category | None:
        """Return the category referring to ``value``, or None if it is not a member."""
        try:
            position = self.elements.index(value)
        except ValueError:
            return None
        return self._at(position)

    def map(self, value: Category, limit: Limit) -> int:
        # Margins on both sides: edge pixels are not used for categories.
        total_span = len(self.elements) + 1
        value_span = value.index + 1
        return int((limit[1] - limit[0]) * value_span / total_span) + limit[0]

    def key_points(self, max_points: int) -> list[Category]:
        count = len(self.elements)
        if count == 0:
            raise ValueError("an empty category has no key points")
        if max_points <= 0:
            step = count
        else:
            step = max(1, int((count - 1) / max_points + 1.0))
        return [self._at(i) for i in range(0, count, step)]

    def range(self) -> tuple[Category, Category]:
        return (self._at(0), self._at(len(self.elements) - 1))