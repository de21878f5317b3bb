"""Fitting a value range around data."""

from __future__ import annotations

from typing import Any, Iterable


def fitting_range(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(smallest, largest)`` of ``values``; ``(0, 1)`` when there are none.

    Values that do not compare with the current bounds (such as NaN) are ignored.
    """
    lower = upper = None
    for value in values:
        if lower is None or lower > value:
            lower = value
        if upper is None or upper < value:
            upper = value
    return (0 if lower is None else lower, 1 if upper is None else upper)