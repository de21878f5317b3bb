"""Coordinate systems, axis key points and data helpers for charts."""

__version__ = "0.1.0"

__all__ = [
    "category",
    "dates",
    "fitting",
    "floatfmt",
    "logarithmic",
    "numeric",
    "quartiles",
    "ranged",
    "timespans",
    "translate",
]