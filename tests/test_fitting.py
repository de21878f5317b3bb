import math

from chartcoords.fitting import fitting_range


def test_documented_example():
    assert fitting_range([4, 14, -2, 2, 5]) == (-2, 14)


def test_empty_defaults():
    assert fitting_range([]) == (0, 1)


def test_bounds_enclose_data():
    data = [3.5, -7.25, 12.0, 0.0, 4.75]
    low, high = fitting_range(data)
    assert low == min(data)
    assert high == max(data)
    assert all(low <= v <= high for v in data)


def test_accepts_generator():
    assert fitting_range(x for x in (5, 9, 1)) == (1, 9)


def test_single_value():
    assert fitting_range([42]) == (42, 42)


def test_nan_after_first_is_ignored():
    low, high = fitting_range([1.0, math.nan, 3.0])
    assert (low, high) == (1.0, 3.0)