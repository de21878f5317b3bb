from datetime import datetime, timedelta, timezone

import pytest

from chartcoords.timespans import (
    RangedDateTime,
    RangedDuration,
    compute_period_per_point,
)

UTC = timezone.utc


def _gaps(points):
    return [b - a for a, b in zip(points, points[1:])]


def test_period_for_one_day_in_fifty_points():
    assert compute_period_per_point(86_400 * 10**9, 50, True) == 1_800_000_000_000


def test_period_for_ten_days():
    assert compute_period_per_point(864_000 * 10**9, 23, True) == 43_200_000_000_000


def test_period_for_twenty_five_hours():
    assert compute_period_per_point(90_000 * 10**9, 23, False) == 7_200_000_000_000


def test_period_for_hundred_nanoseconds():
    assert compute_period_per_point(100, 50, True) == 2


def test_period_beyond_a_day_is_none_when_sub_daily():
    total = 2000 * 86_400 * 10**9
    assert compute_period_per_point(total, 23, True) is None
    assert compute_period_per_point(total, 23, False) == 8_640_000_000_000_000


def test_period_needs_positive_max_points():
    with pytest.raises(ValueError):
        compute_period_per_point(1000, 0, True)


def test_datetime_long_range():
    start = datetime(1000, 1, 1, tzinfo=UTC)
    end = datetime(3000, 1, 1, tzinfo=UTC)
    coord = RangedDateTime(start, end)

    assert coord.map(start, (0, 100)) == 0
    assert coord.map(end, (0, 100)) == 100

    kps = coord.key_points(23)
    assert len(kps) <= 23
    gaps = {g.total_seconds() for g in _gaps(kps)}
    assert len(gaps) == 1
    assert gaps.pop() % (24 * 3600 * 7) == 0


def test_datetime_medium_range():
    coord = RangedDateTime(datetime(2019, 1, 1, tzinfo=UTC), datetime(2019, 1, 11, tzinfo=UTC))
    kps = coord.key_points(23)
    assert len(kps) <= 23
    assert set(_gaps(kps)) == {timedelta(hours=12)}


def test_datetime_short_range():
    coord = RangedDateTime(datetime(2019, 1, 1, tzinfo=UTC), datetime(2019, 1, 2, tzinfo=UTC))
    kps = coord.key_points(50)
    assert len(kps) <= 50
    assert set(_gaps(kps)) == {timedelta(seconds=1800)}


def test_datetime_microsecond_range():
    start = datetime(2019, 1, 1, tzinfo=UTC)
    coord = RangedDateTime(start, start + timedelta(microseconds=100))
    kps = coord.key_points(50)
    assert len(kps) == 50
    assert set(_gaps(kps)) == {timedelta(microseconds=2)}


def test_datetime_key_points_align_and_keep_zone():
    start = datetime(2019, 1, 1, 0, 7, tzinfo=UTC)
    coord = RangedDateTime(start, start + timedelta(days=1))
    kps = coord.key_points(50)
    assert kps[0] == datetime(2019, 1, 1, 0, 30, tzinfo=UTC)
    assert all(p.tzinfo is UTC for p in kps)
    assert kps[-1] < start + timedelta(days=1)


def test_datetime_range():
    start = datetime(2020, 5, 1)
    end = datetime(2020, 6, 1)
    assert RangedDateTime(start, end).range() == (start, end)


def test_duration_long_range():
    coord = RangedDuration(timedelta(days=-1_000_000), timedelta(days=1_000_000))

    assert coord.map(timedelta(days=-1_000_000), (0, 100)) == 0
    assert coord.map(timedelta(days=1_000_000), (0, 100)) == 100

    kps = coord.key_points(23)
    assert len(kps) <= 23
    gaps = {g.total_seconds() for g in _gaps(kps)}
    assert len(gaps) == 1
    assert gaps.pop() % (24 * 3600 * 10000) == 0


def test_duration_daily_range():
    coord = RangedDuration(timedelta(days=0), timedelta(hours=25))
    kps = coord.key_points(23)
    assert len(kps) <= 23
    assert set(_gaps(kps)) == {timedelta(hours=2)}
    assert kps[0] == timedelta(0)


def test_duration_negative_start_is_aligned():
    coord = RangedDuration(timedelta(hours=-5), timedelta(hours=20))
    kps = coord.key_points(23)
    assert kps[0] == timedelta(hours=-4)
    assert set(_gaps(kps)) == {timedelta(hours=2)}


def test_duration_map_midpoint():
    coord = RangedDuration(timedelta(0), timedelta(hours=10))
    assert coord.map(timedelta(hours=5), (0, 100)) == 50


def test_duration_map_of_huge_value_hits_end():
    coord = RangedDuration(timedelta(0), timedelta(hours=1))
    assert coord.map(timedelta(days=200_000), (0, 100)) == 100


def test_duration_range_and_bad_max_points():
    coord = RangedDuration(timedelta(0), timedelta(hours=1))
    assert coord.range() == (timedelta(0), timedelta(hours=1))
    with pytest.raises(ValueError):
        coord.key_points(0)