from datetime import date, datetime, timezone

import pytest

from chartcoords.dates import Monthly, RangedDate, Yearly, map_time


def _day_gaps(points):
    return [(b - a).days for a, b in zip(points, points[1:])]


def test_date_range_long():
    coord = RangedDate(date(1000, 1, 1), date(2999, 1, 1))

    assert coord.map(date(1000, 8, 10), (0, 100)) == 0
    assert coord.map(date(2999, 8, 10), (0, 100)) == 100

    kps = coord.key_points(23)
    assert len(kps) <= 23
    gaps = _day_gaps(kps)
    assert max(gaps) == min(gaps)
    assert max(gaps) % 7 == 0


def test_date_range_short():
    coord = RangedDate(date(2019, 1, 1), date(2019, 1, 21))

    kps = coord.key_points(4)
    assert len(kps) == 3
    gaps = _day_gaps(kps)
    assert max(gaps) == min(gaps) == 7

    kps = coord.key_points(30)
    assert len(kps) == 21
    gaps = _day_gaps(kps)
    assert max(gaps) == min(gaps) == 1


def test_date_range_too_short_for_weeks_raises():
    coord = RangedDate(date(2019, 1, 1), date(2019, 1, 6))
    with pytest.raises(ValueError):
        coord.key_points(3)


def test_ranged_date_neighbours_and_range():
    coord = RangedDate(date(2019, 1, 1), date(2019, 2, 1))
    assert coord.next_value(date(2019, 12, 31)) == date(2020, 1, 1)
    assert coord.previous_value(date(2020, 3, 1)) == date(2020, 2, 29)
    assert coord.range() == (date(2019, 1, 1), date(2019, 2, 1))


def test_yearly_date_range():
    coord = Yearly(date(1000, 8, 5), date(2999, 1, 1))

    assert coord.map(date(1000, 8, 10), (0, 100)) == 0
    assert coord.map(date(2999, 8, 10), (0, 100)) == 100

    kps = coord.key_points(23)
    assert len(kps) <= 23
    gaps = _day_gaps(kps)
    assert max(gaps) != min(gaps)
    assert all(k.month == 9 and k.day == 1 for k in kps)

    coord = Yearly(date(2019, 8, 5), date(2020, 1, 1))
    assert len(coord.key_points(23)) == 1


def test_monthly_date_range():
    coord = Monthly(date(2019, 8, 5), date(2020, 9, 1))

    kps = coord.key_points(15)
    assert len(kps) <= 15
    assert all(k.day == 1 for k in kps)
    assert any(k.month != 9 for k in kps)

    kps = coord.key_points(5)
    assert len(kps) <= 5
    assert all(k.day == 1 for k in kps)
    assert [k.month for k in kps] == [9, 12, 3, 6, 9]

    kps = coord.key_points(3)
    assert len(kps) == 3
    assert all(k.day == 1 for k in kps)
    assert [k.month for k in kps] == [9, 3, 9]


def test_monthly_datetime_points_keep_zone():
    start = datetime(2019, 8, 5, 12, tzinfo=timezone.utc)
    end = datetime(2020, 9, 1, tzinfo=timezone.utc)
    kps = Monthly(start, end).key_points(15)
    assert kps[0] == datetime(2019, 9, 1, tzinfo=timezone.utc)
    assert kps[-1] == datetime(2020, 9, 1, tzinfo=timezone.utc)
    assert len(kps) == 13


def test_monthly_neighbours():
    coord = Monthly(date(2019, 1, 1), date(2020, 1, 1))
    assert coord.next_value(date(2019, 12, 15)) == date(2020, 1, 15)
    assert coord.previous_value(date(2019, 1, 15)) == date(2018, 12, 15)
    with pytest.raises(ValueError):
        coord.next_value(date(2019, 1, 31))


def test_yearly_neighbours():
    coord = Yearly(date(2000, 1, 1), date(2030, 1, 1))
    assert coord.next_value(date(2019, 5, 5)) == date(2020, 1, 1)
    assert coord.previous_value(date(2019, 5, 5)) == date(2018, 1, 1)
    assert coord.previous_value(datetime(2019, 12, 31, 12)) == datetime(2019, 1, 1)


def test_map_time_datetimes():
    begin = datetime(2019, 1, 1)
    end = datetime(2019, 1, 2)
    assert map_time(datetime(2019, 1, 1, 12), begin, end, (0, 100)) == 50
    assert map_time(datetime(2019, 1, 1, 12), begin, end, (100, 0)) == 50
    assert map_time(end, begin, end, (10, 20)) == 20


def test_map_time_empty_span():
    day = date(2019, 1, 1)
    assert map_time(day, day, day, (10, 20)) == 10