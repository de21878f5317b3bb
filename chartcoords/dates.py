"""Date axes: plain days, and decorators with monthly or yearly key points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Union

from chartcoords.ranged import DiscreteRanged, Limit

TimeValue = Union[date, datetime]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_I64_MAX = 2**63 - 1
_MICROS_PER_DAY = 86_400 * 1_000_000
_ONE_MICRO = timedelta(microseconds=1)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _ratio(num: float, den: float) -> float:
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)
    return num / den


def _to_pixel(x: float) -> int:
    """Truncate toward zero into the 32-bit pixel range, with NaN becoming 0."""
    if math.isnan(x):
        return 0
    if x <= _I32_MIN:
        return _I32_MIN
    if x >= _I32_MAX:
        return _I32_MAX
    return int(x)


def _num_days(span: timedelta) -> int:
    return _trunc_div(span // _ONE_MICRO, _MICROS_PER_DAY)


def _num_weeks(span: timedelta) -> int:
    return _trunc_div(_num_days(span), 7)


def _num_nanoseconds(span: timedelta) -> int | None:
    nanos = (span // _ONE_MICRO) * 1000
    return nanos if abs(nanos) <= _I64_MAX else None


def _date_floor(value: TimeValue) -> date:
    """The date no later than ``value``."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _date_ceil(value: TimeValue) -> date:
    """The date no earlier than ``value`` (sub-second parts are ignored)."""
    if isinstance(value, datetime):
        seconds = value.hour * 3600 + value.minute * 60 + value.second
        if seconds > 0:
            return value.date() + timedelta(days=1)
        return value.date()
    return value


def _earliest_after_date(day: date, sample: TimeValue) -> TimeValue:
    """The first value of ``day``, of the same kind (and zone) as ``sample``."""
    if isinstance(sample, datetime):
        return datetime.combine(day, time(0, 0, 0), tzinfo=sample.tzinfo)
    return day


def map_time(value: TimeValue, begin: TimeValue, end: TimeValue, limit: Limit) -> int:
    """Map a time value between ``begin`` and ``end`` onto the pixel interval ``limit``."""
    total_span = end - begin
    value_span = value - begin
    pixels = float(limit[1] - limit[0])

    total_ns = _num_nanoseconds(total_span)
    value_ns = _num_nanoseconds(value_span)
    if total_ns is not None and value_ns is not None:
        return _to_pixel(_ratio(pixels * value_ns, float(total_ns))) + limit[0]

    # Spans this long lose nothing visible by ignoring parts of a day.
    total_days = float(_num_days(total_span))
    value_days = float(_num_days(value_span))
    return _to_pixel(_ratio(pixels * value_days, total_days)) + limit[0]


@dataclass(frozen=True)
class RangedDate(DiscreteRanged):
    """An axis over calendar dates with daily or weekly key points."""

    start: date
    end: date

    def map(self, value: date, limit: Limit) -> int:
        return map_time(value, self.start, self.end, limit)

    def key_points(self, max_points: int) -> list[date]:
        span = self.end - self.start
        total_days = _num_days(span)
        total_weeks = _num_weeks(span)

        if 0 < total_days <= max_points:
            return [self.start + timedelta(days=i) for i in range(total_days + 1)]

        if 0 < total_weeks <= max_points:
            return [self.start + timedelta(weeks=i) for i in range(total_weeks + 1)]

        if max_points <= 0 or total_weeks <= 0:
            raise ValueError(
                f"cannot place key points for {total_days} days in {max_points} points"
            )

        weeks_per_point = math.ceil(total_weeks / max_points)
        return [
            self.start + timedelta(weeks=i * weeks_per_point)
            for i in range(total_weeks // weeks_per_point + 1)
        ]

    def range(self) -> tuple[date, date]:
        return (self.start, self.end)

    def next_value(self, value: date) -> date:
        return value + timedelta(days=1)

    def previous_value(self, value: date) -> date:
        return value - timedelta(days=1)


def _first_month(start: TimeValue, end: TimeValue) -> tuple[int, int, int, int]:
    """First whole month at or after ``start`` and the month containing ``end``."""
    start_date = _date_ceil(start)
    end_date = _date_floor(end)
    year, month = start_date.year, start_date.month
    if start_date.day != 1:
        month += 1
        if month == 13:
            month = 1
            year += 1
    return year, month, end_date.year, end_date.month


def _monthly_points(
    year: int, month: int, end_year: int, end_month: int, step: int, sample: TimeValue
) -> list[TimeValue]:
    points = []
    while end_year > year or (end_year == year and end_month >= month):
        points.append(_earliest_after_date(date(year, month, 1), sample))
        month += step
        if month >= 13:
            year += month // 12
            month %= 12
    return points


def _yearly_points(
    max_points: int,
    year: int,
    month: int,
    end_year: int,
    end_month: int,
    sample: TimeValue,
) -> list[TimeValue]:
    if month > end_month:
        end_year -= 1

    count = end_year - year + 1
    if count <= 0:
        return []

    exp10 = 1
    while count // (exp10 * 10) > max_points:
        exp10 *= 10

    freq = exp10
    for factor in (1, 2, 5, 10):
        freq = factor * exp10
        if count // freq <= max_points:
            break

    return [
        _earliest_after_date(date(y, month, 1), sample)
        for y in range(year, end_year + 1, freq)
    ]


@dataclass(frozen=True)
class Monthly(DiscreteRanged):
    """A date or datetime axis whose key points fall on the first of a month."""

    start: TimeValue
    end: TimeValue

    def map(self, value: TimeValue, limit: Limit) -> int:
        return map_time(value, self.start, self.end, limit)

    def key_points(self, max_points: int) -> list[TimeValue]:
        year, month, end_year, end_month = _first_month(self.start, self.end)
        total_months = (end_year - year) * 12 + end_month - month

        if total_months >= 0:
            for limit, step in ((max_points, 1), (max_points * 3, 3), (max_points * 6, 6)):
                if total_months <= limit:
                    return _monthly_points(
                        year, month, end_year, end_month, step, self.start
                    )

        return _yearly_points(max_points, year, month, end_year, end_month, self.start)

    def range(self) -> tuple:
        return (self.start, self.end)

    def next_value(self, value: TimeValue) -> TimeValue:
        ceil = _date_ceil(value)
        year, month = ceil.year, ceil.month + 1
        if month == 13:
            month = 1
            year += 1
        return _earliest_after_date(date(year, month, ceil.day), value)

    def previous_value(self, value: TimeValue) -> TimeValue:
        floor = _date_floor(value)
        year, month = floor.year, floor.month - 1
        if month == 0:
            month = 12
            year -= 1
        return _earliest_after_date(date(year, month, floor.day), value)


@dataclass(frozen=True)
class Yearly(DiscreteRanged):
    """A date or datetime axis whose key points are whole years apart."""

    start: TimeValue
    end: TimeValue

    def map(self, value: TimeValue, limit: Limit) -> int:
        return map_time(value, self.start, self.end, limit)

    def key_points(self, max_points: int) -> list[TimeValue]:
        year, month, end_year, end_month = _first_month(self.start, self.end)
        return _yearly_points(max_points, year, month, end_year, end_month, self.start)

    def range(self) -> tuple:
        return (self.start, self.end)

    def next_value(self, value: TimeValue) -> TimeValue:
        return _earliest_after_date(date(_date_floor(value).year + 1, 1, 1), value)

    def previous_value(self, value: TimeValue) -> TimeValue:
        return _earliest_after_date(date(_date_ceil(value).year - 1, 1, 1), value)