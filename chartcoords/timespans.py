"""Axes over date-times and over durations, with sub-daily key points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from chartcoords.dates import RangedDate, map_time
from chartcoords.ranged import Limit, Ranged

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_I64_MAX = 2**63 - 1
_U64_MOD = 2**64
_NS_PER_US = 1000
_NS_PER_SECOND = 1_000_000_000
_NS_PER_HOUR = 3600 * _NS_PER_SECOND
_NS_PER_DAY = 24 * _NS_PER_HOUR
_MICROS_PER_DAY = 86_400 * 1_000_000
_ONE_MICRO = timedelta(microseconds=1)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_rem(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


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


def _total_ns(span: timedelta) -> int:
    return (span // _ONE_MICRO) * _NS_PER_US


def _num_nanoseconds(span: timedelta) -> int | None:
    nanos = _total_ns(span)
    return nanos if abs(nanos) <= _I64_MAX else None


def _num_days(span: timedelta) -> int:
    return _trunc_div(span // _ONE_MICRO, _MICROS_PER_DAY)


def _date_ceil(value: datetime) -> date:
    seconds = value.hour * 3600 + value.minute * 60 + value.second
    if seconds > 0:
        return value.date() + timedelta(days=1)
    return value.date()


def _check_max_points(max_points: int) -> None:
    if max_points <= 0:
        raise ValueError("max_points must be positive")


def _scale_period(
    total_ns: int, per_point: int, units: tuple[int, ...], base: int, max_points: int
) -> int:
    index = 0
    while total_ns // per_point > max_points * units[index]:
        index += 1
        if index == len(units):
            index = 0
            per_point *= base
    return units[index] * per_point


def compute_period_per_point(total_ns: int, max_points: int, sub_daily: bool) -> int | None:
    """Choose a round tick period in nanoseconds for a span of ``total_ns``.

    Returns None when ``sub_daily`` is set and the period would be a day or longer.
    """
    _check_max_points(max_points)
    min_ns_per_point = total_ns / max_points
    exponent = math.floor(math.log10(min_ns_per_point)) if min_ns_per_point > 0 else 0
    per_point = 10 ** max(0, exponent)

    if per_point < _NS_PER_SECOND:
        return _scale_period(total_ns, per_point, (1, 2, 5), 10, max_points)
    if per_point < _NS_PER_HOUR:
        return _scale_period(
            total_ns, _NS_PER_SECOND, (1, 2, 5, 10, 15, 20, 30), 60, max_points
        )
    if per_point < _NS_PER_DAY:
        return _scale_period(total_ns, _NS_PER_HOUR, (1, 2, 4, 8, 12), 24, max_points)
    if sub_daily:
        return None
    if per_point < _NS_PER_DAY * 10:
        return _scale_period(total_ns, _NS_PER_DAY, (1, 2, 5, 7), 10, max_points)
    return _scale_period(total_ns, _NS_PER_DAY * 10, (1, 2, 5), 10, max_points)


@dataclass(frozen=True)
class RangedDateTime(Ranged):
    """An axis over date-times.

    Date-times resolve to microseconds, so key points are never closer than that.
    """

    start: datetime
    end: datetime

    def map(self, value: datetime, limit: Limit) -> int:
        return map_time(value, self.start, self.end, limit)

    def key_points(self, max_points: int) -> list[datetime]:
        _check_max_points(max_points)
        total_ns = _num_nanoseconds(self.end - self.start)
        if total_ns is not None:
            period = compute_period_per_point(total_ns % _U64_MOD, max_points, True)
            if period is not None:
                return self._sub_daily_points(max(period, _NS_PER_US))

        days = RangedDate(_date_ceil(self.start), self.end.date())
        return [
            datetime.combine(day, time(0, 0, 0), tzinfo=self.start.tzinfo)
            for day in days.key_points(max_points)
        ]

    def _sub_daily_points(self, period: int) -> list[datetime]:
        moment = self.start
        start_ns = (
            moment.hour * 3600 + moment.minute * 60 + moment.second
        ) * _NS_PER_SECOND + moment.microsecond * _NS_PER_US
        if start_ns % period > 0:
            start_ns += period - start_ns % period
        # Time of day wraps around midnight.
        start_ns %= _NS_PER_DAY

        current = datetime.combine(moment.date(), time(0, 0, 0), tzinfo=moment.tzinfo)
        current += timedelta(microseconds=start_ns // _NS_PER_US)
        step = timedelta(microseconds=period // _NS_PER_US)

        points = []
        while current < self.end:
            points.append(current)
            try:
                current += step
            except OverflowError:
                break
        return points

    def range(self) -> tuple[datetime, datetime]:
        return (self.start, self.end)


@dataclass(frozen=True)
class RangedDuration(Ranged):
    """An axis over spans of time.

    Durations resolve to microseconds, so key points are never closer than that.
    """

    start: timedelta
    end: timedelta

    def map(self, value: timedelta, limit: Limit) -> int:
        total_span = self.end - self.start
        value_span = value - self.start
        pixels = float(limit[1] - limit[0])

        total_ns = _num_nanoseconds(total_span)
        if total_ns is not None:
            value_ns = _num_nanoseconds(value_span)
            if value_ns is not None:
                return limit[0] + _to_pixel(
                    _ratio(pixels * value_ns, float(total_ns)) + 1e-10
                )
            return limit[1]

        total_days = float(_num_days(total_span))
        value_days = float(_num_days(value_span))
        return limit[0] + _to_pixel(_ratio(pixels * value_days, total_days) + 1e-10)

    def key_points(self, max_points: int) -> list[timedelta]:
        _check_max_points(max_points)
        total_ns = _num_nanoseconds(self.end - self.start)
        if total_ns is not None:
            period = compute_period_per_point(total_ns % _U64_MOD, max_points, False)
            if period is not None:
                return self._periodic_points(max(period, _NS_PER_US))
        return self._daily_points(max_points)

    def _periodic_points(self, period: int) -> list[timedelta]:
        start_ns = _num_nanoseconds(self.start)
        if start_ns is None:
            raise ValueError("duration start is out of the nanosecond range")
        if (start_ns % _U64_MOD) % period > 0:
            if start_ns > 0:
                start_ns += period - _trunc_rem(start_ns, period)
            else:
                start_ns -= _trunc_rem(start_ns, period)

        end_ns = _total_ns(self.end)
        return [
            timedelta(microseconds=ns // _NS_PER_US)
            for ns in range(start_ns, end_ns, period)
        ]

    def _daily_points(self, max_points: int) -> list[timedelta]:
        begin_days = _num_days(self.start)
        end_days = _num_days(self.end)

        multipliers = (1, 2, 5)
        days_per_tick = 1
        index = 0
        while _trunc_div(end_days - begin_days, days_per_tick * multipliers[index]) > max_points:
            index += 1
            if index == len(multipliers):
                index = 0
                days_per_tick *= 10
        days_per_tick *= multipliers[index]

        first = begin_days + (0 if timedelta(days=begin_days) == self.start else 1)
        current = timedelta(days=first)
        step = timedelta(days=days_per_tick)
        points = []
        while current < self.end:
            points.append(current)
            try:
                current += step
            except OverflowError:
                break
        return points

    def range(self) -> tuple[timedelta, timedelta]:
        return (self.start, self.end)