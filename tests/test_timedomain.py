"""Tests for core/timedomain.py — minute arithmetic and axis mapping."""

import pytest

from core.models import TimeOfDay, TimeRange
from core.timedomain import (
    MINUTES_PER_DAY,
    point_to_time,
    round_div,
    time_to_range,
    to_hour_minute,
    to_minutes,
)


def _r(start: str, end: str, color: str = "default") -> TimeRange:
    return TimeRange(TimeOfDay.parse(start), TimeOfDay.parse(end), color)


def test_to_minutes():
    assert to_minutes(0, 0) == 0
    assert to_minutes(12, 30) == 750
    assert to_minutes(24, 0) == MINUTES_PER_DAY == 1440


def test_to_hour_minute():
    assert to_hour_minute(605) == (10, 5)
    assert to_hour_minute(MINUTES_PER_DAY) == (24, 0)


def test_round_div_rounds_halves_up():
    assert round_div(1, 2) == 1
    assert round_div(5, 2) == 3
    assert round_div(7, 3) == 2
    assert round_div(0, 9) == 0


@pytest.mark.parametrize("width", [1, 8, 15, 1440])
def test_point_to_time_endpoints(width):
    assert point_to_time(0, width) == 0
    assert point_to_time(width, width) == MINUTES_PER_DAY


def test_point_to_time_middle_of_even_width():
    assert point_to_time(4, 8) == to_minutes(12, 0)


def test_point_to_time_one_to_one():
    for i in range(MINUTES_PER_DAY + 1):
        assert point_to_time(i, 1440) == i


def test_point_to_time_one_to_two():
    for i in range(721):
        assert point_to_time(i, 720) == 2 * i


def test_point_to_time_one_to_three():
    for i in range(481):
        assert point_to_time(i, 480) == 3 * i


def test_point_to_time_zero_width():
    with pytest.raises(AssertionError):
        point_to_time(0, 0)


def test_time_to_range_whole_day():
    ranges = [_r("00:00", "24:00")]
    assert time_to_range(0, ranges) == 0
    assert time_to_range(to_minutes(23, 59), ranges) == 0


def test_time_to_range_end_is_exclusive():
    ranges = [_r("00:00", "12:00")]
    assert time_to_range(to_minutes(12, 0), ranges) is None


def test_time_to_range_adjacent_ranges():
    ranges = [_r("00:00", "12:00"), _r("12:00", "24:00")]
    assert time_to_range(to_minutes(11, 59), ranges) == 0
    assert time_to_range(to_minutes(12, 0), ranges) == 1
    assert time_to_range(MINUTES_PER_DAY, ranges) is None


def test_time_to_range_non_contiguous():
    ranges = [_r("00:00", "01:00"), _r("05:00", "06:00"), _r("12:00", "24:00")]
    assert time_to_range(to_minutes(0, 59), ranges) == 0
    assert time_to_range(to_minutes(3, 0), ranges) is None
    assert time_to_range(to_minutes(5, 0), ranges) == 1
    assert time_to_range(to_minutes(12, 0), ranges) == 2


def test_time_to_range_empty():
    assert time_to_range(0, []) is None
