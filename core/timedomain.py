"""Minute-of-day arithmetic shared by the normalizer, layout, tick and paint layers.

Everything here is pure integer math. A day is the half-open interval
[0, 1440); 1440 itself ("24:00") is only valid as a range end.
"""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from core.models import TimeRange


def to_minutes(hour: int, minute: int) -> int:
    return hour * 60 + minute


MINUTES_PER_DAY = to_minutes(24, 0)


def to_hour_minute(minutes: int) -> tuple[int, int]:
    return divmod(minutes, 60)


def round_div(numerator: int, denominator: int) -> int:
    """Divide non-negative integers, rounding halves up."""
    return (2 * numerator + denominator) // (2 * denominator)


def point_to_time(idx: int, width: int) -> int:
    """Map column *idx* of a *width*-wide axis to a minute of the day.

    Column 0 is 00:00 and column *width* is 24:00.
    """
    assert width > 0, "time axis has zero width, was the layout computed?"
    return round_div(idx * MINUTES_PER_DAY, width)


def time_to_range(minute: int, ranges: Sequence[TimeRange]) -> int | None:
    """Index of the range whose [start, end) contains *minute*, or None."""
    for i, r in enumerate(ranges):
        if r.start_minutes <= minute < r.end_minutes:
            return i
    return None
