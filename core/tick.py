"""Per-tick updates: local times, active ranges and bar widths.

Must run against the geometry of the latest layout pass.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from core.models import LineGeometry, Track
from core.timedomain import MINUTES_PER_DAY, round_div, time_to_range, to_minutes

MIN_BAR_WIDTH = 1


def bar_width(minutes: int, region_width: int) -> int:
    """Cells covering *minutes* of a day drawn over *region_width* cells."""
    return max(round_div(minutes * region_width, MINUTES_PER_DAY), MIN_BAR_WIDTH)


def tick_line(line: LineGeometry, track: Track, now: datetime) -> None:
    hour, minute = track.local_time(now)
    line.local_time = (hour, minute)

    minutes = to_minutes(hour, minute)
    current = time_to_range(minutes, track.ranges)
    if current is None:
        raise RuntimeError(f"Track {track.label!r} ranges do not cover {hour:02d}:{minute:02d}")
    line.current_range = current

    # elapsed part of the day, ending at the clock's left edge
    width = bar_width(minutes, line.clock.left - line.chart.left)
    line.left_bar.x = line.clock.left - width
    line.left_bar.y = line.clock.y
    line.left_bar.width = width

    # remaining part, starting at the clock's right edge
    line.right_bar.x = line.clock.right
    line.right_bar.y = line.clock.y
    line.right_bar.width = bar_width(MINUTES_PER_DAY - minutes, line.chart.right - line.clock.right)


def tick_lines(lines: Sequence[LineGeometry], tracks: Sequence[Track], now: datetime) -> None:
    """Advance every visible line to the UTC instant *now*."""
    for line, track in zip(lines, tracks):
        tick_line(line, track, now)
