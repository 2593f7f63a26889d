"""Track validation and range normalization.

A normalized track has a non-empty name and shortname, an offset within
bounds, and ranges that are sorted and partition the whole day [00:00, 24:00)
with no gaps or overlaps. Gaps in the user's ranges are filled with the base
color.
"""

from __future__ import annotations

import logging

from core.errors import (
    ConfigStructureError,
    OffsetBoundsError,
    RangeBoundsError,
    RangeOrderingError,
    RangeOverlapError,
)
from core.models import Colors, Config, TimeOfDay, TimeRange, Track
from core.timedomain import MINUTES_PER_DAY, to_hour_minute

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 65535
MAX_OFFSET_HOURS = 23
MAX_OFFSET_MINUTES = 59
END_OF_DAY = TimeOfDay(24, 0)


def _check_bounds(track: Track, r: TimeRange) -> None:
    for what, t, max_hour in (("start", r.start, 23), ("end", r.end, 24)):
        if not (0 <= t.hour <= max_hour and 0 <= t.minute <= 59):
            raise RangeBoundsError(
                f"Track {track.label!r}: range {r.to_str()} has '{what}' out of range; "
                "valid values are 0..24 for hour and 0..59 for minute"
            )
        if t.encoded > END_OF_DAY.encoded:
            raise RangeBoundsError(f"Track {track.label!r}: range {r.to_str()} has a wrong '{what}' time")


def validate_ranges(track: Track) -> list[TimeRange]:
    """Check every range of *track* and return them sorted by start.

    Raises RangeBoundsError, RangeOrderingError or RangeOverlapError.
    """
    for r in track.ranges:
        _check_bounds(track, r)
        if r.start_minutes >= r.end_minutes:
            raise RangeOrderingError(
                f"Track {track.label!r}: range {r.to_str()} must start strictly before it ends"
            )

    ranges = sorted(track.ranges, key=lambda r: r.start_minutes)
    for prev, cur in zip(ranges, ranges[1:]):
        if cur.start_minutes < prev.end_minutes:
            raise RangeOverlapError(
                f"Track {track.label!r}: ranges {prev.to_str()} and {cur.to_str()} overlap"
            )
    return ranges


def fill_gaps(ranges: list[TimeRange], colors: Colors) -> list[TimeRange]:
    """Insert base-colored ranges so *ranges* cover the whole day.

    Assumes *ranges* are valid, sorted and non-overlapping.
    """
    filled: list[TimeRange] = []
    covered = 0
    for r in ranges:
        if r.start_minutes > covered:
            filled.append(TimeRange(TimeOfDay(*to_hour_minute(covered)), r.start, colors.base))
        filled.append(r)
        covered = r.end_minutes

    if covered < MINUTES_PER_DAY:
        filled.append(TimeRange(TimeOfDay(*to_hour_minute(covered)), END_OF_DAY, colors.base))
    return filled


def normalize_track(track: Track, colors: Colors) -> Track:
    """Validate *track* in place and replace its ranges by a full-day partition."""
    name_len, short_len = len(track.name), len(track.shortname)
    if name_len == 0 and short_len == 0:
        raise ConfigStructureError(
            "Track has no title; specify at least one of 'name' or 'shortname'"
        )
    if name_len > MAX_NAME_LENGTH or short_len > MAX_NAME_LENGTH:
        raise ConfigStructureError(
            f"Track {track.label[:40]!r}...: name is too long, at most {MAX_NAME_LENGTH} characters"
        )
    if name_len == 0:
        track.name = track.shortname
    elif short_len == 0:
        track.shortname = track.name

    hours, minutes = track.offset
    if abs(hours) > MAX_OFFSET_HOURS or abs(minutes) > MAX_OFFSET_MINUTES:
        raise OffsetBoundsError(
            f"Track {track.label!r}: UTC offset {hours}:{minutes:02d} is out of range; "
            f"valid values are -{MAX_OFFSET_HOURS}..{MAX_OFFSET_HOURS} for hour "
            f"and -{MAX_OFFSET_MINUTES}..{MAX_OFFSET_MINUTES} for minute"
        )

    track.ranges = fill_gaps(validate_ranges(track), colors)
    return track


def normalize_config(config: Config) -> Config:
    """Normalize every track and order tracks by UTC offset.

    Either every track normalizes or the first error propagates; *config*
    must not be used after a failure.
    """
    if not config.tracks:
        raise ConfigStructureError(
            "No tracks defined in the config; define at least one track"
        )
    for track in config.tracks:
        normalize_track(track, config.colors)

    config.tracks.sort(key=lambda t: t.offset_minutes())
    logger.debug("Normalized %d tracks", len(config.tracks))
    return config
