"""Typed dataclasses for the tzbars data model.

Configuration models use from_dict/to_dict for YAML serialization.
Unknown keys are ignored; missing keys use defaults.
Value bounds (hours, minutes, offsets) are checked by core.normalize,
the parsers here only reject values of the wrong shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from rich.color import Color, ColorParseError

from core.errors import ConfigStructureError
from core.timedomain import to_hour_minute, to_minutes


# ── Primitives ────────────────────────────────────────────────


def _parse_color(value: Any, default: str) -> str:
    if value is None:
        return default
    color = str(value).strip()
    try:
        Color.parse(color)
    except ColorParseError as e:
        raise ConfigStructureError(f"Unknown color: {color!r}") from e
    return color


def _parse_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigStructureError(f"Invalid {what}: {value!r}")
    try:
        return int(value)
    except ValueError as e:
        raise ConfigStructureError(f"Invalid {what}: {value!r}") from e


def _parse_flag(value: Any, what: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigStructureError(f"Invalid {what}: {value!r} (expected true or false)")
    return value


@dataclass(frozen=True)
class TimeOfDay:
    """Hour/minute pair; (24, 0) is the end-of-day sentinel."""

    hour: int
    minute: int

    @classmethod
    def parse(cls, value: Any) -> TimeOfDay:
        """Parse '09:30', [9, 30], or minutes since midnight.

        YAML 1.1 reads an unquoted 10:00 as the base-60 integer 600, so a
        plain int is taken as a minute count.
        """
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(*to_hour_minute(value))
        if isinstance(value, str):
            parts = value.strip().split(":")
            if len(parts) != 2:
                raise ConfigStructureError(f"Invalid time of day: {value!r}")
            return cls(_parse_int(parts[0], "hour"), _parse_int(parts[1], "minute"))
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(_parse_int(value[0], "hour"), _parse_int(value[1], "minute"))
        raise ConfigStructureError(f"Invalid time of day: {value!r}")

    @property
    def minutes(self) -> int:
        return to_minutes(self.hour, self.minute)

    @property
    def encoded(self) -> int:
        """Clock-face encoding hhmm, e.g. 2400 for end of day."""
        return self.hour * 100 + self.minute

    def to_str(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass
class TimeRange:
    """A colored [start, end) interval of a track's day.

    The optional flags override the owning track's TimeLabel when set.
    """

    start: TimeOfDay
    end: TimeOfDay
    color: str
    fill: bool | None = None
    use_range_color: bool | None = None
    blink: bool | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any], colors: Colors) -> TimeRange:
        if not isinstance(d, dict):
            raise ConfigStructureError(f"Invalid range: {d!r}")
        if "start" not in d or "end" not in d:
            raise ConfigStructureError(f"Range needs both 'start' and 'end': {d!r}")
        return cls(
            start=TimeOfDay.parse(d["start"]),
            end=TimeOfDay.parse(d["end"]),
            color=_parse_color(d.get("color"), colors.base),
            fill=_parse_flag(d.get("fill"), "fill"),
            use_range_color=_parse_flag(d.get("use_range_color"), "use_range_color"),
            blink=_parse_flag(d.get("blink"), "blink"),
        )

    @property
    def start_minutes(self) -> int:
        return self.start.minutes

    @property
    def end_minutes(self) -> int:
        return self.end.minutes

    def to_str(self) -> str:
        return f"{self.start.to_str()}-{self.end.to_str()}"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"start": self.start.to_str(), "end": self.end.to_str(), "color": self.color}
        for key in ("fill", "use_range_color", "blink"):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        return d

    def resolve_fill(self, label: TimeLabel) -> bool:
        return label.fill if self.fill is None else self.fill

    def resolve_blink(self, label: TimeLabel) -> bool:
        return label.blink if self.blink is None else self.blink

    def resolve_use_range_color(self, label: TimeLabel) -> bool:
        return label.use_range_color if self.use_range_color is None else self.use_range_color


# ── Tracks ────────────────────────────────────────────────────


@dataclass
class TimeLabel:
    """Per-track clock display defaults."""

    seconds: bool = False
    blink: bool = False
    fill: bool = False
    use_range_color: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> TimeLabel:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            seconds=_parse_flag(d.get("seconds"), "seconds") or False,
            blink=_parse_flag(d.get("blink"), "blink") or False,
            fill=_parse_flag(d.get("fill"), "fill") or False,
            use_range_color=_parse_flag(d.get("use_range_color"), "use_range_color") or False,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "seconds": self.seconds,
            "blink": self.blink,
            "fill": self.fill,
            "use_range_color": self.use_range_color,
        }


def _parse_offset(value: Any) -> tuple[int, int]:
    if value is None:
        return (0, 0)
    if isinstance(value, (list, tuple)):
        if len(value) == 1:
            return (_parse_int(value[0], "offset hours"), 0)
        if len(value) == 2:
            return (_parse_int(value[0], "offset hours"), _parse_int(value[1], "offset minutes"))
        raise ConfigStructureError(f"Invalid offset: {value!r}")
    return (_parse_int(value, "offset hours"), 0)


@dataclass
class Track:
    name: str = ""
    shortname: str = ""
    offset: tuple[int, int] = (0, 0)
    show_badge: bool = False
    time_label: TimeLabel = field(default_factory=TimeLabel)
    ranges: list[TimeRange] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any], colors: Colors) -> Track:
        if not isinstance(d, dict):
            raise ConfigStructureError(f"Invalid track: {d!r}")
        raw_ranges = d.get("ranges") or []
        if not isinstance(raw_ranges, list):
            raise ConfigStructureError(f"'ranges' must be a list: {raw_ranges!r}")
        return cls(
            name=str(d.get("name") or ""),
            shortname=str(d.get("shortname") or ""),
            offset=_parse_offset(d.get("offset")),
            show_badge=_parse_flag(d.get("show_badge"), "show_badge") or False,
            time_label=TimeLabel.from_dict(d.get("time_label")),
            ranges=[TimeRange.from_dict(r, colors) for r in raw_ranges],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "shortname": self.shortname,
            "offset": list(self.offset),
            "show_badge": self.show_badge,
            "time_label": self.time_label.to_dict(),
            "ranges": [r.to_dict() for r in self.ranges],
        }

    @property
    def label(self) -> str:
        return self.name or self.shortname or "<unnamed>"

    def offset_minutes(self) -> int:
        """Signed offset from UTC; the minute part follows the hour's sign."""
        hours, minutes = self.offset
        if hours < 0 or (hours == 0 and minutes < 0):
            return hours * 60 - abs(minutes)
        return hours * 60 + abs(minutes)

    def local_time(self, now: datetime) -> tuple[int, int]:
        """Track-local (hour, minute) for the UTC instant *now*."""
        local = now + timedelta(minutes=self.offset_minutes())
        return (local.hour, local.minute)


# ── Configuration ─────────────────────────────────────────────


@dataclass
class Colors:
    base: str = "bright_black"
    fill_fg: str = "black"
    clock: str = "default"
    title: str = "default"

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> Colors:
        if not d or not isinstance(d, dict):
            return cls()
        defaults = cls()
        return cls(
            base=_parse_color(d.get("base"), defaults.base),
            fill_fg=_parse_color(d.get("fill_fg"), defaults.fill_fg),
            clock=_parse_color(d.get("clock"), defaults.clock),
            title=_parse_color(d.get("title"), defaults.title),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"base": self.base, "fill_fg": self.fill_fg, "clock": self.clock, "title": self.title}


@dataclass
class Config:
    colors: Colors = field(default_factory=Colors)
    tracks: list[Track] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Config:
        if not d or not isinstance(d, dict):
            return cls()
        colors = Colors.from_dict(d.get("colors"))
        raw_tracks = d.get("tracks") or []
        if not isinstance(raw_tracks, list):
            raise ConfigStructureError(f"'tracks' must be a list: {raw_tracks!r}")
        return cls(
            colors=colors,
            tracks=[Track.from_dict(t, colors) for t in raw_tracks],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "colors": self.colors.to_dict(),
            "tracks": [t.to_dict() for t in self.tracks],
        }


# ── Geometry ──────────────────────────────────────────────────


@dataclass
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersection(self, other: Rect) -> Rect:
        x1 = max(self.left, other.left)
        y1 = max(self.top, other.top)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x1, y1, max(0, x2 - x1), max(0, y2 - y1))


@dataclass
class LineGeometry:
    """Rectangles and time state of one visible dashboard row.

    Structural fields are written by the layout pass, the rest by ticks.
    """

    badge: Rect = field(default_factory=Rect)
    title: Rect = field(default_factory=Rect)
    chart: Rect = field(default_factory=Rect)
    clock: Rect = field(default_factory=Rect)
    left_bar: Rect = field(default_factory=Rect)
    right_bar: Rect = field(default_factory=Rect)
    current_range: int = 0
    title_text: str = ""
    local_time: tuple[int, int] = (0, 0)
