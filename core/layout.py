"""Screen layout for the dashboard.

Rows are laid out as

    badge(1) _ title _ [ left bar | clock | right bar ]

with a one-row top margin and a small right margin. Each row's chart is
sized so that the clock sits exactly in its middle, leaving two equal bar
regions on either side.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from rich.cells import cell_len

from core.models import LineGeometry, Rect, Track

CLOCK_WIDTH = 7  # " hh:mm "
CLOCK_WIDTH_SECONDS = 10  # " hh:mm:ss "
TITLE_PADDING = 2  # badge + separator
WIDE_TITLE_RATIO = 4


def clock_width(track: Track) -> int:
    return CLOCK_WIDTH_SECONDS if track.time_label.seconds else CLOCK_WIDTH


@dataclass
class TitleMetrics:
    """Size limits derived once per configuration."""

    min_title_width: int = 0
    max_title_width: int = 0
    min_clock_width: int = CLOCK_WIDTH
    min_width: int = 0
    min_height: int = 3


def measure_tracks(tracks: Sequence[Track]) -> TitleMetrics:
    """Compute title column widths and the minimum usable screen size.

    Width: title _ notch bar clock bar notch + 2 cells of margin.
    Height: top margin, one row, bottom margin.
    """
    max_title = 0
    min_title = 0
    min_clock = CLOCK_WIDTH
    for track in tracks:
        max_title = max(max_title, cell_len(track.name) + TITLE_PADDING)
        min_title = max(min_title, cell_len(track.shortname) + TITLE_PADDING)
        min_clock = max(min_clock, clock_width(track))

    return TitleMetrics(
        min_title_width=min_title,
        max_title_width=max_title,
        min_clock_width=min_clock,
        min_width=min_title + 1 + 1 + 1 + min_clock + 1 + 1 + 2,
        min_height=3,
    )


@dataclass
class Layout:
    renderable: bool = False
    wide_title: bool = False
    title_width: int = 0
    lines: list[LineGeometry] = field(default_factory=list)

    @property
    def visible_lines(self) -> int:
        return len(self.lines)


def _line_geometry(track: Track, line: Rect, columns: dict[str, Rect], wide_title: bool) -> LineGeometry:
    chart = line.intersection(columns["chart"])
    width = clock_width(track)

    # grow the chart by one column when its halves around the clock would be uneven
    if (chart.width - width) % 2:
        chart.width += 1
    clock = Rect(chart.x + (chart.width - width) // 2, line.y, width, 1)

    return LineGeometry(
        badge=columns["badge"].intersection(line),
        title=columns["title"].intersection(line),
        chart=chart,
        clock=clock,
        left_bar=Rect(clock.left, line.y, 0, 1),
        right_bar=Rect(clock.right, line.y, 0, 1),
        title_text=track.name if wide_title else track.shortname,
    )


def compute_layout(width: int, height: int, tracks: Sequence[Track], metrics: TitleMetrics) -> Layout:
    """Lay out *tracks* on a *width* x *height* screen.

    Returns a non-renderable Layout with no lines when the screen is
    smaller than metrics.min_width x metrics.min_height. Tracks that do
    not fit vertically are left out.
    """
    if width < metrics.min_width or height < metrics.min_height:
        return Layout(renderable=False)

    # top(1), bottom(1), right(2) margins
    inner = Rect(0, 1, width - 2, height - 2)

    wide_title = inner.width / metrics.max_title_width > WIDE_TITLE_RATIO
    title_width = metrics.max_title_width if wide_title else metrics.min_title_width

    columns = {
        "badge": Rect(inner.x, inner.y, 1, inner.height),
        "title": Rect(inner.x + 2, inner.y, title_width, inner.height),
        "chart": Rect(inner.x + 3 + title_width, inner.y, inner.width - 3 - title_width, inner.height),
    }

    nlines = min(inner.height, len(tracks))
    lines = [
        _line_geometry(tracks[i], Rect(inner.x, inner.y + i, inner.width, 1), columns, wide_title)
        for i in range(nlines)
    ]
    return Layout(renderable=True, wide_title=wide_title, title_width=title_width, lines=lines)
