"""Render directives for dashboard rows.

Each painter returns an ordered list of Cell directives; later cells at the
same position overwrite earlier ones. rasterize() flattens directives into
rows of (glyph, style) pairs for whichever terminal library draws them.
"""

from __future__ import annotations

from typing import NamedTuple

from rich.cells import cell_len
from rich.style import Style

from core.dashboard import Dashboard
from core.models import Colors, LineGeometry, Track
from core.timedomain import point_to_time, time_to_range

BADGE_THIN = "▁"
BADGE_THICK = "▂"
BAR = "─"
NOTCH = "━"


class Cell(NamedTuple):
    x: int
    y: int
    glyph: str
    style: Style


def paint_badge(line: LineGeometry, track: Track, colors: Colors) -> list[Cell]:
    color = track.ranges[line.current_range].color
    glyph = BADGE_THIN if color == colors.base else BADGE_THICK
    style = Style(color=color)
    return [Cell(x, line.badge.y, glyph, style) for x in range(line.badge.left, line.badge.right)]


def paint_title(line: LineGeometry, colors: Colors) -> list[Cell]:
    style = Style(color=colors.title, bold=True)
    cells = []
    x = line.title.x
    for ch in line.title_text:
        width = cell_len(ch)
        if x + width > line.title.right:
            break
        cells.append(Cell(x, line.title.y, ch, style))
        x += width
    return cells


def clock_style(line: LineGeometry, track: Track, colors: Colors) -> Style:
    r = track.ranges[line.current_range]
    label = track.time_label
    fill = r.resolve_fill(label)
    if r.resolve_use_range_color(label):
        fg, bg = (colors.fill_fg, r.color) if fill else (r.color, None)
    else:
        fg, bg = (colors.fill_fg, colors.base) if fill else (colors.clock, None)
    return Style(color=fg, bgcolor=bg, bold=True)


def paint_clock(line: LineGeometry, track: Track, colors: Colors, seconds: int) -> list[Cell]:
    hour, minute = line.local_time
    if track.time_label.seconds:
        text = f" {hour:02d}:{minute:02d}:{seconds:02d} "
        colons = (3, 6)
    else:
        text = f" {hour:02d}:{minute:02d} "
        colons = (3,)

    style = clock_style(line, track, colors)
    cells = [Cell(line.clock.x + i, line.clock.y, ch, style) for i, ch in enumerate(text)]
    if track.ranges[line.current_range].resolve_blink(track.time_label):
        blink = style + Style(blink=True)
        for i in colons:
            cells[i] = cells[i]._replace(style=blink)
    return cells


def paint_bars(line: LineGeometry, track: Track) -> list[Cell]:
    """Both bars as one day axis: 00:00 at the left bar's start, 24:00 at the right bar's end."""
    left, right = line.left_bar, line.right_bar
    xs = list(range(left.left, left.right)) + list(range(right.left, right.right))
    if not xs:
        return []

    cells = []
    for i, x in enumerate(xs):
        idx = time_to_range(point_to_time(i, len(xs)), track.ranges)
        assert idx is not None, "normalized ranges must cover the whole day"
        cells.append(Cell(x, left.y, BAR, Style(color=track.ranges[idx].color)))

    cells[0] = Cell(xs[0], left.y, NOTCH, Style(color=track.ranges[0].color))
    cells[-1] = Cell(xs[-1], right.y, NOTCH, Style(color=track.ranges[-1].color))
    return cells


def paint_line(line: LineGeometry, track: Track, colors: Colors, seconds: int) -> list[Cell]:
    cells: list[Cell] = []
    if track.show_badge:
        cells += paint_badge(line, track, colors)
    cells += paint_title(line, colors)
    cells += paint_clock(line, track, colors, seconds)
    cells += paint_bars(line, track)
    return cells


def paint_dashboard(dashboard: Dashboard) -> list[Cell]:
    """Directives for every visible row; empty when not renderable."""
    if not dashboard.renderable:
        return []
    colors = dashboard.config.colors
    cells: list[Cell] = []
    for line, track in zip(dashboard.lines, dashboard.config.tracks):
        cells += paint_line(line, track, colors, dashboard.seconds)
    return cells


def rasterize(cells: list[Cell], width: int, height: int) -> list[list[tuple[str, Style]]]:
    """Flatten *cells* into *height* rows of *width* (glyph, style) pairs.

    A double-width glyph fills its own column and the next one, which holds
    an empty glyph so every row measures exactly *width* cells.
    """
    blank = (" ", Style.null())
    rows = [[blank] * width for _ in range(height)]
    for cell in cells:
        if not (0 <= cell.y < height and 0 <= cell.x < width):
            continue
        row = rows[cell.y]
        if cell_len(cell.glyph) == 2:
            if cell.x + 1 >= width:
                continue
            row[cell.x + 1] = ("", cell.style)
        row[cell.x] = (cell.glyph, cell.style)
    return rows
