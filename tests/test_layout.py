"""Tests for core/layout.py — size limits, columns, parity, truncation."""

import pytest

from core.layout import CLOCK_WIDTH, CLOCK_WIDTH_SECONDS, compute_layout, measure_tracks
from core.models import Colors, Rect, TimeLabel, Track
from core.normalize import normalize_track


def _track(name: str, shortname: str, seconds: bool = False) -> Track:
    track = Track(name=name, shortname=shortname, time_label=TimeLabel(seconds=seconds))
    return normalize_track(track, Colors())


def _tracks(seconds: bool = False) -> list[Track]:
    return [
        _track("Tokyo", "TYO", seconds),
        _track("London", "LON"),
        _track("New York", "NYC"),
    ]


def test_measure_tracks():
    metrics = measure_tracks(_tracks())
    assert metrics.max_title_width == 10
    assert metrics.min_title_width == 5
    assert metrics.min_clock_width == CLOCK_WIDTH
    assert metrics.min_width == 5 + 7 + 7
    assert metrics.min_height == 3


def test_measure_tracks_with_seconds():
    metrics = measure_tracks(_tracks(seconds=True))
    assert metrics.min_clock_width == CLOCK_WIDTH_SECONDS
    assert metrics.min_width == 5 + 10 + 7


def test_measure_tracks_uses_display_width():
    metrics = measure_tracks([_track("東京", "東京")])
    assert metrics.max_title_width == 6


@pytest.mark.parametrize("seconds", [False, True])
def test_non_renderable_boundary(seconds):
    tracks = _tracks(seconds)
    metrics = measure_tracks(tracks)
    w = metrics.min_width
    assert not compute_layout(w - 1, 10, tracks, metrics).renderable
    assert compute_layout(w, 10, tracks, metrics).renderable
    assert not compute_layout(w, 2, tracks, metrics).renderable
    assert compute_layout(w, 3, tracks, metrics).visible_lines == 1


def test_non_renderable_has_no_lines():
    tracks = _tracks()
    layout = compute_layout(5, 5, tracks, measure_tracks(tracks))
    assert layout.lines == []


def test_minimum_width_leaves_one_cell_per_bar():
    tracks = _tracks()
    metrics = measure_tracks(tracks)
    layout = compute_layout(metrics.min_width, 10, tracks, metrics)
    for line in layout.lines:
        assert line.clock.left - line.chart.left == 1
        assert line.chart.right - line.clock.right == 1


def test_columns_and_rows():
    tracks = _tracks()
    metrics = measure_tracks(tracks)
    layout = compute_layout(30, 10, tracks, metrics)
    assert layout.title_width == 5
    for i, line in enumerate(layout.lines):
        y = 1 + i
        assert line.badge == Rect(0, y, 1, 1)
        assert line.title == Rect(2, y, 5, 1)
        assert line.chart.x == 8
        assert line.chart.y == y
        assert line.clock.width == CLOCK_WIDTH
        assert line.left_bar.y == y
        assert line.right_bar.x == line.clock.right


@pytest.mark.parametrize("seconds", [False, True])
def test_chart_splits_evenly_around_clock(seconds):
    tracks = _tracks(seconds)
    metrics = measure_tracks(tracks)
    for width in range(metrics.min_width, metrics.min_width + 60):
        layout = compute_layout(width, 10, tracks, metrics)
        for line in layout.lines:
            assert (line.chart.width - line.clock.width) % 2 == 0
            assert line.clock.left - line.chart.left == line.chart.right - line.clock.right
            assert line.chart.right <= width


def test_seconds_clock_is_wider():
    tracks = _tracks(seconds=True)
    metrics = measure_tracks(tracks)
    layout = compute_layout(42, 10, tracks, metrics)
    widths = {line.title_text: line.clock.width for line in layout.lines}
    assert widths == {"TYO": CLOCK_WIDTH_SECONDS, "LON": CLOCK_WIDTH, "NYC": CLOCK_WIDTH}


def test_wide_titles_switch_globally():
    tracks = _tracks()
    metrics = measure_tracks(tracks)
    # inner width 40 / longest title 10 is not above 4
    narrow = compute_layout(42, 10, tracks, metrics)
    assert not narrow.wide_title
    assert [line.title_text for line in narrow.lines] == ["TYO", "LON", "NYC"]

    wide = compute_layout(43, 10, tracks, metrics)
    assert wide.wide_title
    assert wide.title_width == 10
    assert [line.title_text for line in wide.lines] == ["Tokyo", "London", "New York"]


def test_rows_truncated_by_height():
    tracks = _tracks()
    metrics = measure_tracks(tracks)
    assert compute_layout(40, 4, tracks, metrics).visible_lines == 2
    assert compute_layout(40, 5, tracks, metrics).visible_lines == 3
    assert compute_layout(40, 50, tracks, metrics).visible_lines == 3


def test_layout_is_recomputed_from_scratch():
    tracks = _tracks()
    metrics = measure_tracks(tracks)
    big = compute_layout(80, 10, tracks, metrics)
    small = compute_layout(30, 4, tracks, metrics)
    assert small.lines is not big.lines
    assert len(small.lines) == 2
    assert all(line.chart.right <= 30 for line in small.lines)
