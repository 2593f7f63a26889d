"""The dashboard: one normalized Config plus its current screen geometry."""

from __future__ import annotations

import logging
from datetime import datetime

from core.layout import Layout, compute_layout, measure_tracks
from core.models import Config, LineGeometry
from core.tick import tick_lines

logger = logging.getLogger(__name__)


class Dashboard:
    """Holds the active configuration and the geometry derived from it.

    Call update_layout() on startup and on every resize, then tick() on
    every clock update. Not thread-safe; callers serialize all calls.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.metrics = measure_tracks(config.tracks)
        self.layout = Layout()
        self.seconds = 0

    @property
    def renderable(self) -> bool:
        return self.layout.renderable

    @property
    def lines(self) -> list[LineGeometry]:
        return self.layout.lines

    @property
    def visible_lines(self) -> int:
        return self.layout.visible_lines

    @property
    def min_size(self) -> tuple[int, int]:
        return (self.metrics.min_width, self.metrics.min_height)

    def update_layout(self, width: int, height: int) -> None:
        """Recompute all row geometry for a *width* x *height* screen."""
        was_renderable = self.layout.renderable
        self.layout = compute_layout(width, height, self.config.tracks, self.metrics)
        if was_renderable and not self.layout.renderable:
            logger.info(
                "Screen %dx%d is below the minimum %dx%d", width, height, *self.min_size
            )

    def tick(self, now: datetime) -> None:
        """Update local times and bars for the UTC instant *now*."""
        self.seconds = now.second
        if self.layout.renderable:
            tick_lines(self.layout.lines, self.config.tracks, now)

    def reload(self, config: Config, width: int, height: int) -> None:
        """Swap in an already-normalized *config* and lay it out again."""
        self.config = config
        self.metrics = measure_tracks(config.tracks)
        self.update_layout(width, height)
        logger.info("Dashboard reloaded with %d tracks", len(config.tracks))
