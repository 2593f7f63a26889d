#!/usr/bin/env python3
"""tzbars — world clock dashboard for the terminal, powered by Textual."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import yaml
from rich.console import Console
from rich.segment import Segment
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.strip import Strip
from textual.widget import Widget

from core import (
    ConfigError,
    ConfigWatcher,
    Dashboard,
    DEFAULT_CONFIG_NAME,
    configure_logging,
    find_config,
    load_config,
    paint_dashboard,
    rasterize,
)

logger = logging.getLogger("tzbars")

TICK_SECONDS = 1.0
RELOAD_POLL_SECONDS = 1.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

ClockBoard {
    width: 1fr;
    height: 1fr;
}
"""


# ── Custom widgets ─────────────────────────────────────────────


class ClockBoard(Widget):
    """Paints the dashboard rows; blank while the screen is too small."""

    def __init__(self, dashboard: Dashboard, **kwargs) -> None:
        super().__init__(**kwargs)
        self.dashboard = dashboard
        self._rows: list[list[tuple[str, object]]] = []

    def on_resize(self, event: events.Resize) -> None:
        self.dashboard.update_layout(event.size.width, event.size.height)
        self.repaint()

    def repaint(self) -> None:
        self.dashboard.tick(_utcnow())
        width, height = self.size.width, self.size.height
        self._rows = rasterize(paint_dashboard(self.dashboard), width, height)
        self.refresh()

    def render_line(self, y: int) -> Strip:
        if y >= len(self._rows):
            return Strip.blank(self.size.width)
        return Strip([Segment(glyph, style) for glyph, style in self._rows[y]])


# ── Main app ───────────────────────────────────────────────────


class TzBarsApp(App):
    """tzbars — live world clock dashboard."""

    TITLE = "tzbars"
    CSS = CSS

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, dashboard: Dashboard, config_path: Path) -> None:
        super().__init__()
        self.config_path = config_path
        self._board = ClockBoard(dashboard)
        self._watcher = ConfigWatcher(config_path)

    def compose(self) -> ComposeResult:
        yield self._board

    def on_mount(self) -> None:
        self.set_interval(TICK_SECONDS, self._board.repaint)
        self.set_interval(RELOAD_POLL_SECONDS, self._check_reload)
        logger.info("Live mode started with %s", self.config_path)

    def _check_reload(self) -> None:
        if not self._watcher.changed():
            return
        try:
            config = load_config(self.config_path)
        except ConfigError as e:
            # stay on the current config if the new one is invalid
            logger.warning("Config reload rejected: %s", e)
            self.notify(str(e), title="Config not reloaded", severity="error", timeout=8)
            return

        size = self._board.size
        self._board.dashboard.reload(config, size.width, size.height)
        self._board.repaint()
        self.notify(f"{len(config.tracks)} tracks", title="Config reloaded")


# ── One-shot output ────────────────────────────────────────────


def print_once(dashboard: Dashboard, console: Console) -> int:
    """Print the dashboard once at the console's size. Returns exit code."""
    width, height = console.size
    dashboard.update_layout(width, height)
    if not dashboard.renderable:
        min_w, min_h = dashboard.min_size
        print(f"Terminal too small: need at least {min_w}x{min_h}, have {width}x{height}", file=sys.stderr)
        return 1

    dashboard.tick(_utcnow())
    rows = rasterize(paint_dashboard(dashboard), width, height)
    # top margin + visible rows
    for row in rows[: dashboard.visible_lines + 1]:
        text = Text()
        for glyph, style in row:
            text.append(glyph, style)
        console.print(text, no_wrap=True, overflow="crop", crop=True)
    return 0


# ── Entry point ────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tzbars", description="Multi-timezone clock dashboard")
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_NAME,
        help="Config file path, or a name without '.yaml' searched in ./ and the "
        "config directory ($TZBARS_CONFIG_DIR or ~/.config/tzbars)",
    )
    parser.add_argument("-l", "--live", action="store_true", help="Keep running and update every second")
    parser.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the normalized config (sorted tracks, gaps filled) as YAML and exit",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Minimum level of log records (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    try:
        config_path = find_config(args.config)
        dashboard = Dashboard(load_config(config_path))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.dump_config:
        print(yaml.safe_dump(dashboard.config.to_dict(), sort_keys=False, allow_unicode=True), end="")
        return

    if not args.live:
        sys.exit(print_once(dashboard, Console()))

    app = TzBarsApp(dashboard, config_path)
    app.run()
    logger.info("Exited")


if __name__ == "__main__":
    main()
