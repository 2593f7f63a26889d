"""Shared test fixtures for tzbars tests."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
import yaml


SAMPLE_CONFIG = {
    "colors": {"base": "bright_black", "title": "white"},
    "tracks": [
        {
            "name": "Tokyo",
            "shortname": "TYO",
            "offset": [9, 0],
            "show_badge": True,
            "time_label": {"seconds": True, "blink": True},
            "ranges": [
                {"start": "23:00", "end": "24:00", "color": "blue"},
                {"start": "09:00", "end": "18:00", "color": "green", "fill": True},
            ],
        },
        {
            "name": "London",
            "shortname": "LON",
            "offset": [1, 0],
            "ranges": [{"start": "00:00", "end": "07:00", "color": "blue"}],
        },
        {
            "name": "New York",
            "offset": [-4, 0],
            "time_label": {"use_range_color": True},
        },
    ],
}


@pytest.fixture
def sample_data() -> dict:
    """A fresh copy of the sample config mapping."""
    return yaml.safe_load(yaml.dump(SAMPLE_CONFIG))


@pytest.fixture
def config_home(tmp_path: Path) -> Path:
    """Create a temporary config directory holding default.yaml."""
    root = tmp_path / "config"
    root.mkdir(parents=True)
    (root / "default.yaml").write_text(
        yaml.dump(SAMPLE_CONFIG, default_flow_style=False), encoding="utf-8"
    )

    os.environ["TZBARS_CONFIG_DIR"] = str(root)
    yield root
    if "TZBARS_CONFIG_DIR" in os.environ:
        del os.environ["TZBARS_CONFIG_DIR"]


@pytest.fixture
def restore_logging():
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
