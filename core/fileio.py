"""File I/O helpers for tzbars."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path) -> Any:
    """Read a YAML file, returning None if it is empty.

    Raises FileNotFoundError for a missing file and yaml.YAMLError on
    malformed input.
    """
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return None
    return yaml.safe_load(text)
