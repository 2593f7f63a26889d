"""Config directory and path helpers for tzbars."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CONFIG_NAME = "default"
CONFIG_SUFFIXES = (".yaml", ".yml")


def config_dir() -> Path:
    """Get the user config directory (holds <name>.yaml files)."""
    return Path(
        os.environ.get("TZBARS_CONFIG_DIR", str(Path.home() / ".config" / "tzbars"))
    ).expanduser().resolve()


def config_search_paths(name: str, cwd: Path | None = None) -> list[Path]:
    """Candidate locations of config *name*, in lookup order."""
    if cwd is None:
        cwd = Path.cwd()
    fname = f"{name}.yaml"
    return [cwd / fname, config_dir() / fname]


def is_config_path(name: str) -> bool:
    return name.endswith(CONFIG_SUFFIXES)
