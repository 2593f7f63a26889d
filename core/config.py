"""Config file lookup, parsing and loading.

load_config() is the single path from a YAML file to a normalized Config;
it is used both at startup and for live reloads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from core.errors import ConfigLoadError
from core.fileio import read_yaml
from core.models import Config
from core.normalize import normalize_config
from core.workspace import config_search_paths, is_config_path

logger = logging.getLogger(__name__)


def find_config(name: str, cwd: Path | None = None) -> Path:
    """Resolve a config file path from a path or a bare config name.

    Names are searched as <name>.yaml in the current directory and then
    in the user config directory.
    """
    if is_config_path(name):
        path = Path(name).expanduser()
        if not path.is_file():
            raise ConfigLoadError(f"Config file not found: {path}")
        return path.resolve()

    paths = config_search_paths(name, cwd)
    for path in paths:
        if path.is_file():
            return path
    searched = "\n".join(f"  {p}" for p in paths)
    raise ConfigLoadError(f"{name}.yaml not found in any of the paths:\n{searched}")


def parse_config(data: Any) -> Config:
    """Build and normalize a Config from already-parsed YAML data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config must be a mapping, got {type(data).__name__}")
    return normalize_config(Config.from_dict(data))


def load_config(path: Path) -> Config:
    """Read, parse and normalize the config file at *path*."""
    try:
        data = read_yaml(path)
    except OSError as e:
        raise ConfigLoadError(f"Failed to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Failed to parse config file {path}:\n{e}") from e

    config = parse_config(data)
    logger.info("Loaded %s (%d tracks)", path, len(config.tracks))
    return config
