"""Configuration errors raised while loading and normalizing tracks.

Every error aborts the load attempt as a whole; callers keep whatever
configuration they had before.
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Base class for all configuration failures."""


class ConfigLoadError(ConfigError):
    """Config file missing, unreadable, or not valid YAML."""


class ConfigStructureError(ConfigError):
    """No tracks, a nameless track, or a malformed field value."""


class RangeBoundsError(ConfigError):
    """A range endpoint is outside 00:00..24:00."""


class RangeOrderingError(ConfigError):
    """A range does not start strictly before it ends."""


class RangeOverlapError(ConfigError):
    """Two ranges of the same track overlap."""


class OffsetBoundsError(ConfigError):
    """UTC offset outside -23..23 hours / -59..59 minutes."""
