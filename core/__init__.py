"""tzbars core library — time model, range normalization, layout and ticks.

Public API re-exports for convenient imports:
    from core import load_config, Dashboard, paint_dashboard, ...
"""

# Time arithmetic
from core.timedomain import (
    MINUTES_PER_DAY,
    to_minutes,
    to_hour_minute,
    point_to_time,
    time_to_range,
)

# Errors
from core.errors import (
    ConfigError,
    ConfigLoadError,
    ConfigStructureError,
    RangeBoundsError,
    RangeOrderingError,
    RangeOverlapError,
    OffsetBoundsError,
)

# Models
from core.models import (
    TimeOfDay,
    TimeRange,
    TimeLabel,
    Track,
    Colors,
    Config,
    Rect,
    LineGeometry,
)

# Normalization
from core.normalize import (
    validate_ranges,
    fill_gaps,
    normalize_track,
    normalize_config,
)

# Config source
from core.workspace import config_dir, DEFAULT_CONFIG_NAME
from core.config import find_config, parse_config, load_config
from core.watch import ConfigWatcher

# Layout, ticks, dashboard
from core.layout import TitleMetrics, Layout, measure_tracks, compute_layout
from core.tick import tick_line, tick_lines
from core.dashboard import Dashboard

# Rendering
from core.paint import Cell, paint_line, paint_dashboard, rasterize

# Logging
from core.logs import configure_logging
