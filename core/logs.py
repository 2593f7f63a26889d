"""Logging setup for tzbars.

Library modules log through logging.getLogger(__name__); the CLI decides
where records go. While the Textual screen is live nothing may write to the
terminal, so records go to a file or to the Textual devtools console.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(log_file: Path | None = None, level: int | str = logging.INFO) -> logging.Handler:
    """Route the root logger to *log_file*, or to Textual's devtools console."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(handler)
    root.setLevel(level)
    return handler
