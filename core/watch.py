"""Config file change detection by modification-time polling."""

from __future__ import annotations

from pathlib import Path


class ConfigWatcher:
    """Reports each modification of a file once.

    A file that disappears is not a change; its reappearance is.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._stamp = self._read_stamp()

    def _read_stamp(self) -> tuple[int, int] | None:
        try:
            st = self.path.stat()
        except OSError:
            return None
        return (st.st_mtime_ns, st.st_size)

    def changed(self) -> bool:
        stamp = self._read_stamp()
        if stamp is None or stamp == self._stamp:
            return False
        self._stamp = stamp
        return True
