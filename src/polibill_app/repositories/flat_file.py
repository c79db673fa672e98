"""Line-oriented flat-file backing store."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FlatFileStore:
    """Read and rewrite one UTF-8 record file.

    Bytes that are not valid UTF-8 are carried through as surrogate escapes,
    so a rewrite puts them back on disk unchanged.

    Every write replaces the whole file in place. There is no locking and no
    partial-write recovery: concurrent writers or a crash mid-rewrite can
    leave the file corrupted.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_lines(self) -> list[str]:
        """Return trimmed, non-blank lines; a missing file reads as empty."""
        if not self._path.exists():
            logger.debug("Record file %s does not exist yet", self._path)
            return []
        with self._path.open("r", encoding="utf-8", errors="surrogateescape") as file:
            lines = [line.strip() for line in file]
        return [line for line in lines if line]

    def write_lines(self, lines: list[str]) -> None:
        """Replace the file contents with one record per line."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8", errors="surrogateescape", newline="\n") as file:
                for line in lines:
                    file.write(line + "\n")
        except OSError:
            logger.exception("Failed to rewrite %s; in-memory state is ahead of disk", self._path)
            raise
        logger.debug("Rewrote %s with %d records", self._path, len(lines))
