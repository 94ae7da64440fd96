# src/duke/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class FileTaskStore:
    """
    Flat-file task store.

    One encoded task per line. Every save rewrites the whole file:
    - write to a sibling .tmp file
    - os.replace it over the real one

    A missing file reads as an empty list.
    """

    def __init__(self, path: str | Path = "duke.txt") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("FileTaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def load_lines(self) -> list[str]:
        """Read the file line by line; a line that is not valid UTF-8 is dropped."""
        if not self._path.exists():
            return []
        lines: list[str] = []
        for lineno, raw in enumerate(self._path.read_bytes().splitlines(), start=1):
            try:
                lines.append(raw.decode("utf-8"))
            except UnicodeDecodeError:
                logger.warning("Skipping undecodable line %d in %s", lineno, self._path)
        logger.debug("Loaded %d lines from %s", len(lines), self._path)
        return lines

    def save_lines(self, lines: Sequence[str]) -> None:
        content = "".join(f"{line}\n" for line in lines)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(content, "utf-8")
        os.replace(tmp, self._path)
        logger.debug("Saved %d lines to %s", len(lines), self._path)
