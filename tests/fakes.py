# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence


class FakeStorage:
    """
    In-memory TaskStorage for unit tests.

    - Starts from the given lines
    - Records every snapshot written, for assertions on persistence
    """

    def __init__(self, lines: list[str] | None = None) -> None:
        self.lines: list[str] = list(lines or [])
        self.saves: list[list[str]] = []

    def load_lines(self) -> list[str]:
        return list(self.lines)

    def save_lines(self, lines: Sequence[str]) -> None:
        self.lines = list(lines)
        self.saves.append(list(lines))


class FailingStorage(FakeStorage):
    """Storage whose writes always fail, like a read-only disk."""

    def save_lines(self, lines: Sequence[str]) -> None:
        raise OSError("disk is read-only")
