# src/duke/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list depends on a Protocol instead of a concrete file store,
which keeps persistence swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol


class TaskStorage(Protocol):
    """Snapshot storage for persisted task lines."""

    def load_lines(self) -> list[str]: ...

    def save_lines(self, lines: Sequence[str]) -> None: ...
