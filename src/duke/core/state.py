# src/duke/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_list import TaskList


@dataclass
class AppState:
    # Settings object (duke.config.Settings or a compatible namespace in tests).
    settings: Any

    task_list: TaskList
