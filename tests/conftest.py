# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from duke.core.state import AppState
from duke.tasks.task_list import TaskList

from .fakes import FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="duke",
        log_level="WARNING",
        log_file_enabled=False,
        show_timestamps=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "duke.txt",
    )


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def task_list(storage: FakeStorage) -> TaskList:
    return TaskList(storage)


@pytest.fixture()
def state(settings: SimpleNamespace, task_list: TaskList) -> AppState:
    return AppState(settings=settings, task_list=task_list)
