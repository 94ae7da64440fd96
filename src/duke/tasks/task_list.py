# src/duke/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from enum import StrEnum

from ..core.errors import InvalidIndexError
from ..core.parser import parse_date, split_deadline, split_event
from ..core.ports import TaskStorage
from .codec import decode_all, describe, display, encode
from .task_models import (
    Deadline,
    Event,
    Task,
    TaskKind,
    ToDo,
    contains_keyword,
    mark_completed,
    occurs_on,
)

logger = logging.getLogger(__name__)

NO_TASKS_MESSAGE = "You have no tasks currently."
ALREADY_COMPLETED_MESSAGE = "Wait...  You've already completed this task before you dummy!"


class ListFilter(StrEnum):
    ALL = "all"
    DATE = "date"
    KEYWORD = "keyword"


def _remaining(n: int) -> str:
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list. Do your best doing them okay?"


class TaskList:
    """
    The in-memory task sequence plus its storage.

    Indexes in the public API are 1-based. Every mutation writes a full
    snapshot of the list back to storage before returning.
    """

    def __init__(self, storage: TaskStorage, tasks: list[Task] | None = None) -> None:
        self._storage = storage
        self._tasks: list[Task] = list(tasks) if tasks else []

    @classmethod
    def load(cls, storage: TaskStorage) -> TaskList:
        """Build a list from whatever the storage currently holds."""
        lines = storage.load_lines()
        tasks = decode_all(lines)
        skipped = sum(1 for line in lines if line.strip()) - len(tasks)
        logger.info("Loaded %d tasks (%d skipped)", len(tasks), skipped)
        return cls(storage, tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index - 1]

    def snapshot(self) -> list[str]:
        return [encode(t) for t in self._tasks]

    # ---- internals ----

    def _check_index(self, index: int) -> None:
        if index < 1 or index > len(self._tasks):
            raise InvalidIndexError(len(self._tasks))

    def _persist(self) -> None:
        self._storage.save_lines(self.snapshot())

    @staticmethod
    def _build(raw_description: str, kind: TaskKind) -> Task:
        match kind:
            case TaskKind.TODO:
                return ToDo(raw_description)
            case TaskKind.DEADLINE:
                description, by_text = split_deadline(raw_description)
                return Deadline.from_text(description, by_text)
            case TaskKind.EVENT:
                description, at_text = split_event(raw_description)
                return Event.from_text(description, at_text)
        raise ValueError(f"unknown task kind: {kind!r}")

    # ---- operations ----

    def add(self, raw_description: str, kind: TaskKind) -> str:
        task = self._build(raw_description, kind)
        self._tasks.append(task)
        self._persist()
        logger.debug("Task added kind=%s total=%d", kind.value, len(self._tasks))
        return (
            "I've added this task but it's not like I did it for you or anything!\n"
            f"  {describe(task)}\n"
            f"{_remaining(len(self._tasks))}"
        )

    def list_tasks(
        self,
        filter_type: ListFilter = ListFilter.ALL,
        filter_value: date | str | None = None,
    ) -> str:
        """
        Render the tasks, numbered 1..k for the rows shown.

        DATE keeps deadlines due on the day and events spanning it;
        KEYWORD is a case-insensitive substring match on the description.
        """
        match filter_type:
            case ListFilter.DATE:
                day = filter_value if isinstance(filter_value, date) else parse_date(str(filter_value))
                shown = [t for t in self._tasks if occurs_on(t, day)]
            case ListFilter.KEYWORD:
                keyword = str(filter_value or "")
                shown = [t for t in self._tasks if contains_keyword(t, keyword)]
            case _:
                shown = list(self._tasks)

        if not shown:
            return NO_TASKS_MESSAGE
        return "\n".join(display(t, i) for i, t in enumerate(shown, start=1))

    def complete(self, *indexes: int) -> str:
        """
        Mark one or more tasks as done.

        Every index is checked before anything changes, so a single bad index
        leaves the whole list untouched.
        """
        if not indexes:
            raise InvalidIndexError(len(self._tasks))
        for index in indexes:
            self._check_index(index)

        lines: list[str] = []
        for index in indexes:
            task = self._tasks[index - 1]
            if mark_completed(task):
                lines.append(f"  {describe(task)}")
            else:
                lines.append(ALREADY_COMPLETED_MESSAGE)

        self._persist()
        logger.debug("Tasks completed indexes=%s", list(indexes))

        if len(indexes) == 1:
            if lines[0] == ALREADY_COMPLETED_MESSAGE:
                return ALREADY_COMPLETED_MESSAGE
            return "You completed a task! Maybe you aren't so incompetent after all.\n" + lines[0]
        return "You completed some tasks! Maybe you aren't so incompetent after all.\n" + "\n".join(lines)

    def delete(self, index: int) -> str:
        self._check_index(index)
        task = self._tasks.pop(index - 1)
        self._persist()
        logger.debug("Task deleted index=%d total=%d", index, len(self._tasks))
        return (
            "I've deleted this task so show me some gratitude!\n"
            f"  {describe(task)}\n"
            f"{_remaining(len(self._tasks))}"
        )
