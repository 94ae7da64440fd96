# src/duke/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum

from ..core.parser import parse_deadline_when, parse_event_when


class TaskKind(StrEnum):
    """
    Task variants.

    Values double as the command keywords that create them.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


@dataclass(slots=True)
class ToDo:
    description: str
    completed: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.TODO


@dataclass(slots=True)
class Deadline:
    description: str
    by_text: str
    due_date: date
    due_time: time | None = None
    completed: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.DEADLINE

    @classmethod
    def from_text(cls, description: str, by_text: str, *, completed: bool = False) -> Deadline:
        """Build a Deadline from the raw `/by` text (`<date>[ <time>]`)."""
        due_date, due_time = parse_deadline_when(by_text)
        return cls(
            description=description,
            by_text=by_text,
            due_date=due_date,
            due_time=due_time,
            completed=completed,
        )


@dataclass(slots=True)
class Event:
    """
    An event window.

    `end_date` / `end_time` are None when the `/at` text names a single point
    in time. The raw text is kept so the persisted line round-trips unchanged.
    """

    description: str
    at_text: str
    start_date: date
    start_time: time | None = None
    end_date: date | None = None
    end_time: time | None = None
    completed: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.EVENT

    @classmethod
    def from_text(cls, description: str, at_text: str, *, completed: bool = False) -> Event:
        start_date, start_time, end_date, end_time = parse_event_when(at_text)
        return cls(
            description=description,
            at_text=at_text,
            start_date=start_date,
            start_time=start_time,
            end_date=end_date,
            end_time=end_time,
            completed=completed,
        )


Task = ToDo | Deadline | Event


def occurs_on(task: Task, day: date) -> bool:
    """True if the task's schedule touches `day` (todos never do)."""
    match task:
        case Deadline(due_date=due_date):
            return due_date == day
        case Event(start_date=start, end_date=end):
            return start <= day <= (end or start)
        case _:
            return False


def contains_keyword(task: Task, keyword: str) -> bool:
    return keyword.lower() in task.description.lower()


def mark_completed(task: Task) -> bool:
    """
    Flip the completion flag.

    Returns False (and leaves the task alone) if it was already completed.
    """
    if task.completed:
        return False
    task.completed = True
    return True
