# src/duke/tasks/codec.py

"""
Line codec for tasks.

Persisted form, one task per line:

    T | <0|1> | <description>
    D | <0|1> | <description> | <by-text>
    E | <0|1> | <description> | <at-text>

The delimiter is not escaped. A description containing " | " is written as-is;
on load every field between the completion flag and the trailing date field is
joined back into the description.
"""

from __future__ import annotations

import logging
from datetime import date, time

from ..core.errors import DukeError
from .task_models import Deadline, Event, Task, ToDo

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = " | "

_DATE_DISPLAY = "%b %d %Y"
_TIME_DISPLAY = "%H:%M"


def encode(task: Task) -> str:
    done = 1 if task.completed else 0
    match task:
        case ToDo():
            fields = ["T", str(done), task.description]
        case Deadline():
            fields = ["D", str(done), task.description, task.by_text]
        case Event():
            fields = ["E", str(done), task.description, task.at_text]
        case _:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")
    return FIELD_SEPARATOR.join(fields)


def decode(line: str) -> Task | None:
    """
    Parse one persisted line.

    Returns None for anything that cannot be read back (unknown kind letter,
    missing fields, bad completion flag, unparseable date). Those entries are
    dropped from the list on the next save.
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        return None

    fields = line.split(FIELD_SEPARATOR)
    letter = fields[0]

    if len(fields) < 3 or fields[1] not in ("0", "1") or not fields[2].strip():
        logger.warning("Skipping malformed task line: %r", line)
        return None
    completed = fields[1] == "1"

    try:
        match letter:
            case "T":
                return ToDo(FIELD_SEPARATOR.join(fields[2:]), completed=completed)
            case "D" if len(fields) >= 4:
                description = FIELD_SEPARATOR.join(fields[2:-1])
                return Deadline.from_text(description, fields[-1], completed=completed)
            case "E" if len(fields) >= 4:
                description = FIELD_SEPARATOR.join(fields[2:-1])
                return Event.from_text(description, fields[-1], completed=completed)
    except DukeError as e:
        logger.warning("Skipping task line with bad schedule %r: %s", line, e.message)
        return None

    logger.warning("Skipping unrecognised task line: %r", line)
    return None


def decode_all(lines: list[str]) -> list[Task]:
    tasks: list[Task] = []
    for line in lines:
        task = decode(line)
        if task is not None:
            tasks.append(task)
    return tasks


def _fmt_date(d: date) -> str:
    return d.strftime(_DATE_DISPLAY)


def _fmt_point(d: date, t: time | None) -> str:
    if t is None:
        return _fmt_date(d)
    return f"{_fmt_date(d)} {t.strftime(_TIME_DISPLAY)}"


def _schedule_suffix(task: Task) -> str:
    match task:
        case Deadline(due_date=due_date, due_time=due_time):
            return f" (by: {_fmt_point(due_date, due_time)})"
        case Event(start_date=start_date, start_time=start_time, end_date=end_date, end_time=end_time):
            when = _fmt_point(start_date, start_time)
            end_parts: list[str] = []
            if end_date is not None and end_date != start_date:
                end_parts.append(_fmt_date(end_date))
            if end_time is not None:
                end_parts.append(end_time.strftime(_TIME_DISPLAY))
            if end_parts:
                when = f"{when} - {' '.join(end_parts)}"
            return f" (at: {when})"
        case _:
            return ""


def describe(task: Task) -> str:
    """`[X] description (by: ...)` without a list index."""
    icon = "X" if task.completed else " "
    return f"[{icon}] {task.description}{_schedule_suffix(task)}"


def display(task: Task, index: int) -> str:
    return f"{index}:{describe(task)}"
