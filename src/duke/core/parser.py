# src/duke/core/parser.py

"""
Input extraction helpers.

Each function takes raw text and either returns the extracted value or raises
a DukeError subclass. They are independent of each other and of the task list,
so every step of turning a command line into arguments can be tested alone.
"""

from __future__ import annotations

import re
from datetime import date, time

from .errors import (
    EmptyDescriptionError,
    InvalidDateInputError,
    InvalidIndexInputError,
    InvalidTimeInputError,
    MissingArgumentError,
    MissingIndexError,
)

DEADLINE_SEPARATOR = " /by "
EVENT_SEPARATOR = " /at "
EVENT_RANGE_SEPARATOR = " to "

_DMY_DASH = re.compile(r"(\d{2})-(\d{2})-(\d{4})", re.ASCII)
_DMY_SLASH = re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII)
_ISO = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_DIGITS = re.compile(r"\d+", re.ASCII)
_INDEX = re.compile(r"[-+]?\d+", re.ASCII)


def _split_keyword(line: str) -> tuple[str, str | None]:
    parts = line.split(" ", 1)
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def command_keyword(line: str) -> str:
    """First token of the line (everything before the first space)."""
    return _split_keyword(line)[0]


def extract_description(line: str) -> str:
    """
    Return the trimmed text after the command keyword.

    Raises EmptyDescriptionError if there is no tail or it is only whitespace.
    """
    _, tail = _split_keyword(line)
    if tail is None or not tail.strip():
        raise EmptyDescriptionError()
    return tail.strip()


def _parse_index(text: str) -> int:
    if not _INDEX.fullmatch(text):
        raise InvalidIndexInputError(text)
    return int(text)


def extract_index(line: str) -> int:
    """Parse the whole tail after the keyword as a single 1-based index."""
    _, tail = _split_keyword(line)
    if tail is None or not tail.strip():
        raise MissingIndexError()
    return _parse_index(tail.strip())


def extract_indexes(line: str) -> list[int]:
    """Parse one or more whitespace-separated indexes (`done 1 3 4`)."""
    _, tail = _split_keyword(line)
    if tail is None or not tail.strip():
        raise MissingIndexError()
    return [_parse_index(tok) for tok in tail.split()]


def _split_on(text: str, separator: str, kind: str) -> tuple[str, str]:
    tag = separator.strip()
    if separator not in text:
        raise MissingArgumentError(tag, kind)
    description, when = text.split(separator, 1)
    if not when.strip():
        raise MissingArgumentError(tag, kind)
    if not description.strip():
        raise EmptyDescriptionError()
    return description.strip(), when.strip()


def split_deadline(text: str) -> tuple[str, str]:
    """`submit report /by 01-12-2024` -> ("submit report", "01-12-2024")."""
    return _split_on(text, DEADLINE_SEPARATOR, "Deadline")


def split_event(text: str) -> tuple[str, str]:
    return _split_on(text, EVENT_SEPARATOR, "Event")


def parse_date(text: str) -> date:
    """
    Accepts dd-mm-yyyy, dd/mm/yyyy or yyyy-mm-dd.

    The shape must match exactly; the result must be a real calendar date.
    """
    if m := _DMY_DASH.fullmatch(text):
        day, month, year = m.groups()
    elif m := _DMY_SLASH.fullmatch(text):
        day, month, year = m.groups()
    elif m := _ISO.fullmatch(text):
        year, month, day = m.groups()
    else:
        raise InvalidDateInputError(text)

    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        raise InvalidDateInputError(text) from None


def _looks_like_time(text: str) -> bool:
    if len(text) == 4:
        return ":" not in text
    return len(text) == 5 and text.find(":") == 2


def parse_time(text: str) -> time:
    """Accepts hhmm or hh:mm on a 24-hour clock."""
    if ":" not in text and len(text) == 4:
        hours, minutes = text[:2], text[2:]
    elif text.find(":") == 2 and len(text) == 5:
        hours, minutes = text[:2], text[3:]
    else:
        raise InvalidTimeInputError(text)

    if not (_DIGITS.fullmatch(hours) and _DIGITS.fullmatch(minutes)):
        raise InvalidTimeInputError(text)

    try:
        return time(int(hours), int(minutes))
    except ValueError:
        raise InvalidTimeInputError(text) from None


def _parse_point(text: str) -> tuple[date, time | None]:
    tokens = text.split()
    if len(tokens) == 1:
        return parse_date(tokens[0]), None
    if len(tokens) == 2:
        return parse_date(tokens[0]), parse_time(tokens[1])
    raise InvalidDateInputError(text)


def parse_deadline_when(text: str) -> tuple[date, time | None]:
    """`<date>[ <time>]` -> (due_date, due_time)."""
    return _parse_point(text.strip())


def parse_event_when(text: str) -> tuple[date, time | None, date | None, time | None]:
    """
    `<date>[ <time>][ to [<date>][ <time>]]` -> (start_date, start_time, end_date, end_time).

    The end date defaults to the start date when only an end time is given.
    End date and time are None when there is no ` to ` part.
    """
    text = text.strip()
    if EVENT_RANGE_SEPARATOR not in text:
        start_date, start_time = _parse_point(text)
        return start_date, start_time, None, None

    start_text, end_text = text.split(EVENT_RANGE_SEPARATOR, 1)
    start_date, start_time = _parse_point(start_text)

    end_tokens = end_text.split()
    if len(end_tokens) == 1 and _looks_like_time(end_tokens[0]):
        end_date, end_time = start_date, parse_time(end_tokens[0])
    else:
        end_date, end_time = _parse_point(end_text)

    if end_date < start_date:
        raise InvalidDateInputError(text)
    if (
        end_date == start_date
        and start_time is not None
        and end_time is not None
        and end_time < start_time
    ):
        raise InvalidTimeInputError(end_text.strip())

    return start_date, start_time, end_date, end_time


def try_parse_date(text: str) -> date | None:
    """parse_date, but None instead of raising (used to classify `check` arguments)."""
    try:
        return parse_date(text)
    except InvalidDateInputError:
        return None
