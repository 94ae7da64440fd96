# src/duke/core/errors.py

"""
User-input validation failures.

Every error carries the message shown to the user. They are raised by the
parser and the task list and turned into text once, in `run_line`.
"""

from __future__ import annotations


class DukeError(ValueError):
    """Base class for all input validation failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EmptyDescriptionError(DukeError):
    def __init__(self) -> None:
        super().__init__("BAKA! The description of a task cannot be empty!")


class MissingIndexError(DukeError):
    def __init__(self) -> None:
        super().__init__(
            "BAKA! You need to provide an index so I know which task you are referring to!"
        )


class InvalidIndexInputError(DukeError):
    """Index text that is not a whole number (e.g. `done two`)."""

    def __init__(self, index_text: str) -> None:
        self.index_text = index_text
        super().__init__(
            "BAKA! An index has to be a whole number!\n"
            f"     Index: {index_text}"
        )


class MissingArgumentError(DukeError):
    def __init__(self, tag: str, kind: str) -> None:
        self.tag = tag
        self.kind = kind
        super().__init__(f"BAKA! You're missing the '{tag}' argument to add a {kind}!")


class InvalidCommandError(DukeError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            "BAKA! I don't understand this command!\n"
            f"     Command: {command}\n"
            "     You might want to check for spelling and potential whitespaces!"
        )


class InvalidIndexError(DukeError):
    def __init__(self, num_tasks: int) -> None:
        self.num_tasks = num_tasks
        super().__init__(
            f"BAKA! Input a valid index!! You have {num_tasks} tasks currently!"
        )


class InvalidTimeInputError(DukeError):
    def __init__(self, time_text: str) -> None:
        self.time_text = time_text
        super().__init__(
            "BAKA! I don't understand this Time input!\n"
            f"     Time: {time_text}\n"
            "     It should be a valid time in the form HH:MM or HHMM!"
        )


class InvalidDateInputError(DukeError):
    def __init__(self, date_text: str) -> None:
        self.date_text = date_text
        super().__init__(
            "BAKA! I don't understand this Date input!\n"
            f"     Date: {date_text}\n"
            "     It should be a valid date in the form dd-mm-yyyy, dd/mm/yyyy or yyyy-mm-dd!"
        )
