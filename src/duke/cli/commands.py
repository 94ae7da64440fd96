# src/duke/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from ..core.errors import DukeError, InvalidCommandError
from ..core.parser import (
    command_keyword,
    extract_description,
    extract_index,
    extract_indexes,
    try_parse_date,
)
from ..tasks.task_list import ListFilter, TaskList
from ..tasks.task_models import TaskKind

logger = logging.getLogger(__name__)

FAREWELL_MESSAGE = "Hmph! It's not like I'll miss you or anything... Bye!"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one input line: text for the user plus exit/error flags."""

    text: str
    is_exit: bool = False
    error: DukeError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class Command:
    """
    One parsed input line.

    Subclasses implement `_run`, which calls exactly one TaskList operation and
    may raise DukeError. `execute` turns that into a CommandResult.
    """

    is_exit = False

    def _run(self, task_list: TaskList) -> str:
        raise NotImplementedError

    def execute(self, task_list: TaskList) -> CommandResult:
        try:
            text = self._run(task_list)
        except DukeError as e:
            logger.debug("%s failed: %s", type(self).__name__, type(e).__name__)
            return CommandResult(e.message, error=e)
        return CommandResult(text, is_exit=self.is_exit)


@dataclass(frozen=True, slots=True)
class ExitCommand(Command):
    is_exit = True

    def _run(self, task_list: TaskList) -> str:
        return FAREWELL_MESSAGE


@dataclass(frozen=True, slots=True)
class ListCommand(Command):
    filter_type: ListFilter = ListFilter.ALL
    filter_value: date | str | None = None

    def _run(self, task_list: TaskList) -> str:
        return task_list.list_tasks(self.filter_type, self.filter_value)


@dataclass(frozen=True, slots=True)
class AddCommand(Command):
    raw_description: str
    kind: TaskKind

    def _run(self, task_list: TaskList) -> str:
        return task_list.add(self.raw_description, self.kind)


@dataclass(frozen=True, slots=True)
class CompleteCommand(Command):
    indexes: tuple[int, ...] = field(default_factory=tuple)

    def _run(self, task_list: TaskList) -> str:
        return task_list.complete(*self.indexes)


@dataclass(frozen=True, slots=True)
class DeleteCommand(Command):
    index: int

    def _run(self, task_list: TaskList) -> str:
        return task_list.delete(self.index)


@dataclass(frozen=True, slots=True)
class InvalidCommand(Command):
    original_input: str

    def _run(self, task_list: TaskList) -> str:
        raise InvalidCommandError(self.original_input)


CommandBuilder = Callable[[str], Command]


class CommandRegistry:
    """Keyword -> command builder table. Keywords are matched exactly (case-sensitive)."""

    def __init__(self) -> None:
        self._builders: dict[str, CommandBuilder] = {}
        self._help: dict[str, str] = {}

    def register(self, keyword: str, builder: CommandBuilder, help_text: str) -> None:
        self._builders[keyword] = builder
        self._help[keyword] = help_text

    def parse(self, line: str) -> Command:
        """
        Turn a raw line into a Command.

        Argument errors (missing description, bad index, ...) are raised here,
        before anything touches the task list.
        """
        builder = self._builders.get(command_keyword(line))
        if builder is None:
            return InvalidCommand(line)
        return builder(line)

    def build_help(self) -> str:
        lines = ["Here's what I understand:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)


def _build_check(line: str) -> Command:
    arg = extract_description(line)
    day = try_parse_date(arg)
    if day is not None:
        return ListCommand(ListFilter.DATE, day)
    return ListCommand(ListFilter.KEYWORD, arg)


registry = CommandRegistry()

registry.register("bye", lambda line: ExitCommand(), "bye")
registry.register("list", lambda line: ListCommand(), "list")
registry.register("check", _build_check, "check <date-or-keyword>")
registry.register(
    "done", lambda line: CompleteCommand(tuple(extract_indexes(line))), "done <index> [<index>...]"
)
registry.register(
    "todo", lambda line: AddCommand(extract_description(line), TaskKind.TODO), "todo <description>"
)
registry.register(
    "deadline",
    lambda line: AddCommand(extract_description(line), TaskKind.DEADLINE),
    "deadline <description> /by <date> [<time>]",
)
registry.register(
    "event",
    lambda line: AddCommand(extract_description(line), TaskKind.EVENT),
    "event <description> /at <date> [<time>] [to [<date>] [<time>]]",
)
registry.register("delete", lambda line: DeleteCommand(extract_index(line)), "delete <index>")


def parse_command(line: str) -> Command:
    return registry.parse(line)


def run_line(task_list: TaskList, line: str) -> CommandResult:
    """Parse and execute one input line; validation failures come back as error results."""
    try:
        command = parse_command(line)
    except DukeError as e:
        logger.debug("Parse failed for %r: %s", line, type(e).__name__)
        return CommandResult(e.message, error=e)
    return command.execute(task_list)
