# tests/test_commands.py

from __future__ import annotations

from datetime import date

import pytest

from duke.cli.commands import (
    FAREWELL_MESSAGE,
    AddCommand,
    CommandRegistry,
    CompleteCommand,
    DeleteCommand,
    ExitCommand,
    InvalidCommand,
    ListCommand,
    parse_command,
    run_line,
)
from duke.core.errors import (
    EmptyDescriptionError,
    InvalidCommandError,
    InvalidDateInputError,
    InvalidIndexError,
    InvalidIndexInputError,
    MissingArgumentError,
    MissingIndexError,
)
from duke.tasks.task_list import ListFilter, TaskList
from duke.tasks.task_models import TaskKind

from .fakes import FakeStorage


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("bye", ExitCommand()),
        ("list", ListCommand()),
        ("check meeting", ListCommand(ListFilter.KEYWORD, "meeting")),
        ("check 01/12/2024", ListCommand(ListFilter.DATE, date(2024, 12, 1))),
        ("done 2", CompleteCommand((2,))),
        ("done 1 3", CompleteCommand((1, 3))),
        ("todo read book", AddCommand("read book", TaskKind.TODO)),
        ("deadline pay /by 01-12-2024", AddCommand("pay /by 01-12-2024", TaskKind.DEADLINE)),
        ("event party /at 01-12-2024", AddCommand("party /at 01-12-2024", TaskKind.EVENT)),
        ("delete 4", DeleteCommand(4)),
        ("blah", InvalidCommand("blah")),
        ("LIST", InvalidCommand("LIST")),
        ("todo\tread", InvalidCommand("todo\tread")),
    ],
)
def test_parse_command_dispatch(line: str, expected) -> None:
    assert parse_command(line) == expected


@pytest.mark.parametrize(
    ("line", "error"),
    [
        ("todo", EmptyDescriptionError),
        ("todo    ", EmptyDescriptionError),
        ("check", EmptyDescriptionError),
        ("done", MissingIndexError),
        ("delete ", MissingIndexError),
        ("delete one", InvalidIndexInputError),
    ],
)
def test_parse_command_argument_errors(line: str, error: type) -> None:
    with pytest.raises(error):
        parse_command(line)


def test_scenario_todo_on_empty_list(task_list: TaskList) -> None:
    result = run_line(task_list, "todo read book")

    assert not result.is_error
    assert not result.is_exit
    assert "[ ] read book" in result.text
    assert "Now you have 1 task" in result.text


def test_scenario_deadline_on_impossible_date(task_list: TaskList, storage: FakeStorage) -> None:
    result = run_line(task_list, "deadline submit report /by 31-02-2024")

    assert isinstance(result.error, InvalidDateInputError)
    assert "31-02-2024" in result.text
    assert len(task_list) == 0
    assert storage.saves == []


def test_run_line_turns_every_failure_into_a_result(task_list: TaskList) -> None:
    assert isinstance(run_line(task_list, "deadline submit").error, MissingArgumentError)
    assert isinstance(run_line(task_list, "done 1").error, InvalidIndexError)
    assert isinstance(run_line(task_list, "todo").error, EmptyDescriptionError)


def test_invalid_command_names_input_verbatim(task_list: TaskList) -> None:
    result = run_line(task_list, "fly me to the moon")

    assert isinstance(result.error, InvalidCommandError)
    assert "Command: fly me to the moon" in result.text


def test_exit(task_list: TaskList) -> None:
    result = run_line(task_list, "bye")
    assert result.is_exit
    assert not result.is_error
    assert result.text == FAREWELL_MESSAGE


def test_session_flow(task_list: TaskList, storage: FakeStorage) -> None:
    run_line(task_list, "todo Team meeting")
    run_line(task_list, "deadline pay bills /by 2024-12-01 1800")
    run_line(task_list, "event MEETING prep /at 01-12-2024 0900 to 1000")

    assert run_line(task_list, "check meeting").text == (
        "1:[ ] Team meeting\n2:[ ] MEETING prep (at: Dec 01 2024 09:00 - 10:00)"
    )
    assert run_line(task_list, "check 2024-12-01").text == (
        "1:[ ] pay bills (by: Dec 01 2024 18:00)\n"
        "2:[ ] MEETING prep (at: Dec 01 2024 09:00 - 10:00)"
    )

    run_line(task_list, "done 1 2")
    run_line(task_list, "delete 3")

    assert storage.lines == [
        "T | 1 | Team meeting",
        "D | 1 | pay bills | 2024-12-01 1800",
    ]


def test_registry_unknown_keyword_is_invalid() -> None:
    reg = CommandRegistry()
    reg.register("ping", lambda line: ExitCommand(), "ping")

    assert reg.parse("ping") == ExitCommand()
    assert reg.parse("pong") == InvalidCommand("pong")
    assert reg.build_help().splitlines()[1] == "  ping"
