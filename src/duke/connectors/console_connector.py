# src/duke/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import run_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "    " + "_" * 60
INDENT = "     "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_block(state: AppState, text: str) -> None:
    """Print a reply framed by divider lines, every line indented."""
    prefix = ""
    if getattr(state.settings, "show_timestamps", False):
        prefix = f"[{_ts_local()}] "
    print(DIVIDER)
    for line in text.splitlines() or [""]:
        print(f"{INDENT}{prefix}{line}")
    print(DIVIDER)


def greeting(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "duke")).capitalize()
    return (
        f"Hmph. I'm {app_name}. It's not like I want to keep track of your tasks or anything...\n"
        f"{command_registry.build_help()}"
    )


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_list))
    _print_block(state, greeting(state))

    while True:
        try:
            user_input = input()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input.strip():
            continue

        try:
            result = run_line(state.task_list, user_input)
        except OSError:
            logger.exception("Failed to save tasks.")
            _print_block(state, "I couldn't save your tasks! Check the log, baka.")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            _print_block(state, "Internal error while handling a command.")
            continue

        if result.is_error:
            logger.info("Rejected input %r: %s", user_input, type(result.error).__name__)

        _print_block(state, result.text)

        if result.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
