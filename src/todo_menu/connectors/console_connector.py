# src/todo_menu/connectors/console_connector.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable

from ..cli.commands import InputParseError, InputReadError, MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.state import AppState
from ..tasks.task_store import TaskNotFoundError

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[..., None]


def _make_prompt(input_fn: InputFn) -> Callable[[str], str]:
    def prompt(text: str) -> str:
        try:
            return input_fn(text)
        except EOFError as e:
            raise InputReadError("input stream closed") from e

    return prompt


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn | None = None,
    print_fn: PrintFn | None = None,
    registry: MenuRegistry | None = None,
) -> None:
    """
    Blocking menu loop: read a selection, run at most one store operation, print the result.

    Ends on the exit option, on EOF at the selection prompt, or on Ctrl+C.
    """
    registry = registry or menu_registry
    input_fn = input_fn or input
    print_fn = print_fn or print
    prompt = _make_prompt(input_fn)
    lock = getattr(state, "lock", None)
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))

    logger.info("Console connector started.")
    print_fn(f"Welcome to the {app_name} list app...")

    while True:
        print_fn(registry.build_menu())

        try:
            raw = prompt("Select an option: ")
        except InputReadError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print_fn()
            break

        try:
            choice = registry.parse_choice(raw)
        except InputParseError:
            logger.debug("Rejected menu selection %r", raw)
            print_fn(registry.range_hint())
            continue

        if registry.is_exit(choice):
            logger.info("Console exit option selected.")
            break

        try:
            with lock if lock is not None else contextlib.nullcontext():
                reply = registry.handle(state, choice, prompt)
        except TaskNotFoundError as e:
            logger.debug("Task lookup failed: %s", e)
            reply = "Task not found"
        except InputParseError as e:
            reply = f"Error reading input id for Task: {e}"
        except InputReadError as e:
            reply = f"Error reading input: {e}"
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print_fn()
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = "Internal error while handling a menu option."

        print_fn(reply)

    logger.info("Console connector finished.")
