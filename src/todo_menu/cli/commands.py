# src/todo_menu/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_api import format_task, format_task_list
from ..tasks.task_store import TaskNotFoundError

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]
MenuHandler = Callable[[AppState, Prompt], str]


class InputReadError(RuntimeError):
    """The input stream did not produce a line (closed stream, EOF)."""


class InputParseError(ValueError):
    """A line could not be parsed as the expected integer."""

    def __init__(self, what: str, raw: str) -> None:
        super().__init__(f"Expected {what}, got {raw!r}")
        self.what = what
        self.raw = raw


def _parse_non_negative_int(raw: str, what: str) -> int:
    s = raw.strip()
    # isdigit() alone accepts "²" and other digits int() rejects
    if not (s.isascii() and s.isdigit()):
        raise InputParseError(what, raw)
    try:
        return int(s)
    except ValueError:
        raise InputParseError(what, raw) from None


def parse_task_id(raw: str) -> int:
    return _parse_non_negative_int(raw, "a task id")


@dataclass(slots=True, frozen=True)
class MenuOption:
    number: int
    label: str
    handler: MenuHandler | None  # None: leaves the loop


class MenuRegistry:
    """Numbered menu options used by the console connector (1 = list, ..., 6 = exit)."""

    def __init__(self) -> None:
        self._options: dict[int, MenuOption] = {}

    def register(self, number: int, label: str, handler: MenuHandler | None) -> None:
        self._options[number] = MenuOption(number=number, label=label, handler=handler)

    @property
    def bounds(self) -> tuple[int, int]:
        if not self._options:
            return (0, 0)
        return (min(self._options), max(self._options))

    def range_hint(self) -> str:
        lo, hi = self.bounds
        return f"Please enter a value between {lo}-{hi}"

    def parse_choice(self, raw: str) -> int:
        """
        Parse a menu selection.
        Raises InputParseError for non-numeric input and for numbers with no option.
        """
        number = _parse_non_negative_int(raw, "a menu option")
        if number not in self._options:
            raise InputParseError("a menu option", raw)
        return number

    def is_exit(self, number: int) -> bool:
        option = self._options.get(number)
        return option is not None and option.handler is None

    def handle(self, state: AppState, number: int, prompt: Prompt) -> str:
        option = self._options[number]
        if option.handler is None:
            return ""
        logger.debug("Menu option %s (%s)", number, option.label)
        return option.handler(state, prompt)

    def build_menu(self) -> str:
        lines = [f"    {o.number} = {o.label}" for o in sorted(self._options.values(), key=lambda o: o.number)]
        return "\n" + "\n".join(lines) + "\n"


registry = MenuRegistry()


def cmd_list(state: AppState, prompt: Prompt) -> str:
    return format_task_list(state.task_store.list_items())


def cmd_add(state: AppState, prompt: Prompt) -> str:
    text = prompt("Input task text: ").strip()
    task = state.task_store.create(text)
    return f"Task {task.id} created"


def cmd_get(state: AppState, prompt: Prompt) -> str:
    task_id = parse_task_id(prompt("Which Task: "))
    task = state.task_store.get(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return format_task(task, slot_id=task_id)


def cmd_update(state: AppState, prompt: Prompt) -> str:
    """
    Asks for the id first and only asks for new text when the task exists.
    """
    task_id = parse_task_id(prompt("Which Task to update: "))
    if state.task_store.get(task_id) is None:
        raise TaskNotFoundError(task_id)

    new_text = prompt("Task text: ").strip()
    state.task_store.update(task_id, new_text)
    return "Task updated successfully"


def cmd_remove(state: AppState, prompt: Prompt) -> str:
    task_id = parse_task_id(prompt("Which task you want to delete: "))
    state.task_store.remove(task_id)
    return "Task removed successfully"


registry.register(1, "List all Tasks", cmd_list)
registry.register(2, "Add a new Task", cmd_add)
registry.register(3, "Retrieve task by id", cmd_get)
registry.register(4, "Update Task Text", cmd_update)
registry.register(5, "Remove Task", cmd_remove)
registry.register(6, "Exit", None)
