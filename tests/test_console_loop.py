# tests/test_console_loop.py

from __future__ import annotations

import threading

import pytest

from todo_menu.connectors.console_connector import run_console_loop

from .fakes import ScriptedConsole


def _run(state, lines: list) -> ScriptedConsole:
    console = ScriptedConsole(lines)
    run_console_loop(state, input_fn=console.input_fn, print_fn=console.print_fn)
    return console


def test_greeting_menu_and_exit(state) -> None:
    console = _run(state, ["6"])
    assert console.printed[0] == "Welcome to the todo list app..."
    assert "1 = List all Tasks" in console.output
    assert console.lines == []


def test_invalid_selection_reprompts_without_state_change(state) -> None:
    console = _run(state, ["abc", "9", "", "6"])
    assert console.output.count("Please enter a value between 1-6") == 3
    assert state.task_store.count_tasks() == 0


def test_full_session(state) -> None:
    console = _run(
        state,
        [
            "2", "x",
            "2", "y",
            "4", "1", "x2",
            "3", "1",
            "5", "2",
            "1",
            "6",
        ],
    )
    out = console.output
    assert "Task 1 created" in out
    assert "Task 2 created" in out
    assert "Task updated successfully" in out
    assert "Task removed successfully" in out

    remaining = state.task_store.list_tasks()
    assert [(t.id, t.text) for t in remaining] == [(1, "x2")]
    assert [h.text for h in remaining[0].history] == ["x"]


@pytest.mark.parametrize("option", ["3", "4", "5"])
@pytest.mark.parametrize("bad_id", ["one", "²"])
def test_malformed_task_id_is_recoverable(state, option: str, bad_id: str) -> None:
    state.task_store.create("keep me")
    console = _run(state, [option, bad_id, "2", "still alive", "6"])
    assert "Error reading input id for Task" in console.output
    assert "Internal error" not in console.output
    assert "Task 2 created" in console.output
    assert state.task_store.get(1).text == "keep me"


def test_superscript_digit_at_menu_reprompts(state) -> None:
    console = _run(state, ["²", "6"])
    assert "Please enter a value between 1-6" in console.output
    assert console.lines == []


def test_unknown_ids_report_not_found(state) -> None:
    console = _run(state, ["3", "1", "4", "1", "5", "1", "6"])
    assert console.printed.count("Task not found") == 3
    assert state.task_store.count_tasks() == 0


def test_eof_at_menu_ends_loop(state) -> None:
    console = _run(state, [])
    assert console.prompts == ["Select an option: "]


def test_eof_inside_operation_is_reported(state) -> None:
    console = _run(state, ["2", EOFError, "6"])
    assert "Error reading input: input stream closed" in console.output
    assert state.task_store.count_tasks() == 0


def test_keyboard_interrupt_ends_loop(state) -> None:
    console = _run(state, ["2", KeyboardInterrupt, "6"])
    assert console.lines == ["6"]


def test_handler_crash_is_contained(state, monkeypatch) -> None:
    def boom(text: str):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "create", boom)
    console = _run(state, ["2", "x", "6"])
    assert "Internal error while handling a menu option." in console.output


def test_uses_state_lock_when_present(state) -> None:
    state.lock = threading.Lock()
    _run(state, ["2", "x", "6"])
    assert state.task_store.count_tasks() == 1
    assert not state.lock.locked()
