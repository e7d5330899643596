# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from todo_menu.core.state import AppState
from todo_menu.tasks.id_generator import IdentifierGenerator
from todo_menu.tasks.task_models import UpdateMode
from todo_menu.tasks.task_store import TaskStore

from .fakes import FixedClock


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_to_file=False,
        update_mode=UpdateMode.PRESERVE,
        id_start=1,
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(1_700_000_000.0)


@pytest.fixture()
def store(clock: FixedClock) -> TaskStore:
    return TaskStore(IdentifierGenerator(), clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real in-memory TaskStore and a deterministic clock."""
    return AppState(settings=settings, task_store=store)
