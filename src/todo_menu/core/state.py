# src/todo_menu/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo

    # Optional: the console loop serializes store access through it when set.
    lock: threading.Lock | None = None
