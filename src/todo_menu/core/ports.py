# src/todo_menu/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu.

Menu handlers depend on this Protocol instead of the concrete TaskStore,
so tests can drive them with any repository.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...
    def list_tasks(self) -> list[Any]: ...
    def list_items(self) -> list[tuple[int, Any]]: ...

    def create(self, text: str) -> Any: ...
    def get(self, task_id: int) -> Any | None: ...

    # Both raise TaskNotFoundError for unknown ids.
    def update(self, task_id: int, new_text: str) -> Any: ...
    def remove(self, task_id: int) -> Any: ...
