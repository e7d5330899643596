# src/todo_menu/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace

from .id_generator import IdentifierGenerator
from .task_models import Task, UpdateMode

logger = logging.getLogger(__name__)


class TaskNotFoundError(KeyError):
    """Raised when an operation references an id with no live task."""

    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task {self.task_id} not found"


class TaskStore:
    """
    In-memory task store keyed by identifier.

    State lives only as long as the store does:
    - ids come from an injected IdentifierGenerator and are never reused
    - update replaces the record and records the previous version in history
    - remove drops the task together with its history

    Nothing is evicted; the map and every history grow for the whole session.
    """

    def __init__(
        self,
        id_generator: IdentifierGenerator | None = None,
        *,
        update_mode: UpdateMode = UpdateMode.PRESERVE,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ids = id_generator or IdentifierGenerator()
        self._update_mode = update_mode
        self._clock = clock
        self._tasks: dict[int, Task] = {}
        logger.info("TaskStore ready update_mode=%s next_id=%s", update_mode.value, self._ids.peek())

    @property
    def update_mode(self) -> UpdateMode:
        return self._update_mode

    def _new_task(self, text: str) -> Task:
        return Task(id=self._ids.next_id(), text=text, created_at=float(self._clock()))

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks.values())

    def list_items(self) -> list[tuple[int, Task]]:
        """(slot_id, task) pairs; slot_id is the key update/remove/get expect."""
        return list(self._tasks.items())

    def create(self, text: str) -> Task:
        task = self._new_task(text)
        self._tasks[task.id] = task
        logger.debug("Task added id=%s", task.id)
        return task

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def update(self, task_id: int, new_text: str) -> Task:
        """
        Replace the text of task `task_id`, appending its previous version to history.

        Raises TaskNotFoundError (and changes nothing) if the id is unknown.
        """
        old = self._tasks.get(task_id)
        if old is None:
            raise TaskNotFoundError(task_id)

        history = (*old.history, old.snapshot(task_id))

        if self._update_mode is UpdateMode.REGENERATE:
            updated = replace(self._new_task(new_text), history=history)
        else:
            updated = replace(old, text=new_text, history=history)

        self._tasks[task_id] = updated
        logger.debug(
            "Task updated slot=%s id=%s versions=%s mode=%s",
            task_id,
            updated.id,
            len(history),
            self._update_mode.value,
        )
        return updated

    def remove(self, task_id: int) -> Task:
        try:
            task = self._tasks.pop(task_id)
        except KeyError:
            raise TaskNotFoundError(task_id) from None
        logger.debug("Task removed id=%s", task_id)
        return task
