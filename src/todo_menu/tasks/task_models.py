# src/todo_menu/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class UpdateMode(StrEnum):
    """
    How TaskStore.update treats the record it replaces.

    Notes:
    - "preserve" keeps id and created_at, only the text changes.
    - "regenerate" mirrors the legacy behavior: the replacement gets a fresh id
      and timestamp while still living under the old map key.
    """

    PRESERVE = "preserve"
    REGENERATE = "regenerate"

    @classmethod
    def from_env(cls, raw: str | None) -> UpdateMode:
        if not raw:
            return cls.PRESERVE
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.PRESERVE


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    created_at: float

    # prior versions, most recent last; snapshots carry an empty history
    history: tuple[Task, ...] = ()

    def snapshot(self, slot_id: int) -> Task:
        """Copy of this task's text/timestamp for the history of slot `slot_id`."""
        return Task(id=slot_id, text=self.text, created_at=self.created_at)
