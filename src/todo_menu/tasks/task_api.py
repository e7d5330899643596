# src/todo_menu/tasks/task_api.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .task_models import Task


def _ts_local(ts: float) -> str:
    return datetime.fromtimestamp(ts).astimezone().strftime("%Y-%m-%d %H:%M:%S")


def format_task(task: Task, *, slot_id: int | None = None) -> str:
    """
    Multi-line description of a task and its previous versions.

    `slot_id` is the key the task is stored under; it only differs from task.id
    when the store regenerates ids on update.
    """
    header = f"#{task.id}" if slot_id is None or slot_id == task.id else f"#{slot_id} (record {task.id})"
    lines = [f"{header} [{_ts_local(task.created_at)}] {task.text}"]
    if task.history:
        lines.append(f"  history ({len(task.history)}):")
        for i, prev in enumerate(task.history, start=1):
            lines.append(f"    {i}. [{_ts_local(prev.created_at)}] {prev.text}")
    return "\n".join(lines)


def format_task_list(tasks: Iterable[tuple[int, Task]]) -> str:
    """Render (slot_id, task) pairs; used by the "list all" menu option."""
    blocks = [format_task(task, slot_id=slot_id) for slot_id, task in tasks]
    if not blocks:
        return "No tasks yet."
    return "\n".join(blocks)
