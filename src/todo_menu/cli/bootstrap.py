# src/todo_menu/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the identifier generator and the task store from them,
- wires both into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.id_generator import IdentifierGenerator
from ..tasks.task_models import UpdateMode
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    id_start = int(getattr(settings, "id_start", 1))
    update_mode = getattr(settings, "update_mode", UpdateMode.PRESERVE)

    task_store = TaskStore(IdentifierGenerator(start=id_start), update_mode=update_mode)
    logger.debug("State created id_start=%s update_mode=%s", id_start, update_mode)

    return AppState(settings=settings, task_store=task_store)
