# src/todo_menu/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _console_level(raw: object) -> int:
    """Map a level name like "info" to its number; anything unknown means WARNING."""
    level = logging.getLevelNamesMapping().get(str(raw).strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main() -> None:
    settings = get_settings()

    console_level = _console_level(getattr(settings, "log_level", "WARNING"))

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        # Tasks live in memory only; they are gone after this point.
        logger.info("Bye. %d task(s) discarded.", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
