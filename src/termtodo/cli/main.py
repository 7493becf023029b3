# src/termtodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (opening the database), then runs the
full-screen UI until the user quits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_store import StorageError
from ..ui.app import TodoApp

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level = level_from_name(getattr(settings, "log_level", "INFO"))

    # The UI owns the terminal, so only the log file is attached here.
    log_file = setup_logging(log_dir=settings.log_dir, console_level=level, file_level=level)

    logger.info("Starting %s (log=%s)...", settings.app_name, log_file)

    try:
        state = create_initial_state(settings=settings)
    except StorageError as e:
        logger.exception("Fatal storage error during startup.")
        raise SystemExit(f"termtodo: {e}") from e

    try:
        TodoApp(state).run()
    finally:
        shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
