# src/termtodo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the task store and loads the visible list from it,
- wires the controller into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import TaskController
from ..core.state import AppState
from ..core.task_list import TaskListModel
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Storage failures (cannot open, schema, malformed rows) propagate as
    StorageError: the caller treats them as fatal.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(settings.tasks_db_path)
    try:
        task_list = TaskListModel(task_store.list_all())
    except Exception:
        task_store.close()
        raise
    logger.info("Loaded %d tasks from %s", len(task_list), task_store.db_path)

    return AppState(
        settings=settings,
        task_store=task_store,
        task_list=task_list,
        controller=TaskController(task_store, task_list),
    )


def shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.task_store.close()
    except Exception:
        logger.exception("Failed to close task store.")
