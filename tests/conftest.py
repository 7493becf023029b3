# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from termtodo.cli.bootstrap import create_initial_state, shutdown
from termtodo.core.state import AppState
from termtodo.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the UI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Test To-Do List",
        log_level="DEBUG",
        data_dir=data_dir,
        tasks_db_path=data_dir / "tasks.db",
        log_dir=data_dir,
        startup_delay=0.0,
    )


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[TaskStore]:
    s = TaskStore(tmp_path / "tasks.db")
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace) -> Iterator[AppState]:
    """
    AppState wired through the real bootstrap.

    NOTE: We keep a real SQLite TaskStore here because keeping the visible
    list and the table in agreement is exactly what we want to test.
    """
    st = create_initial_state(settings=settings)
    yield st
    shutdown(st)
