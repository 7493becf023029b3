# src/termtodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on this Protocol instead of the SQLite store,
so tests can drive it with an in-memory repo.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def list_all(self) -> list[Task]: ...

    def insert(self, name: str, completed: bool = False) -> Task: ...

    def delete(self, name: str) -> bool: ...

    def get_completed(self, name: str) -> bool | None: ...

    def set_completed(self, name: str, completed: bool) -> bool: ...
