# src/termtodo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Task:
    """
    One persisted to-do item.

    `name` is the primary key (there is no numeric id), so it is also the only
    handle the UI keeps for storage lookups.
    """

    name: str
    completed: bool = False
