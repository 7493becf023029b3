# src/termtodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .controller import TaskController
from .task_list import TaskListModel


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace with the same fields).
    settings: object

    task_store: TaskStore
    task_list: TaskListModel
    controller: TaskController
