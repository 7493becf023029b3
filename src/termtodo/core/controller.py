# src/termtodo/core/controller.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from .ports import TaskRepo
from .task_list import TaskEntry, TaskListModel

logger = logging.getLogger(__name__)

NOTHING_TO_REMOVE = "No task to remove"


@dataclass(frozen=True, slots=True)
class ToggleResult:
    """Outcome of a toggle: the restyled entry, or None if the row had vanished."""

    name: str
    entry: TaskEntry | None

    @property
    def reconciled(self) -> bool:
        return self.entry is None


class TaskController:
    """
    User actions (add / remove / toggle) applied to storage and to the visible model.

    Every flow calls storage first and only mutates the model once the durable
    write succeeded; storage exceptions propagate with the model untouched.
    """

    def __init__(self, repo: TaskRepo, model: TaskListModel) -> None:
        self.repo = repo
        self.model = model

    def reload(self) -> None:
        self.model.load(self.repo.list_all())

    def add(self, raw_name: str) -> TaskEntry:
        """
        Insert a pending task and append it to the list.

        Raises ValueError for an empty name and DuplicateTaskError when the
        name is taken; neither changes the model.
        """
        name = raw_name.strip()
        if not name:
            raise ValueError("Task name is required")

        task = self.repo.insert(name, False)
        entry = TaskEntry.from_task(task)
        self.model.append(entry)
        logger.info("Task added name=%r", name)
        return entry

    def remove_selected(self) -> TaskEntry | None:
        """Delete the selected task. Returns None when nothing is selected."""
        entry = self.model.selected_entry
        if entry is None:
            logger.debug("Remove requested with empty selection")
            return None

        index = self.model.selected
        self.repo.delete(entry.name)
        self.model.remove_at(index)
        logger.info("Task removed name=%r index=%s", entry.name, index)
        return entry

    def toggle_selected(self) -> ToggleResult | None:
        """
        Flip the completed flag of the selected task.

        The flag is read from storage once; that single value drives both the
        write and the new rendering. Returns None when nothing is selected.
        """
        selected = self.model.selected_entry
        if selected is None:
            return None

        index = self.model.selected
        name = selected.name
        current = self.repo.get_completed(name)
        if current is None:
            # Row is gone from storage: drop the stale item so both sides agree.
            pos = self.model.index_of(name)
            if pos is not None:
                self.model.remove_at(pos)
            logger.warning("Toggle on missing task name=%r; removed from list", name)
            return ToggleResult(name=name, entry=None)

        new_completed = not current
        self.repo.set_completed(name, new_completed)

        entry = TaskEntry(name=name, completed=new_completed)
        pos = self.model.index_of(name)
        if pos is None:
            pos = index
        self.model.replace_at(pos, entry)
        self.model.select(pos)
        logger.info("Task toggled name=%r completed=%s", name, new_completed)
        return ToggleResult(name=name, entry=entry)
