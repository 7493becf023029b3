# src/termtodo/core/task_list.py

"""
In-memory, ordered projection of the task table as shown in the list view.

Each entry keeps the raw task name (the storage key) apart from its rendered
label, so styling never leaks into SQL parameters or comparisons.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rich.text import Text

from ..tasks.task_models import Task

PENDING_STYLE = ""
COMPLETED_STYLE = "strike"


@dataclass(frozen=True, slots=True)
class TaskEntry:
    name: str
    completed: bool = False

    @classmethod
    def from_task(cls, task: Task) -> TaskEntry:
        return cls(name=task.name, completed=task.completed)

    @property
    def label(self) -> Text:
        return Text(self.name, style=COMPLETED_STYLE if self.completed else PENDING_STYLE)


class TaskListModel:
    """
    Ordered entries plus a single selected index.

    Invariant: `selected` is None iff the list is empty, otherwise a valid index.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._entries: list[TaskEntry] = []
        self._positions: dict[str, int] = {}
        self.selected: int | None = None
        self.load(tasks)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TaskEntry]:
        return iter(self._entries)

    def _reindex(self) -> None:
        self._positions = {e.name: i for i, e in enumerate(self._entries)}

    def load(self, tasks: Iterable[Task]) -> None:
        self._entries = [TaskEntry.from_task(t) for t in tasks]
        self._reindex()
        self.selected = 0 if self._entries else None

    def names(self) -> list[str]:
        return [e.name for e in self._entries]

    def entry_at(self, index: int) -> TaskEntry:
        return self._entries[index]

    def index_of(self, name: str) -> int | None:
        return self._positions.get(name)

    @property
    def selected_entry(self) -> TaskEntry | None:
        if self.selected is None:
            return None
        return self._entries[self.selected]

    def select(self, index: int | None) -> int | None:
        """Move the selection, clamped to the current bounds."""
        if not self._entries:
            self.selected = None
        elif index is None:
            self.selected = 0
        else:
            self.selected = max(0, min(index, len(self._entries) - 1))
        return self.selected

    def append(self, entry: TaskEntry) -> int:
        self._entries.append(entry)
        self._reindex()
        if self.selected is None:
            self.selected = 0
        return len(self._entries) - 1

    def remove_at(self, index: int) -> TaskEntry:
        entry = self._entries.pop(index)
        self._reindex()
        # Stay on the same index if it is still valid, else fall back to the last item.
        self.select(self.selected)
        return entry

    def replace_at(self, index: int, entry: TaskEntry) -> None:
        self._entries[index] = entry
        self._reindex()
