# src/termtodo/ui/app.py

"""
Full-screen Textual front end.

Layout: one titled dialog holding a loading bar (while the startup gate is
closed), then the task list (35x12) with "Add" and "Delete" buttons.
Selecting a list item toggles its completion. `q` quits.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from rich.markup import escape
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.timer import Timer
from textual.widgets import Button, Label, ListItem, ListView, ProgressBar

from ..config import DEFAULT_APP_NAME
from ..core.controller import NOTHING_TO_REMOVE
from ..core.startup import StartupGate
from ..core.state import AppState
from ..core.task_list import TaskEntry
from ..tasks.task_store import DuplicateTaskError, StorageError
from .screens import AddTaskScreen, MessageScreen

logger = logging.getLogger(__name__)

STARTUP_POLL_INTERVAL = 0.1


class TaskListItem(ListItem):
    """List row that remembers the raw task it renders."""

    def __init__(self, entry: TaskEntry) -> None:
        super().__init__(Label(entry.label))
        self.entry = entry

    def set_entry(self, entry: TaskEntry) -> None:
        self.entry = entry
        self.query_one(Label).update(entry.label)


class TodoApp(App[None]):
    CSS = """
    Screen {
        align: center middle;
    }
    #dialog {
        width: auto;
        height: auto;
        border: round $accent;
        border-title-align: center;
        padding: 0 1;
    }
    #loading {
        width: 37;
        margin: 1 0;
    }
    #main {
        width: auto;
        height: auto;
        display: none;
    }
    #tasks {
        width: 35;
        height: 12;
    }
    #buttons {
        width: auto;
        height: auto;
    }
    #buttons Button {
        margin-right: 1;
    }
    """

    BINDINGS = [Binding("q", "quit", "Quit")]

    def __init__(self, state: AppState, *, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__()
        self.app_state = state
        self.controller = state.controller
        self.task_list = state.task_list
        self.title = str(getattr(state.settings, "app_name", DEFAULT_APP_NAME))
        self._startup_delay = float(getattr(state.settings, "startup_delay", 0.0))
        self._clock = clock
        self._gate: StartupGate | None = None
        self._gate_timer: Timer | None = None
        self.list_shown = False

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog") as dialog:
            dialog.border_title = self.title
            yield ProgressBar(total=100, show_eta=False, id="loading")
            with Vertical(id="main"):
                yield ListView(*(TaskListItem(e) for e in self.task_list), id="tasks")
                with Horizontal(id="buttons"):
                    yield Button("Add", id="add")
                    yield Button("Delete", id="delete")

    def on_mount(self) -> None:
        self._gate = StartupGate(self._startup_delay, clock=self._clock)
        if self._gate.is_ready():
            self._show_main()
        else:
            self._gate_timer = self.set_interval(STARTUP_POLL_INTERVAL, self._poll_startup)

    # ---- startup gate ----

    def _poll_startup(self) -> None:
        if self._gate is None:
            return
        self.query_one("#loading", ProgressBar).update(progress=self._gate.progress() * 100)
        if self._gate.is_ready():
            if self._gate_timer is not None:
                self._gate_timer.stop()
                self._gate_timer = None
            self._show_main()

    def _show_main(self) -> None:
        self.query_one("#loading", ProgressBar).display = False
        self.query_one("#main", Vertical).display = True
        list_view = self.query_one("#tasks", ListView)
        list_view.index = self.task_list.selected
        list_view.focus()
        self.list_shown = True
        logger.info("Task list shown (%d tasks)", len(self.task_list))

    # ---- view sync ----

    @property
    def list_view(self) -> ListView:
        return self.query_one("#tasks", ListView)

    async def _sync_list_view(self) -> None:
        """Rebuild the list rows from the model and restore its selection."""
        list_view = self.list_view
        await list_view.clear()
        await list_view.extend(TaskListItem(e) for e in self.task_list)
        list_view.index = self.task_list.selected

    def _pull_selection(self) -> None:
        index = self.list_view.index
        if index is not None:
            self.task_list.select(index)

    def _show_error(self, message: str, *, title: str = "Error") -> None:
        self.push_screen(MessageScreen(message, title=title))

    @on(ListView.Highlighted, "#tasks")
    def _on_highlighted(self, event: ListView.Highlighted) -> None:
        if event.list_view.index is not None:
            self.task_list.select(event.list_view.index)

    # ---- add ----

    @on(Button.Pressed, "#add")
    def _on_add_pressed(self) -> None:
        self.push_screen(AddTaskScreen(), callback=self._on_add_result)

    async def _on_add_result(self, name: str | None) -> None:
        if name is None:
            logger.debug("Add cancelled")
            return
        try:
            self.controller.add(name)
        except DuplicateTaskError as e:
            logger.info("Rejected duplicate task name=%r", name)
            self._show_error(str(e), title="Duplicate task")
            return
        except StorageError as e:
            logger.exception("Failed to add task name=%r", name)
            self._show_error(f"Failed to add task: {e}")
            return
        await self._sync_list_view()

    # ---- delete ----

    @on(Button.Pressed, "#delete")
    async def _on_delete_pressed(self) -> None:
        self._pull_selection()
        try:
            removed = self.controller.remove_selected()
        except StorageError as e:
            logger.exception("Failed to remove task")
            self._show_error(f"Failed to remove task: {e}")
            return
        if removed is None:
            self.push_screen(MessageScreen(NOTHING_TO_REMOVE))
            return
        await self._sync_list_view()

    # ---- toggle ----

    @on(ListView.Selected, "#tasks")
    async def _on_task_selected(self, event: ListView.Selected) -> None:
        self._pull_selection()
        try:
            result = self.controller.toggle_selected()
        except StorageError as e:
            logger.exception("Failed to toggle task")
            self._show_error(f"Failed to update task: {e}")
            return
        if result is None:
            return
        if result.entry is None:
            self.notify(f"{escape(repr(result.name))} no longer exists", severity="warning")
            await self._sync_list_view()
            return

        item = event.item
        if isinstance(item, TaskListItem) and item.entry.name == result.name:
            item.set_entry(result.entry)
        else:
            await self._sync_list_view()
        self.list_view.index = self.task_list.selected
