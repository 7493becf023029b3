# tests/test_app.py

"""
UI tests for the Textual front end, driven through App.run_test() pilots.

They cover the wiring only: button/selection events reach the controller,
the list rows follow the model, and dialogs appear where they should.
"""

from __future__ import annotations

import pytest
from textual.widgets import Input, ListView, ProgressBar

from termtodo.core.controller import NOTHING_TO_REMOVE
from termtodo.core.state import AppState
from termtodo.ui.app import TaskListItem, TodoApp
from termtodo.ui.screens import AddTaskScreen, MessageScreen


def _rows(app: TodoApp) -> list[tuple[str, bool]]:
    items = app.query_one("#tasks", ListView).query(TaskListItem)
    return [(item.entry.name, item.entry.completed) for item in items]


def _stored(state: AppState) -> list[tuple[str, bool]]:
    return [(t.name, t.completed) for t in state.task_store.list_all()]


async def _add_via_prompt(pilot, name: str) -> None:
    await pilot.click("#add")
    await pilot.pause()
    screen = pilot.app.screen
    assert isinstance(screen, AddTaskScreen)
    screen.query_one("#task-name", Input).value = name
    await pilot.press("enter")
    await pilot.pause()


async def _select(pilot, index: int) -> None:
    list_view = pilot.app.query_one("#tasks", ListView)
    list_view.focus()
    list_view.index = index
    await pilot.pause()


@pytest.mark.asyncio
async def test_shows_stored_tasks_with_title(state: AppState) -> None:
    state.task_store.insert("A")
    state.task_store.insert("B", completed=True)
    state.controller.reload()

    app = TodoApp(state)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.list_shown
        assert app.title == "Test To-Do List"
        assert _rows(app) == [("A", False), ("B", True)]
        assert app.query_one("#tasks", ListView).index == 0


@pytest.mark.asyncio
async def test_add_then_cancel(state: AppState) -> None:
    app = TodoApp(state)
    async with app.run_test() as pilot:
        await _add_via_prompt(pilot, "Buy milk")
        assert _rows(app) == [("Buy milk", False)]
        assert _stored(state) == [("Buy milk", False)]

        await pilot.click("#add")
        await pilot.pause()
        assert isinstance(app.screen, AddTaskScreen)
        app.screen.query_one("#task-name", Input).value = "Never saved"
        await pilot.press("escape")
        await pilot.pause()

        assert not isinstance(app.screen, AddTaskScreen)
        assert _stored(state) == [("Buy milk", False)]
        assert _rows(app) == [("Buy milk", False)]


@pytest.mark.asyncio
async def test_empty_name_keeps_prompt_open(state: AppState) -> None:
    app = TodoApp(state)
    async with app.run_test() as pilot:
        await _add_via_prompt(pilot, "   ")
        assert isinstance(app.screen, AddTaskScreen)
        assert _stored(state) == []


@pytest.mark.asyncio
async def test_duplicate_name_shows_error_and_keeps_one_row(state: AppState) -> None:
    app = TodoApp(state)
    async with app.run_test() as pilot:
        await _add_via_prompt(pilot, "A")
        await _add_via_prompt(pilot, "A")

        assert isinstance(app.screen, MessageScreen)
        assert app.screen.title_text == "Duplicate task"
        assert _stored(state) == [("A", False)]
        assert _rows(app) == [("A", False)]

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, MessageScreen)


@pytest.mark.asyncio
async def test_duplicate_name_with_markup_characters_is_shown_verbatim(state: AppState) -> None:
    name = "[/x] [bold]"
    app = TodoApp(state)
    async with app.run_test() as pilot:
        await _add_via_prompt(pilot, name)
        await _add_via_prompt(pilot, name)

        assert app.is_running
        assert isinstance(app.screen, MessageScreen)
        assert app.screen.title_text == "Duplicate task"
        assert name in app.screen.message_text
        assert _stored(state) == [(name, False)]
        assert _rows(app) == [(name, False)]

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, MessageScreen)


@pytest.mark.asyncio
async def test_delete_with_empty_list_shows_notice(state: AppState) -> None:
    app = TodoApp(state)
    async with app.run_test() as pilot:
        await pilot.click("#delete")
        await pilot.pause()

        assert isinstance(app.screen, MessageScreen)
        assert app.screen.message_text == NOTHING_TO_REMOVE
        assert state.task_store.count_tasks() == 0

        await pilot.press("enter")
        await pilot.pause()
        assert not isinstance(app.screen, MessageScreen)


@pytest.mark.asyncio
async def test_delete_removes_selected_row(state: AppState) -> None:
    for name in ("A", "B", "C"):
        state.task_store.insert(name)
    state.controller.reload()

    app = TodoApp(state)
    async with app.run_test() as pilot:
        await pilot.pause()
        await _select(pilot, 1)
        await pilot.click("#delete")
        await pilot.pause()

        assert _stored(state) == [("A", False), ("C", False)]
        assert _rows(app) == [("A", False), ("C", False)]
        assert app.query_one("#tasks", ListView).index == 1


@pytest.mark.asyncio
async def test_selecting_item_toggles_twice(state: AppState) -> None:
    state.task_store.insert("A")
    state.task_store.insert("B")
    state.controller.reload()

    app = TodoApp(state)
    async with app.run_test() as pilot:
        await pilot.pause()
        await _select(pilot, 1)

        await pilot.press("enter")
        await pilot.pause()
        assert _stored(state) == [("A", False), ("B", True)]
        assert _rows(app) == [("A", False), ("B", True)]
        assert app.query_one("#tasks", ListView).index == 1

        await pilot.press("enter")
        await pilot.pause()
        assert _stored(state) == [("A", False), ("B", False)]
        assert _rows(app) == [("A", False), ("B", False)]


@pytest.mark.asyncio
async def test_end_to_end_scenario(state: AppState) -> None:
    app = TodoApp(state)
    async with app.run_test() as pilot:
        await _add_via_prompt(pilot, "Write spec")
        await _add_via_prompt(pilot, "Review spec")

        await _select(pilot, 0)
        await pilot.press("enter")
        await pilot.pause()

        await _select(pilot, 1)
        await pilot.click("#delete")
        await pilot.pause()

        assert _stored(state) == [("Write spec", True)]
        assert _rows(app) == [("Write spec", True)]


@pytest.mark.asyncio
async def test_startup_gate_reports_progress(state: AppState) -> None:
    state.settings.startup_delay = 5.0
    now = [0.0]

    app = TodoApp(state, clock=lambda: now[0])
    async with app.run_test() as pilot:
        await pilot.pause()
        assert not app.list_shown
        assert app.query_one("#main").display is False

        now[0] = 2.5
        await pilot.pause(0.3)
        assert app.query_one("#loading", ProgressBar).progress == pytest.approx(50)
        assert not app.list_shown

        now[0] = 5.0
        await pilot.pause(0.3)
        assert app.list_shown
        assert app.query_one("#main").display is True
        assert app.query_one("#loading").display is False


def test_q_is_bound_to_quit() -> None:
    assert any(b.key == "q" and b.action == "quit" for b in TodoApp.BINDINGS)
