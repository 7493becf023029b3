# src/termtodo/ui/screens.py

"""Modal dialogs: the task-name prompt and a simple message box."""

from __future__ import annotations

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

PROMPT_WIDTH = 28


class AddTaskScreen(ModalScreen[str | None]):
    """Ask for a task name. Dismisses with the stripped name, or None on cancel."""

    DEFAULT_CSS = """
    AddTaskScreen {
        align: center middle;
    }
    #add-dialog {
        width: auto;
        height: auto;
        border: round $accent;
        padding: 0 1;
        background: $surface;
    }
    #task-name {
        width: 32;
    }
    #add-buttons {
        width: auto;
        height: auto;
    }
    #add-buttons Button {
        margin-right: 1;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def compose(self) -> ComposeResult:
        with Vertical(id="add-dialog") as dialog:
            dialog.border_title = "Enter task name"
            yield Input(placeholder="Task name", id="task-name")
            with Horizontal(id="add-buttons"):
                yield Button("Ok", id="ok", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#task-name", Input).focus()

    def _submit(self) -> None:
        name = self.query_one("#task-name", Input).value.strip()
        if not name:
            self.notify("Task name is required", severity="warning")
            return
        self.dismiss(name)

    @on(Input.Submitted, "#task-name")
    def _on_input_submitted(self) -> None:
        self._submit()

    @on(Button.Pressed, "#ok")
    def _on_ok(self) -> None:
        self._submit()

    @on(Button.Pressed, "#cancel")
    def _on_cancel(self) -> None:
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class MessageScreen(ModalScreen[None]):
    """Informational or error message with a single Ok button."""

    DEFAULT_CSS = """
    MessageScreen {
        align: center middle;
    }
    #message-dialog {
        width: auto;
        max-width: 60;
        height: auto;
        border: round $warning;
        padding: 0 1;
        background: $surface;
    }
    #message-dialog Button {
        margin-top: 1;
    }
    """

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, message: str, *, title: str = "Info") -> None:
        super().__init__()
        self.message_text = message
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Vertical(id="message-dialog") as dialog:
            dialog.border_title = self.title_text
            # Task names and database errors are shown verbatim, never as markup.
            yield Label(Text(self.message_text), id="message")
            yield Button("Ok", id="close", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#close", Button).focus()

    @on(Button.Pressed, "#close")
    def _on_close(self) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
