"""Modal screens for the TUI.

Hides how yes/no questions are put to the user: dialog layout, button
order and the keys that answer them.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid
from textual.screen import ModalScreen
from textual.widgets import Button, Label


class ConfirmationScreen(ModalScreen[bool]):
    """Yes/no dialog over a dimmed backdrop.

    Dismisses with True only for an explicit yes (button or ``y``);
    ``n``, escape and the No button all answer False.
    """

    DEFAULT_CSS = """
    ConfirmationScreen {
        align: center middle;
        background: $background 60%;

        #dialog {
            grid-size: 2;
            grid-gutter: 1 2;
            grid-rows: auto 3;
            width: 56;
            height: auto;
            padding: 1 2;
            border: thick $error 70%;
            background: $surface;
        }

        #question {
            column-span: 2;
            width: 100%;
            content-align: center middle;
            text-style: bold;
        }

        Button {
            width: 100%;
        }
    }
    """

    BINDINGS = [
        Binding("y", "answer(True)", "Yes", show=False),
        Binding("n", "answer(False)", "No", show=False),
        Binding("escape", "answer(False)", "Cancel", show=False),
    ]

    def __init__(self, prompt: str) -> None:
        super().__init__()
        self._prompt = prompt

    @property
    def prompt(self) -> str:
        return self._prompt

    def compose(self) -> ComposeResult:
        with Grid(id="dialog"):
            yield Label(self._prompt, id="question", markup=False)
            yield Button("Yes", id="yes", variant="error")
            yield Button("No", id="no", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "yes")

    def action_answer(self, yes: bool) -> None:
        self.dismiss(yes)
