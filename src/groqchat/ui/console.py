"""Line-mode view of the conversation using Rich.

Renders the same ``MessageView`` descriptions as the TUI: user messages
right-aligned, assistant messages left-aligned, code blocks highlighted.
"""

from collections.abc import Sequence

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.status import Status
from rich.text import Text

from ..chat.models import Message
from .config import LOADING_TEXT
from .highlight import Highlighter, NullHighlighter, highlight_code
from .render import MessageView, TextBlock, render_history

SEVERITY_STYLES = {
    "information": "dim",
    "warning": "yellow",
    "error": "red",
}


def message_renderable(view: MessageView, highlighter: Highlighter | None = None) -> RenderableType:
    """Build a Rich renderable for one message."""
    parts: list[RenderableType] = []
    for block in view.blocks:
        if isinstance(block, TextBlock):
            parts.append(Text(block.text))
        else:
            parts.append(
                Panel(
                    highlight_code(highlighter, block.code, block.language),
                    title=block.language,
                    title_align="left",
                    border_style="dim",
                )
            )

    if view.is_user:
        bubble = Panel(Group(*parts), title="You", title_align="right", border_style="blue", expand=False)
        return Align.right(bubble)
    bubble = Panel(Group(*parts), title="Assistant", title_align="left", border_style="magenta", expand=False)
    return Align.left(bubble)


class ConsoleChatView:
    """Controller view printing to a Rich console.

    Every history change clears the screen and prints the whole
    conversation again.
    """

    def __init__(
        self,
        console: Console | None = None,
        highlighter: Highlighter | None = None,
        clear_screen: bool = True,
    ):
        self._console = console or Console()
        self._highlighter = highlighter or NullHighlighter()
        self._clear_screen = clear_screen
        self._status: Status | None = None

    def show_history(self, history: Sequence[Message]) -> None:
        if self._clear_screen:
            self._console.clear()
        views = render_history(history)
        if not views:
            self._console.print("[dim]No messages yet.[/dim]")
        for view in views:
            self._console.print(message_renderable(view, self._highlighter))

    def set_busy(self, busy: bool) -> None:
        if busy and self._status is None:
            self._status = self._console.status(LOADING_TEXT)
            self._status.start()
        elif not busy and self._status is not None:
            self._status.stop()
            self._status = None

    def notify(self, message: str, *, severity: str = "information") -> None:
        style = SEVERITY_STYLES.get(severity, "dim")
        self._console.print(Text(message, style=style))

    def debug_callback(self, level: str, component: str, message: str) -> None:
        """Print warnings and errors from non-UI components."""
        if level in ("warning", "error"):
            self.notify(f"[{component}] {message}", severity=level)
