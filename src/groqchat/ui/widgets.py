"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble layout and copy buttons
- Code block highlighting
- Input enable/disable rules
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, RichLog, Static, TextArea

from ..debug import LogLevel
from .clipboard import copy_text
from .config import (
    COPIED_LABEL,
    COPY_CONFIRM_SECONDS,
    COPY_LABEL,
    LOADING_TEXT,
    LOG_LEVEL_WIDTH,
    LOG_TIMESTAMP_FORMAT,
)
from .highlight import Highlighter, highlight_code
from .render import CodeBlock, MessageView, TextBlock


class CopyButton(Button):
    """Button copying fixed text, with a short-lived "Copied!" label."""

    def __init__(self, text: str, *args, **kwargs) -> None:
        kwargs.setdefault("classes", "copy-btn")
        super().__init__(COPY_LABEL, *args, **kwargs)
        self._text = text

    @property
    def copy_source(self) -> str:
        return self._text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        copy_text(self.app, self._text)
        self.label = COPIED_LABEL
        self.set_timer(COPY_CONFIRM_SECONDS, self.reset_label)

    def reset_label(self) -> None:
        self.label = COPY_LABEL


class CodeBlockWidget(Vertical):
    """A monospace code block tagged with its language."""

    def __init__(self, block: CodeBlock, highlighter: Highlighter | None = None, **kwargs) -> None:
        super().__init__(classes=f"code-block {block.css_class}", **kwargs)
        self._block = block
        self._highlighter = highlighter

    @property
    def block(self) -> CodeBlock:
        return self._block

    def compose(self) -> ComposeResult:
        yield CopyButton(self._block.code)
        yield Static(
            highlight_code(self._highlighter, self._block.code, self._block.language),
            classes="code-body",
        )


class MessageWidget(Vertical):
    """One chat message: a bubble of text and code blocks plus a copy button."""

    def __init__(self, view: MessageView, highlighter: Highlighter | None = None, **kwargs) -> None:
        super().__init__(classes=view.css_classes, **kwargs)
        self._view = view
        self._highlighter = highlighter

    @property
    def view(self) -> MessageView:
        return self._view

    def compose(self) -> ComposeResult:
        with Vertical(classes="bubble"):
            for block in self._view.blocks:
                if isinstance(block, TextBlock):
                    # Text objects are never parsed as markup
                    yield Static(Text(block.text), classes="message-text")
                else:
                    yield CodeBlockWidget(block, self._highlighter)
        yield CopyButton(self._view.copy_text, classes="copy-btn message-copy")


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation, rebuilt from scratch on every change."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"

    def __init__(self, *args, highlighter: Highlighter | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._highlighter = highlighter
        self._views: list[MessageView] = []

    @property
    def views(self) -> list[MessageView]:
        return list(self._views)

    def show_views(self, views: Sequence[MessageView]) -> None:
        """Replace every displayed message and scroll to the newest."""
        self._views = list(views)
        self.remove_children()
        if self._views:
            self.mount_all(MessageWidget(view, self._highlighter) for view in self._views)
        self.border_subtitle = f"{len(self._views)} messages" if self._views else "Conversation history"
        self.call_after_refresh(self.scroll_end, animate=False)


class BusyIndicator(Static):
    """Shown while a completion request is outstanding."""

    DEFAULT_CSS = """
    BusyIndicator {
        display: none;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(LOADING_TEXT, *args, **kwargs)


class ChatInputBar(Horizontal):
    """Multi-line input with Send and Clear History buttons.

    Send is enabled only when the input holds non-whitespace text and no
    request is outstanding; the input itself is disabled while busy. Clear
    stays available and is refused by the controller instead.
    """

    BINDINGS = [
        # Terminals do not report ctrl+enter; ctrl+j arrives as a distinct key
        Binding("ctrl+j", "submit", "Send", show=False),
    ]

    class Submitted(Message):
        """Posted with the trimmed input when the user sends it."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class ClearRequested(Message):
        """Posted when the Clear History button is pressed."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._busy = False

    def compose(self) -> ComposeResult:
        yield TextArea(id="chat-input", show_line_numbers=False, soft_wrap=True)
        yield Button("Send", id="send-btn", variant="primary", disabled=True).with_tooltip(
            "Send message (Ctrl+J)"
        )
        yield Button("Clear History", id="clear-btn", variant="error")

    @property
    def text_area(self) -> TextArea:
        return self.query_one("#chat-input", TextArea)

    @property
    def text(self) -> str:
        return self.text_area.text

    @text.setter
    def text(self, value: str) -> None:
        self.text_area.text = value
        self._sync_send_button()

    @property
    def busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool) -> None:
        self._busy = busy
        self.text_area.disabled = busy
        self._sync_send_button()
        if not busy:
            self.text_area.focus()

    def focus_input(self) -> None:
        self.text_area.focus()

    def _sync_send_button(self) -> None:
        self.query_one("#send-btn", Button).disabled = self._busy or not self.text.strip()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._sync_send_button()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "send-btn":
            self.action_submit()
        elif event.button.id == "clear-btn":
            self.post_message(self.ClearRequested())

    def action_submit(self) -> None:
        value = self.text.strip()
        if not value or self._busy:
            return
        self.text = ""
        self.post_message(self.Submitted(value))


class DebugPanel(RichLog):
    """Timestamped trace of debug callbacks from every component.

    Entries below the panel's threshold are dropped. Hidden until the app
    is started with a log level or the panel is toggled. Clicking copies
    the whole log.
    """

    BORDER_TITLE = "Log"

    DEFAULT_CSS = """
    DebugPanel {
        display: none;
    }
    """

    LEVEL_STYLES = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "bold red",
    }

    COMPONENT_STYLES = {
        "TUI": "cyan",
        "Chat": "green",
        "LLM": "magenta",
        "Store": "bright_green",
        "Storage": "bright_blue",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(*args, markup=False, highlight=False, wrap=True, **kwargs)
        self._threshold = log_level

    @property
    def log_level(self) -> LogLevel:
        return self._threshold

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._threshold = level
        if self.display:
            self.border_subtitle = f"Level: {level.name}"

    def log(self, component: str, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        """Append one entry if it meets the threshold; message is shown literally."""
        if level < self._threshold:
            return
        line = Text.assemble(
            (datetime.now().strftime(LOG_TIMESTAMP_FORMAT) + " ", "dim"),
            (f"{level.name:<{LOG_LEVEL_WIDTH}} ", self.LEVEL_STYLES.get(level, "white")),
            (f"[{component}] ", self.COMPONENT_STYLES.get(component, "white")),
            message,
        )
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.ERROR)

    def callback(self, level: str, component: str, message: str) -> None:
        """DebugCallback entry point handed to the store, client and controller."""
        self.log(component, message, LogLevel.parse(level))

    def set_visible(self, visible: bool) -> None:
        self.display = visible
        self.border_subtitle = f"Level: {self._threshold.name}" if visible else ""

    def get_plain_text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    def on_click(self, event: Click) -> None:
        event.stop()
        text = self.get_plain_text()
        if not text.strip():
            self.app.notify("Log is empty", timeout=2)
            return
        copy_text(self.app, text)
        self.app.notify("Log copied", timeout=2)
