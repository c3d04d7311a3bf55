"""Main Textual TUI application.

Hosts the chat widgets and acts as the controller's view: the controller
decides what happens, the app shows it.
"""

import asyncio
from collections.abc import Sequence

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..chat import ChatController, CompletionClient, Message
from ..debug import LogLevel
from ..store import MessageStore
from .clipboard import copy_text
from .highlight import Highlighter, NullHighlighter
from .render import render_history
from .screens import ConfirmationScreen
from .styles import APP_CSS
from .themes import EMBER
from .widgets import BusyIndicator, ChatHistoryWidget, ChatInputBar, DebugPanel


class ChatApp(App):
    """Textual TUI for chatting with a hosted LLM."""

    CSS = APP_CSS
    TITLE = "Groq Chat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+k", "clear_chat", "Clear Chat", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        store: MessageStore,
        client: CompletionClient,
        highlighter: Highlighter | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._store = store
        self._client = client
        self._highlighter = highlighter or NullHighlighter()
        self._log_level = log_level
        self._controller: ChatController | None = None

    @property
    def controller(self) -> ChatController:
        if self._controller is None:
            raise RuntimeError("Controller is created when the app is mounted")
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header()
        yield ChatHistoryWidget(id="chat-history", highlighter=self._highlighter)
        yield DebugPanel(id="debug-panel")
        with Vertical(id="bottom-bar"):
            yield BusyIndicator(id="loading")
            yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Wire the log panel, build the controller and show the saved history."""
        self.register_theme(EMBER)
        self.theme = "ember"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.parse(self._log_level)
            self._show_log_panel(True)
            log_panel.info("TUI", f"Log level {log_panel.log_level.name}")

        self._store.set_debug_callback(log_panel.callback)
        self._client.set_debug_callback(log_panel.callback)

        self._controller = ChatController(self._store, self._client)
        self._controller.set_debug_callback(log_panel.callback)
        self._controller.attach(self)

        self.sub_title = self._client.model_name
        log_panel.debug("TUI", f"Loaded {len(self._controller.history)} message(s)")
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def show_history(self, history: Sequence[Message]) -> None:
        """Rebuild the conversation view from the full history."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.show_views(render_history(history))

    def set_busy(self, busy: bool) -> None:
        """Toggle the loading indicator and the input controls."""
        self.query_one("#loading", BusyIndicator).display = busy
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(busy)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._submit(event.value)

    def on_chat_input_bar_clear_requested(self, event: ChatInputBar.ClearRequested) -> None:
        self.action_clear_chat()

    @work(exclusive=True, group="completion")
    async def _submit(self, text: str) -> None:
        """Run one request cycle as a background async worker."""
        await self.controller.submit(text)

    @work(exclusive=True, group="clear")
    async def _clear(self) -> None:
        if await self.controller.clear(self._confirm):
            self.notify("Chat cleared", timeout=2)

    async def _confirm(self, prompt: str) -> bool:
        """Ask a yes/no question in a modal dialog."""
        return bool(await self.push_screen_wait(ConfirmationScreen(prompt)))

    def action_clear_chat(self) -> None:
        """Clear the chat history after confirmation."""
        if isinstance(self.screen, ConfirmationScreen):
            return
        self._clear()

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self.controller.state.last_response()
        if response:
            copy_text(self, response.content)
            self.notify("Response copied", timeout=2)
        else:
            self.notify("No response to copy", severity="warning")

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        self._show_log_panel(not log_panel.display)
        self.notify(f"Log panel {'shown' if log_panel.display else 'hidden'}", timeout=2)

    def _show_log_panel(self, visible: bool) -> None:
        self.query_one("#debug-panel", DebugPanel).set_visible(visible)
        self.screen.set_class(visible, "-with-log")


async def run_chat_tui(
    store: MessageStore,
    client: CompletionClient,
    highlighter: Highlighter | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        store: Message store holding the persisted history
        client: Completion client for the configured provider
        highlighter: Code highlighter, None for plain code blocks
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ChatApp(
        store=store,
        client=client,
        highlighter=highlighter,
        log_level=log_level,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
