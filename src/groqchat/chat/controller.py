"""Chat controller.

Owns the conversation state and keeps the message store and the view in
sync with it. Two states per request cycle:

- Idle: input accepted
- Awaiting-Response: input disabled, exactly one request outstanding

The view is any object implementing ``ChatView``; the Textual app and the
console view both do.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Protocol

from ..debug import DebugReporter
from .models import ChatState, Message

if TYPE_CHECKING:
    from ..store import MessageStore
    from .completion import CompletionClient

CLEAR_PROMPT = "Are you sure you want to clear the chat history?"

ConfirmCallback = Callable[[str], Awaitable[bool]]


class ChatView(Protocol):
    """What the controller needs from a presentation layer."""

    def show_history(self, history: Sequence[Message]) -> None:
        """Rebuild the visible conversation from scratch."""

    def set_busy(self, busy: bool) -> None:
        """Disable (busy) or re-enable the submission controls."""

    def notify(self, message: str, *, severity: str = "information") -> None:
        """Show a transient notice outside the conversation."""


class ChatController(DebugReporter):
    """Wires submit and clear actions to the store, client and view."""

    def __init__(
        self,
        store: "MessageStore",
        client: "CompletionClient",
        view: ChatView | None = None,
    ):
        self._store = store
        self._client = client
        self._view = view
        self._state = ChatState(history=tuple(store.load()))

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def history(self) -> tuple[Message, ...]:
        return self._state.history

    @property
    def busy(self) -> bool:
        return self._state.awaiting_response

    def attach(self, view: ChatView) -> None:
        """Bind a view and show the loaded history in it."""
        self._view = view
        view.show_history(self._state.history)
        view.set_busy(self.busy)

    def can_submit(self, text: str) -> bool:
        """Whether the submit action should be enabled for this input."""
        return bool(text.strip()) and not self.busy

    async def submit(self, text: str) -> Message | None:
        """Send a user message and record the reply.

        Empty or whitespace-only input, or input while a request is already
        outstanding, is ignored.

        Returns:
            The reply message, or None if nothing was sent
        """
        content = text.strip()
        if not content:
            return None
        if self.busy:
            self._debug("warning", "Chat", "Submit ignored: a request is already in flight")
            return None

        self._commit(self._state.append(Message.user(content)))
        self._set_awaiting(True)
        try:
            reply = await self._client.complete(content)
        finally:
            self._set_awaiting(False)

        self._commit(self._state.append(reply))
        return reply

    async def clear(self, confirm: ConfirmCallback) -> bool:
        """Clear the whole history after an explicit confirmation.

        Refused without prompting while a request is outstanding.

        Args:
            confirm: Async yes/no prompt receiving the question text

        Returns:
            True if the history was cleared
        """
        if self.busy:
            self._notify("Wait for the current response before clearing", "warning")
            return False

        if not await confirm(CLEAR_PROMPT):
            self._debug("debug", "Chat", "Clear declined")
            return False

        self._commit(self._state.cleared())
        self._debug("info", "Chat", "History cleared")
        return True

    def _commit(self, state: ChatState) -> None:
        """Adopt a new history: persist it, then render it."""
        self._state = state
        if not self._store.save(state.history):
            self._notify("Could not save chat history", "warning")
        if self._view is not None:
            self._view.show_history(state.history)

    def _set_awaiting(self, awaiting: bool) -> None:
        self._state = self._state.with_awaiting(awaiting)
        if self._view is not None:
            self._view.set_busy(awaiting)

    def _notify(self, message: str, severity: str) -> None:
        self._debug(severity if severity != "information" else "info", "Chat", message)
        if self._view is not None:
            self._view.notify(message, severity=severity)
