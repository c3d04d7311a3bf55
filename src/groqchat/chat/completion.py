"""Completion client: one user turn in, one reply message out.

Only the newest user message is sent; earlier history never leaves the
process. Every failure is absorbed into a fixed assistant error message.
"""

from ..debug import DebugReporter
from ..llm import ChatMessage, LLMProvider
from .models import Message, Role

ERROR_MESSAGE = "Error: Unable to get response from Groq API."


class CompletionClient(DebugReporter):
    """Sends a single user message to an LLM provider and wraps the reply."""

    def __init__(
        self,
        llm: LLMProvider,
        model: str | None = None,
        error_message: str = ERROR_MESSAGE,
    ):
        self._llm = llm
        self._model = model
        self._error_message = error_message

    @property
    def model_name(self) -> str:
        return self._model or self._llm.model

    @property
    def error_message(self) -> str:
        return self._error_message

    async def complete(self, user_text: str) -> Message:
        """Request a completion for one user turn.

        Args:
            user_text: The literal text the user entered

        Returns:
            The reply as a new Message, or an assistant message carrying the
            fixed error string if anything went wrong
        """
        self._debug("info", "LLM", f"Requesting completion from {self.model_name}")
        try:
            response = await self._llm.chat_completion(
                [ChatMessage(role=Role.USER.value, content=user_text)],
                model=self._model,
            )
            reply = Message(role=response.role, content=response.content)
        except Exception as e:
            self._debug("error", "LLM", f"Completion failed: {type(e).__name__}: {e}")
            return Message.assistant(self._error_message)

        if response.usage:
            self._debug("debug", "LLM", f"Usage: {response.usage}")
        return reply

    async def close(self) -> None:
        await self._llm.close()
