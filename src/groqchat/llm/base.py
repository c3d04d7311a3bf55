from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """Abstract chat-completion backend.

    This module hides which hosted service answers a prompt. Implementations
    own client setup, authentication and translation between ``ChatMessage``
    / ``LLMResponse`` and the service's wire format.

    Usable as an async context manager so the underlying HTTP client is
    closed on exit:
        async with provider:
            response = await provider.chat_completion(messages)
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model used when a call does not name one."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Request one non-streaming completion and return its first choice.

        Args:
            messages: Conversation to send, oldest first
            model: Model override (None uses ``self.model``)
            temperature: Sampling temperature (None leaves the service default)
            max_tokens: Completion length cap (None leaves the service default)
            **kwargs: Extra request fields passed through to the service

        Returns:
            LLMResponse with the generated text, its role and token usage

        Raises:
            Exception: Whatever the service client raises; callers decide how
                to surface it
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the HTTP client."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        # httpx may already have lost its loop during interpreter shutdown
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
