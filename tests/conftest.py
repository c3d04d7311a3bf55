"""Pytest configuration and shared fixtures."""
import os
from collections.abc import Sequence
from typing import Any

import pytest

from groqchat.chat import ChatController, CompletionClient, Message
from groqchat.llm import ChatMessage, LLMProvider, LLMResponse
from groqchat.store import InMemoryStorage, MessageStore


class FakeProvider(LLMProvider):
    """LLM provider returning a canned reply, or raising a canned error."""

    def __init__(self, reply: str = "hello", error: Exception | None = None, model: str = "fake-model"):
        self.reply = reply
        self.error = error
        self._model = model
        self.calls: list[list[ChatMessage]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model=model or self._model)

    async def close(self) -> None:
        self.closed = True


class RecordingView:
    """Controller view that records every call."""

    def __init__(self) -> None:
        self.renders: list[list[Message]] = []
        self.busy_changes: list[bool] = []
        self.notices: list[tuple[str, str]] = []

    def show_history(self, history: Sequence[Message]) -> None:
        self.renders.append(list(history))

    def set_busy(self, busy: bool) -> None:
        self.busy_changes.append(busy)

    def notify(self, message: str, *, severity: str = "information") -> None:
        self.notices.append((severity, message))


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "groq": os.getenv("GROQ_API_KEY"),
        "openai": os.getenv("OPENAI_API_KEY"),
    }


@pytest.fixture
def storage():
    """Fresh in-memory key-value storage."""
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    """Message store over in-memory storage."""
    return MessageStore(storage)


@pytest.fixture
def provider():
    """Provider that always answers "hello"."""
    return FakeProvider(reply="hello")


@pytest.fixture
def failing_provider():
    """Provider that always raises."""
    return FakeProvider(error=ConnectionError("network down"))


@pytest.fixture
def client(provider):
    return CompletionClient(provider)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def controller(store, client, view):
    """Controller with an attached recording view."""
    controller = ChatController(store, client)
    controller.attach(view)
    return controller


@pytest.fixture
def sample_code_message():
    """Assistant message mixing prose and two fenced code blocks."""
    return Message.assistant(
        "Here is Python:\n```python\nprint('hi')\n```\nand shell:\n```\nls -la\n```"
    )
