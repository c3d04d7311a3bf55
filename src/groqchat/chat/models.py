"""Data models for the chat conversation.

Hides the representation of messages, the conversation state owned by the
controller, and the transient content segments derived from message text.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Opaque unique identifier")
    role: Role = Field(description="Role of the message sender: 'user' or 'assistant'")
    content: str = Field(description="Raw text, possibly containing fenced code blocks")

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content)

    @property
    def is_user(self) -> bool:
        return self.role == Role.USER.value


class ChatState(BaseModel):
    """Conversation state for one session.

    Every mutation returns a new state; the controller swaps its reference
    instead of mutating a shared list.
    """

    model_config = ConfigDict(frozen=True)

    history: tuple[Message, ...] = Field(default_factory=tuple)
    awaiting_response: bool = Field(default=False, description="A completion request is outstanding")

    def append(self, message: Message) -> "ChatState":
        """Return a new state with the message appended to the history."""
        return self.model_copy(update={"history": (*self.history, message)})

    def cleared(self) -> "ChatState":
        """Return a new state with an empty history."""
        return self.model_copy(update={"history": ()})

    def with_awaiting(self, awaiting: bool) -> "ChatState":
        return self.model_copy(update={"awaiting_response": awaiting})

    def last_response(self) -> Message | None:
        """Get the most recent assistant message."""
        for message in reversed(self.history):
            if not message.is_user:
                return message
        return None


@dataclass(frozen=True)
class TextSegment:
    """Plain text outside any code fence."""

    content: str


@dataclass(frozen=True)
class CodeSegment:
    """Body of a fenced code block.

    ``tag`` is the language tag exactly as written after the opening fence,
    empty when the fence was untagged.
    """

    content: str
    tag: str = ""

    @property
    def language(self) -> str:
        return self.tag or "plaintext"


ContentSegment = TextSegment | CodeSegment
