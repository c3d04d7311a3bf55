"""
groqchat: a terminal chat client for hosted LLM completion APIs.

The package is split so that each module hides one design decision:
chat (conversation rules), store (persistence), llm (provider access),
ui (presentation) and cli (configuration and entry points).
"""

__version__ = "0.1.0"

from .chat import (
    ERROR_MESSAGE,
    ChatController,
    ChatState,
    CompletionClient,
    Message,
    Role,
    parse_message_content,
)
from .store import MessageStore, create_storage

__all__ = [
    "ERROR_MESSAGE",
    "ChatController",
    "ChatState",
    "CompletionClient",
    "Message",
    "MessageStore",
    "Role",
    "create_storage",
    "parse_message_content",
]
