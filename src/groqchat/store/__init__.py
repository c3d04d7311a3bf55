"""Local persistence for the chat history.

Provides a localStorage-like key-value abstraction and the message store
that keeps the conversation under one key.
"""

from .base import KeyValueStorage
from .factory import create_storage
from .file import JsonFileStorage
from .in_memory import InMemoryStorage
from .message_store import HISTORY_KEY, MessageStore

__all__ = [
    "HISTORY_KEY",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "MessageStore",
    "create_storage",
]
