"""Abstract base class for key-value storage backends.

This module defines the interface the message store persists through.
The abstraction hides:
- Storage medium (file, memory)
- Encoding of the key space
- Write atomicity
"""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """String key to string value storage, analogous to browser localStorage.

    Values are written whole; a write either replaces the previous value or
    fails with ``OSError``.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Get the value stored under a key, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
