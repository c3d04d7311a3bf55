"""Persistence of the chat history under a single storage key.

The history is stored as a JSON array of ``{id, role, content}`` objects.
There is no schema version; a value that fails to parse or validate is
treated as an empty history.
"""

import json
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..chat.models import Message, Role
from ..debug import DebugCallback, DebugReporter
from .base import KeyValueStorage

HISTORY_KEY = "groqChatHistory"


class StoredMessage(BaseModel):
    """Persisted form of a Message. Unlike Message, the id must be present."""

    model_config = ConfigDict(frozen=True)

    id: str
    role: Role
    content: str


_history_adapter = TypeAdapter(list[StoredMessage])


class MessageStore(DebugReporter):
    """Reads and writes the full chat history.

    Nothing here raises to the caller: read failures yield an empty
    history and write failures are reported and signalled by the return
    value of ``save``.
    """

    def __init__(self, storage: KeyValueStorage, key: str = HISTORY_KEY):
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the callback for this store and for its storage backend."""
        super().set_debug_callback(callback)
        if isinstance(self._storage, DebugReporter):
            self._storage.set_debug_callback(callback)

    def load(self) -> list[Message]:
        """Get the persisted history, or an empty list."""
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            stored = _history_adapter.validate_json(raw)
        except ValidationError as e:
            self._debug("warning", "Store", f"Discarding unparseable history: {e.error_count()} error(s)")
            return []
        history = [Message(id=m.id, role=m.role, content=m.content) for m in stored]
        self._debug("debug", "Store", f"Loaded {len(history)} message(s)")
        return history

    def save(self, history: Sequence[Message]) -> bool:
        """Overwrite the persisted history.

        Returns:
            True if the write succeeded, False otherwise
        """
        try:
            payload = json.dumps(
                [message.model_dump(mode="json") for message in history],
                ensure_ascii=False,
            )
            self._storage.set_item(self._key, payload)
        except (OSError, TypeError, ValueError) as e:
            self._debug("error", "Store", f"Failed to save history: {e}")
            return False
        self._debug("debug", "Store", f"Saved {len(history)} message(s)")
        return True

    def clear(self) -> bool:
        """Persist an empty history."""
        return self.save([])
