"""JSON file key-value storage.

Persists every key in a single JSON object on disk. Writes go to a
temporary file in the same directory and are moved into place, so a
reader never sees a half-written file.
"""

import json
import os
import tempfile
from pathlib import Path

from ..debug import DebugReporter
from .base import KeyValueStorage

DEFAULT_STORAGE_PATH = Path.home() / ".groqchat" / "storage.json"


class JsonFileStorage(DebugReporter, KeyValueStorage):
    """File-backed storage that survives application restarts."""

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path else DEFAULT_STORAGE_PATH

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            self._debug("warning", "Storage", f"Unreadable storage file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._debug("warning", "Storage", f"Ignoring non-object storage file {self._path}")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

    @property
    def backend_type(self) -> str:
        return "file"
