"""Factory for creating key-value storage backends."""

from typing import Any

from .base import KeyValueStorage


def create_storage(
    backend: str = "file",
    **kwargs: Any
) -> KeyValueStorage:
    """Create a key-value storage backend.

    Args:
        backend: Backend type ("file" or "memory")
        **kwargs: Backend-specific configuration
            For file:
                - path: str | Path | None (default: ~/.groqchat/storage.json)
            For memory:
                - initial: dict[str, str] | None

    Returns:
        KeyValueStorage instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "file":
        from .file import JsonFileStorage
        return JsonFileStorage(**kwargs)

    elif backend == "memory":
        from .in_memory import InMemoryStorage
        return InMemoryStorage(**kwargs)

    raise ValueError(
        f"Unsupported storage backend: {backend}. "
        f"Supported backends: file, memory"
    )
