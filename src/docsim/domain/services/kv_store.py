"""Single-map key-value store backing the interactive shell."""

from __future__ import annotations


class KeyValueStore:
    """In-memory implementation of KeyValueStorePort.

    PUT creates or overwrites; GET returns None for unknown keys. Data is
    not persisted across restarts.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._data: dict[str, str] = {}

    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        self._data[key] = value

    def get(self, key: str) -> str | None:
        """Value stored under ``key``, or None if not found."""
        return self._data.get(key)

    def keys(self) -> list[str]:
        """All keys in insertion order."""
        return list(self._data)

    def __len__(self) -> int:
        """Number of stored keys."""
        return len(self._data)
