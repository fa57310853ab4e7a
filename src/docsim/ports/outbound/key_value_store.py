"""Outbound port for the key-value store behind the command shell."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorePort(Protocol):
    """Protocol for a single-map string key-value store.

    This is the contract the command shell delegates to.
    """

    def put(self, key: str, value: str) -> None:
        """Create or overwrite ``key``.

        Args:
            key: Key to write
            value: Value to store
        """
        ...

    def get(self, key: str) -> str | None:
        """Read ``key``.

        Args:
            key: Key to read

        Returns:
            The stored value, or None if not found
        """
        ...

    def keys(self) -> list[str]:
        """List all keys in insertion order."""
        ...
