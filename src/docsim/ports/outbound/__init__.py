"""Outbound ports - interfaces the adapters depend on."""

from docsim.ports.outbound.key_value_store import KeyValueStorePort

__all__ = [
    "KeyValueStorePort",
]
