"""Inbound ports - interfaces the application layer drives."""

from docsim.ports.inbound.storage_engine import DocumentEnginePort, RelationalEnginePort

__all__ = [
    "DocumentEnginePort",
    "RelationalEnginePort",
]
