"""Domain services for the storage simulation.

Services hold the storage models and the primitives the workload driver
builds on. They coordinate entities and value objects but know nothing
about timing, metrics, or console output.
"""

from docsim.domain.services.document_engine import DocumentStore
from docsim.domain.services.generator import DeterministicGenerator, EmptyRangeError
from docsim.domain.services.kv_store import KeyValueStore
from docsim.domain.services.memory_model import MemoryModel
from docsim.domain.services.relational_engine import RelationalDatabase

__all__ = [
    "DeterministicGenerator",
    "DocumentStore",
    "EmptyRangeError",
    "KeyValueStore",
    "MemoryModel",
    "RelationalDatabase",
]
