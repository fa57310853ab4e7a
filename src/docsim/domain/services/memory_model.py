"""Fixed-formula memory estimates.

The simulation never introspects the interpreter's memory. Each engine's
footprint is estimated from constant per-structure sizes multiplied by
counts, so the numbers are reproducible bit-for-bit across runs and
machines:

    document   = store_base + documents * document + index_keys * index_entry
    relational = database_base + tables * table + records * row

The defaults are the sizes of the corresponding 64-bit native structures
(three hash maps for an empty store, one document record, one map bucket)
plus the coarse per-table and per-row allowances of the relational model.
"""

from __future__ import annotations

from dataclasses import dataclass

from docsim.domain.services.document_engine import DocumentStore
from docsim.domain.services.relational_engine import RelationalDatabase


@dataclass(frozen=True)
class MemoryModel:
    """Constants of the memory estimation formula, in bytes."""

    document_store_base_bytes: int = 144
    document_bytes: int = 176
    index_entry_bytes: int = 64
    relational_base_bytes: int = 48
    table_bytes: int = 1000
    row_bytes: int = 200

    def __post_init__(self) -> None:
        """Validate that all sizes are non-negative."""
        for name, value in vars(self).items():
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def estimate_document_store(self, store: DocumentStore) -> int:
        """Estimated bytes held by a document store."""
        return (
            self.document_store_base_bytes
            + len(store) * self.document_bytes
            + store.tag_count * self.index_entry_bytes
            + store.link_target_count * self.index_entry_bytes
        )

    def estimate_relational(self, database: RelationalDatabase, num_records: int) -> int:
        """Estimated bytes held by a relational database of ``num_records`` records."""
        return (
            self.relational_base_bytes
            + database.table_count * self.table_bytes
            + num_records * self.row_bytes
        )
