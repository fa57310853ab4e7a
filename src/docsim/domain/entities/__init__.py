"""Domain entities for the storage simulation.

Entities are objects with identity. Two documents with the same payload are
still different documents if their ids differ.

Exports:
    Document model:
        - Document: Payload with metadata, tags and links

    Relational model:
        - Row: Identity plus column-keyed payload
        - Table: Rows with per-column value indexes
"""

from docsim.domain.entities.document import Document
from docsim.domain.entities.table import Row, Table

__all__ = [
    "Document",
    "Row",
    "Table",
]
