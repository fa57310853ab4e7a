"""Storage engine ports.

These inbound ports define what the workload driver needs from each
storage model. Both are write-once/read-many: there is no update or delete.

Missing data is a normal outcome. Lookups return ``None`` or an empty list
and never raise.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from docsim.domain.entities import Document, Row


@runtime_checkable
class DocumentEnginePort(Protocol):
    """Contract for the document-centric store."""

    @abstractmethod
    def store(self, document: Document) -> None:
        """Insert or replace a document and index its tags and link targets."""
        ...

    @abstractmethod
    def get(self, doc_id: str) -> Document | None:
        """Look up a document by id."""
        ...

    @abstractmethod
    def find_by_tag(self, tag: str) -> list[Document]:
        """Documents carrying ``tag``, in index order."""
        ...

    @abstractmethod
    def find_linked_to(self, target_id: str) -> list[Document]:
        """Documents declaring a link whose target is ``target_id``."""
        ...


@runtime_checkable
class RelationalEnginePort(Protocol):
    """Contract for the table/row store."""

    @abstractmethod
    def create_table(self, name: str) -> None:
        """Register an empty table, replacing any table with that name."""
        ...

    @abstractmethod
    def insert(self, table_name: str, row: Row) -> bool:
        """Insert a row; returns False (and drops the row) if the table is missing."""
        ...

    @abstractmethod
    def get(self, table_name: str, row_id: str) -> Row | None:
        """Look up a row by id."""
        ...

    @abstractmethod
    def find_by_column(self, table_name: str, column: str, serialized_value: str) -> list[Row]:
        """Rows whose column value encodes to ``serialized_value``."""
        ...
