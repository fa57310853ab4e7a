"""Relational storage engine.

A rudimentary normalized store: named tables of rows, each table carrying a
generic per-column value index. Relationships are modelled the relational
way, as separate tables populated alongside the primary table, and a
"join" is a lookup in the relationship table's column index.

Inserting into a table that does not exist drops the row silently. The
insert reports the drop through its return value and the
``dropped_inserts`` counter, but never raises.
"""

from __future__ import annotations

import logging

from docsim.domain.entities import Row, Table

logger = logging.getLogger(__name__)


class RelationalDatabase:
    """In-memory table/row store with per-column indexes."""

    def __init__(self) -> None:
        """Initialize an empty database."""
        self._tables: dict[str, Table] = {}
        self._dropped_inserts = 0

    def create_table(self, name: str) -> None:
        """Register an empty table, silently replacing an existing one."""
        self._tables[name] = Table(name=name)

    def insert(self, table_name: str, row: Row) -> bool:
        """Insert a row into ``table_name``.

        Returns:
            True if inserted, False if the table does not exist and the
            row was dropped
        """
        table = self._tables.get(table_name)
        if table is None:
            self._dropped_inserts += 1
            logger.debug("Dropped row %s: table %s does not exist", row.id, table_name)
            return False
        table.insert(row)
        return True

    def get(self, table_name: str, row_id: str) -> Row | None:
        """Look up a row by id; None if the table or row is absent."""
        table = self._tables.get(table_name)
        if table is None:
            return None
        return table.get(row_id)

    def find_by_column(self, table_name: str, column: str, serialized_value: str) -> list[Row]:
        """Rows of ``table_name`` whose ``column`` encodes to ``serialized_value``."""
        table = self._tables.get(table_name)
        if table is None:
            return []
        return table.find_by_column(column, serialized_value)

    def table(self, name: str) -> Table | None:
        """Get a table by name."""
        return self._tables.get(name)

    def table_names(self) -> list[str]:
        """Names of all tables in creation order."""
        return list(self._tables)

    @property
    def table_count(self) -> int:
        """Number of tables."""
        return len(self._tables)

    @property
    def dropped_inserts(self) -> int:
        """Rows dropped because their table did not exist."""
        return self._dropped_inserts

    def row_count(self) -> int:
        """Total rows across all tables."""
        return sum(len(table) for table in self._tables.values())
