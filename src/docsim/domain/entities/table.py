"""Row and Table entities for the relational storage model.

A table keeps its rows by id and a generic secondary index over every
column it has ever seen:

    indexes[column][serialize_value(value)] -> [row_id, ...]

Index lists are append-only and are built solely by ``Table.insert``, so an
id in an index list always refers to a row that was inserted into this
table. Re-inserting an id replaces the row but leaves earlier index entries
in place.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from docsim.domain.value_objects import RowId, StructuredValue, serialize_value, validate_value


@dataclass
class Row:
    """A row: identity plus column-keyed payload."""

    id: RowId
    data: dict[str, StructuredValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate identity and column values."""
        if not self.id:
            raise ValueError("Row id cannot be empty")
        for value in self.data.values():
            validate_value(value)


@dataclass
class Table:
    """A named table of rows with per-column value indexes."""

    name: str
    rows: dict[RowId, Row] = field(default_factory=dict)
    indexes: dict[str, dict[str, list[RowId]]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(list))
    )

    def insert(self, row: Row) -> None:
        """Insert or replace a row and index every column value."""
        for column, value in row.data.items():
            self.indexes[column][serialize_value(value)].append(row.id)
        self.rows[row.id] = row

    def get(self, row_id: str) -> Row | None:
        """Look up a row by id."""
        return self.rows.get(RowId(row_id))

    def find_by_column(self, column: str, serialized_value: str) -> list[Row]:
        """Rows whose ``column`` was indexed under ``serialized_value``.

        The lookup is an exact string match; encode the query value with
        ``serialize_value`` first.
        """
        column_index = self.indexes.get(column)
        if column_index is None:
            return []
        row_ids = column_index.get(serialized_value, [])
        return [self.rows[row_id] for row_id in row_ids if row_id in self.rows]

    def __len__(self) -> int:
        """Number of rows."""
        return len(self.rows)
