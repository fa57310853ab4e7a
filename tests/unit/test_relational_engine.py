"""Unit tests for the relational storage engine."""

from __future__ import annotations

import pytest

from docsim.domain.entities import Row, Table
from docsim.domain.services import RelationalDatabase
from docsim.domain.value_objects import RowId, serialize_value
from docsim.ports.inbound import RelationalEnginePort


def row(row_id: str, **data: object) -> Row:
    return Row(id=RowId(row_id), data=dict(data))  # type: ignore[arg-type]


@pytest.mark.unit
class TestTable:
    """Tests for Table."""

    def test_insert_indexes_every_column(self) -> None:
        table = Table(name="users")
        table.insert(row("u1", name="ann", age=30))

        assert table.indexes["name"][serialize_value("ann")] == ["u1"]
        assert table.indexes["age"][serialize_value(30)] == ["u1"]
        assert len(table) == 1

    def test_find_by_unknown_column(self) -> None:
        table = Table(name="users")
        table.insert(row("u1", name="ann"))

        assert table.find_by_column("email", serialize_value("x")) == []
        assert "email" not in table.indexes

    def test_empty_row_id_rejected(self) -> None:
        with pytest.raises(ValueError):
            Row(id=RowId(""), data={})


@pytest.mark.unit
class TestRelationalDatabase:
    """Tests for RelationalDatabase."""

    def test_implements_port(self, relational_db: RelationalDatabase) -> None:
        assert isinstance(relational_db, RelationalEnginePort)

    def test_create_insert_get(self, relational_db: RelationalDatabase) -> None:
        relational_db.create_table("documents")
        r = row("doc_0", title="Document 0")

        assert relational_db.insert("documents", r) is True
        assert relational_db.get("documents", "doc_0") is r
        assert relational_db.get("documents", "doc_1") is None
        assert relational_db.get("missing", "doc_0") is None

    def test_insert_into_missing_table_is_dropped(self, relational_db: RelationalDatabase) -> None:
        """A missing table is a silent no-op, not an error."""
        assert relational_db.insert("ghost", row("r1", a=1)) is False

        assert relational_db.dropped_inserts == 1
        assert relational_db.table_count == 0
        assert relational_db.row_count() == 0
        assert relational_db.get("ghost", "r1") is None
        assert relational_db.find_by_column("ghost", "a", serialize_value(1)) == []

    def test_find_by_column(self, relational_db: RelationalDatabase) -> None:
        relational_db.create_table("tags")
        relational_db.insert("tags", row("t1", doc_id="doc_0", tag="tag_1"))
        relational_db.insert("tags", row("t2", doc_id="doc_1", tag="tag_2"))
        relational_db.insert("tags", row("t3", doc_id="doc_2", tag="tag_1"))

        matches = relational_db.find_by_column("tags", "tag", serialize_value("tag_1"))

        assert [r.id for r in matches] == ["t1", "t3"]
        assert relational_db.find_by_column("tags", "tag", serialize_value("tag_9")) == []
        assert relational_db.find_by_column("nope", "tag", serialize_value("tag_1")) == []

    def test_raw_string_does_not_match(self, relational_db: RelationalDatabase) -> None:
        """Lookups compare encoded values, so the bare string misses."""
        relational_db.create_table("tags")
        relational_db.insert("tags", row("t1", tag="tag_5"))

        assert relational_db.find_by_column("tags", "tag", "tag_5") == []
        assert len(relational_db.find_by_column("tags", "tag", '"tag_5"')) == 1

    def test_integer_and_string_are_distinct(self, relational_db: RelationalDatabase) -> None:
        relational_db.create_table("t")
        relational_db.insert("t", row("a", v=5))
        relational_db.insert("t", row("b", v="5"))

        assert [r.id for r in relational_db.find_by_column("t", "v", serialize_value(5))] == ["a"]
        assert [r.id for r in relational_db.find_by_column("t", "v", serialize_value("5"))] == ["b"]

    def test_reinsert_keeps_stale_index_entry(self, relational_db: RelationalDatabase) -> None:
        """The replacement row surfaces under its old value too."""
        relational_db.create_table("t")
        relational_db.insert("t", row("r1", color="red"))
        replacement = row("r1", color="blue")
        relational_db.insert("t", replacement)

        assert relational_db.find_by_column("t", "color", serialize_value("red")) == [replacement]
        assert relational_db.find_by_column("t", "color", serialize_value("blue")) == [replacement]
        assert relational_db.row_count() == 1

    def test_create_table_replaces_existing(self, relational_db: RelationalDatabase) -> None:
        relational_db.create_table("t")
        relational_db.insert("t", row("r1", a=1))
        relational_db.create_table("t")

        assert relational_db.get("t", "r1") is None
        assert relational_db.table_count == 1
        assert relational_db.table_names() == ["t"]

    def test_row_count_and_table_lookup(self, relational_db: RelationalDatabase) -> None:
        for name in ("documents", "tags", "links"):
            relational_db.create_table(name)
        relational_db.insert("documents", row("doc_0", score=1))
        relational_db.insert("tags", row("tag_0_1", tag="important"))

        assert relational_db.row_count() == 2
        assert relational_db.table_names() == ["documents", "tags", "links"]
        assert relational_db.table("links") is not None
        assert relational_db.table("nope") is None
