"""Identifiers used by the synthetic workload.

Both engines address records with the same string ids so that a direct
lookup means the same thing in each.
"""

from __future__ import annotations

from typing import NewType

DocumentId = NewType("DocumentId", str)
"""Caller-assigned, immutable identity of a document."""

RowId = NewType("RowId", str)
"""Identity of a row, unique within its table."""

IMPORTANT_TAG = "important"
REFERENCES_RELATIONSHIP = "references"


def document_id(index: int) -> DocumentId:
    """Id of the index-th synthetic document."""
    return DocumentId(f"doc_{index}")


def tag_name(bucket: int) -> str:
    """Name of a bucket tag."""
    return f"tag_{bucket}"


def category_name(bucket: int) -> str:
    """Name of a category bucket."""
    return f"cat_{bucket}"


def tag_row_id(index: int, slot: int) -> RowId:
    """Id of the slot-th tag assignment row of the index-th record."""
    return RowId(f"tag_{index}_{slot}")


def link_row_id(index: int, target: int) -> RowId:
    """Id of the link row from record ``index`` to record ``target``."""
    return RowId(f"link_{index}_{target}")
