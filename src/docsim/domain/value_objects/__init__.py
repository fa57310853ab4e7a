"""Value objects for the storage simulation domain.

Exports:
    Structured Value:
        - StructuredValue: str | int | Mapping[str, StructuredValue]
        - ValueKind: Variant discriminator
        - kind_of, validate_value: Classification and validation
        - serialize_value: Canonical encoding used as an index key

    Identifiers:
        - DocumentId, RowId: Type-safe string identifiers
        - IMPORTANT_TAG, REFERENCES_RELATIONSHIP: Fixed workload names
        - document_id, tag_name, category_name, tag_row_id, link_row_id
"""

from docsim.domain.value_objects.identifiers import (
    IMPORTANT_TAG,
    REFERENCES_RELATIONSHIP,
    DocumentId,
    RowId,
    category_name,
    document_id,
    link_row_id,
    tag_name,
    tag_row_id,
)
from docsim.domain.value_objects.structured_value import (
    INT64_MAX,
    INT64_MIN,
    StructuredValue,
    ValueKind,
    kind_of,
    serialize_value,
    validate_value,
)

__all__ = [
    # Structured Value
    "StructuredValue",
    "ValueKind",
    "INT64_MIN",
    "INT64_MAX",
    "kind_of",
    "validate_value",
    "serialize_value",
    # Identifiers
    "DocumentId",
    "RowId",
    "IMPORTANT_TAG",
    "REFERENCES_RELATIONSHIP",
    "document_id",
    "tag_name",
    "category_name",
    "tag_row_id",
    "link_row_id",
]
