"""Document entity for the document-centric storage model.

A document is a self-describing record: a free-form Structured Value payload
plus metadata, an ordered duplicate-free tag list, and typed relationship
links to other documents.

Documents are mutated only before they are handed to the document engine;
once stored they are owned by the engine.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from docsim.domain.value_objects import DocumentId, StructuredValue, validate_value


@dataclass
class Document:
    """A stored document with metadata, tags and links.

    Attributes:
        id: Unique, caller-assigned identity
        created_at: Creation time, seconds since epoch
        updated_at: Last update time, seconds since epoch
        version: Starts at 1; the engine does not increment it
        size_bytes: Engine-side size estimate, not a measurement
        data: The payload, normally an object
        links: Relationship name -> target document id (one target per name)
        tags: Ordered, duplicate-free tag list

    Example:
        >>> doc = Document.new(DocumentId("doc_0"), {"title": "Document 0"})
        >>> doc.add_tag("important")
        True
        >>> doc.add_tag("important")
        False
        >>> doc.add_link("references", "doc_7")
        >>> doc.links
        {'references': 'doc_7'}
    """

    id: DocumentId
    created_at: int
    updated_at: int
    data: StructuredValue
    version: int = 1
    size_bytes: int = 100
    links: dict[str, DocumentId] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)

    SIZE_ESTIMATE_BYTES: ClassVar[int] = 100

    def __post_init__(self) -> None:
        """Validate identity and payload."""
        if not self.id:
            raise ValueError("Document id cannot be empty")
        validate_value(self.data)

    @classmethod
    def new(cls, doc_id: DocumentId, data: StructuredValue) -> Document:
        """Create a fresh version-1 document stamped with the current time."""
        now = int(time.time())
        return cls(
            id=doc_id,
            created_at=now,
            updated_at=now,
            data=data,
            version=1,
            size_bytes=cls.SIZE_ESTIMATE_BYTES,
        )

    def add_link(self, relationship: str, target: str) -> None:
        """Link this document to ``target``, replacing any previous target."""
        self.links[relationship] = DocumentId(target)

    def add_tag(self, tag: str) -> bool:
        """Append a tag unless already present.

        Returns:
            True if the tag was added, False if it was a duplicate
        """
        if tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def link_targets(self) -> Iterator[DocumentId]:
        """Iterate over the ids this document links to."""
        return iter(self.links.values())
