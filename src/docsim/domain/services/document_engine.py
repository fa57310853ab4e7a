"""Document-centric storage engine.

Documents are kept in a primary map keyed by id, with two denormalized
secondary indexes maintained at store time:

    tag_index:  tag       -> [ids of documents carrying the tag]
    link_index: target_id -> [ids of documents linking to target_id]

Both indexes are append-only inverted lists. They are only ever written by
``store``, so every id they hold refers to a document that was stored.

Re-storing an id replaces the document (last write wins). By default the
previous version's index entries are left in place, so a tag the new
version dropped still points at the id, and re-storing the same tags adds a
second entry. Passing ``retract_stale_entries=True`` removes the previous
version's entries before indexing the replacement.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Mapping

from docsim.domain.entities import Document
from docsim.domain.value_objects import DocumentId

logger = logging.getLogger(__name__)


class DocumentStore:
    """In-memory document store with tag and link indexes."""

    def __init__(self, retract_stale_entries: bool = False) -> None:
        """Initialize an empty store.

        Args:
            retract_stale_entries: Remove a replaced document's index entries
                before indexing its replacement.
        """
        self._retract_stale_entries = retract_stale_entries
        self._documents: dict[DocumentId, Document] = {}
        self._tag_index: dict[str, list[DocumentId]] = defaultdict(list)
        self._link_index: dict[DocumentId, list[DocumentId]] = defaultdict(list)

    @property
    def retract_stale_entries(self) -> bool:
        """Whether replacing stores retract stale index entries."""
        return self._retract_stale_entries

    @property
    def tag_index(self) -> Mapping[str, list[DocumentId]]:
        """Read-only view of the tag index."""
        return self._tag_index

    @property
    def link_index(self) -> Mapping[DocumentId, list[DocumentId]]:
        """Read-only view of the link index."""
        return self._link_index

    @property
    def tag_count(self) -> int:
        """Number of distinct tags in the tag index."""
        return len(self._tag_index)

    @property
    def link_target_count(self) -> int:
        """Number of distinct link targets in the link index."""
        return len(self._link_index)

    def store(self, document: Document) -> None:
        """Insert or replace a document and index it."""
        previous = self._documents.get(document.id)
        if previous is not None:
            if self._retract_stale_entries:
                self._retract(self._tag_index, previous.tags, previous.id)
                self._retract(self._link_index, previous.link_targets(), previous.id)
            else:
                logger.debug("Document %s replaced without index retraction", document.id)

        for tag in document.tags:
            self._tag_index[tag].append(document.id)
        for target in document.link_targets():
            self._link_index[target].append(document.id)

        self._documents[document.id] = document

    def get(self, doc_id: str) -> Document | None:
        """Look up a document by id."""
        return self._documents.get(DocumentId(doc_id))

    def find_by_tag(self, tag: str) -> list[Document]:
        """Documents carrying ``tag``, in index-append order."""
        return self._resolve(self._tag_index.get(tag, ()))

    def find_linked_to(self, target_id: str) -> list[Document]:
        """Documents that declare a link to ``target_id``."""
        return self._resolve(self._link_index.get(DocumentId(target_id), ()))

    def _resolve(self, doc_ids: Iterable[DocumentId]) -> list[Document]:
        # Ids without a primary entry are skipped.
        return [self._documents[doc_id] for doc_id in doc_ids if doc_id in self._documents]

    @staticmethod
    def _retract(index: dict, keys: Iterable[str], doc_id: DocumentId) -> None:
        for key in set(keys):
            entries = index.get(key)
            if entries is None:
                continue
            entries[:] = [entry for entry in entries if entry != doc_id]
            if not entries:
                del index[key]

    def __len__(self) -> int:
        """Number of stored documents."""
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        """Whether a document with ``doc_id`` is stored."""
        return doc_id in self._documents
