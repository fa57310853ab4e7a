"""Workload driver - identical synthetic workloads for both storage models.

A run has two timed phases:

1. Generation: ``num_records`` synthetic records are drawn from a
   ``DeterministicGenerator`` and written into the engine.
2. Query: ``num_queries`` queries continue drawing from the same generator.
   Each query adds its result-set size (1/0 for a direct lookup) to
   ``found``.

Record synthesis is shared by both engines and draws in a fixed order
(score, category, bucket tag, "important" tag, link). A document run and a
relational run with the same seed therefore hold the same logical dataset:
record i carries equivalent tags and links in each engine.

The hit rate is ``found / num_queries``: the average number of records
surfaced per query, not a boolean hit ratio, so it can exceed 1.

Memory is estimated by ``MemoryModel``, never measured.
"""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from docsim.domain.entities import Document, Row
from docsim.domain.services import (
    DeterministicGenerator,
    DocumentStore,
    MemoryModel,
    RelationalDatabase,
)
from docsim.domain.value_objects import (
    IMPORTANT_TAG,
    REFERENCES_RELATIONSHIP,
    DocumentId,
    StructuredValue,
    category_name,
    document_id,
    link_row_id,
    serialize_value,
    tag_name,
    tag_row_id,
)
from docsim.infrastructure.config import WorkloadConfig
from docsim.infrastructure.logging import get_logger
from docsim.infrastructure.metrics import MetricsRegistry, get_metrics
from docsim.infrastructure.tracing import trace_span
from docsim.ports.inbound import DocumentEnginePort, RelationalEnginePort

DOCUMENT_ENGINE = "document"
RELATIONAL_ENGINE = "relational"

DOCUMENTS_TABLE = "documents"
TAGS_TABLE = "tags"
LINKS_TABLE = "links"
RELATIONAL_TABLES = (DOCUMENTS_TABLE, TAGS_TABLE, LINKS_TABLE)


class QueryKind(str, Enum):
    """Kinds of queries the driver issues."""

    DIRECT_LOOKUP = "direct_lookup"
    TAG_SEARCH = "tag_search"
    LINK_SEARCH = "link_search"
    IMPORTANT_SEARCH = "important_search"


# Drawn uniformly by position. The relational engine has no "important" shortcut.
DOCUMENT_QUERY_KINDS = (
    QueryKind.DIRECT_LOOKUP,
    QueryKind.TAG_SEARCH,
    QueryKind.LINK_SEARCH,
    QueryKind.IMPORTANT_SEARCH,
)
RELATIONAL_QUERY_KINDS = (
    QueryKind.DIRECT_LOOKUP,
    QueryKind.TAG_SEARCH,
    QueryKind.LINK_SEARCH,
)


@dataclass(frozen=True)
class SyntheticRecord:
    """One generated record, before it is shaped for a specific engine."""

    index: int
    score: int
    category: str
    tag: str | None = None
    important: bool = False
    link_target: int | None = None

    @property
    def doc_id(self) -> DocumentId:
        return document_id(self.index)

    @property
    def link_target_id(self) -> DocumentId | None:
        if self.link_target is None:
            return None
        return document_id(self.link_target)

    def payload(self) -> dict[str, StructuredValue]:
        """Column/field payload shared by both engines."""
        return {
            "title": f"Document {self.index}",
            "content": f"Content for document {self.index}",
            "score": self.score,
            "category": self.category,
        }

    def tags(self) -> list[str]:
        """Tags in attachment order."""
        tags = []
        if self.tag is not None:
            tags.append(self.tag)
        if self.important:
            tags.append(IMPORTANT_TAG)
        return tags


def synthesize_records(
    rng: DeterministicGenerator,
    num_records: int,
    workload: WorkloadConfig | None = None,
) -> Iterator[SyntheticRecord]:
    """Lazily draw ``num_records`` records from ``rng``.

    Records must be consumed in order; each one advances the generator.
    """
    workload = workload or WorkloadConfig()
    for i in range(num_records):
        score = rng.range(workload.score_min, workload.score_max)
        category = category_name(rng.range(1, workload.category_buckets))

        tag = None
        if rng.boolean(workload.tag_probability):
            tag = tag_name(rng.range(1, workload.tag_buckets))

        important = rng.boolean(workload.important_probability)

        link_target = None
        if i > 0 and rng.boolean(workload.link_probability):
            link_target = rng.range(0, i)

        yield SyntheticRecord(
            index=i,
            score=score,
            category=category,
            tag=tag,
            important=important,
            link_target=link_target,
        )


@dataclass
class QueryTally:
    """Per-kind counts gathered by one query phase."""

    issued: Counter = field(default_factory=Counter)
    results: Counter = field(default_factory=Counter)

    @property
    def found(self) -> int:
        """Total records surfaced across all queries."""
        return sum(self.results.values())

    def add(self, kind: QueryKind, hits: int) -> None:
        self.issued[kind.value] += 1
        self.results[kind.value] += hits


@dataclass
class WorkloadResult:
    """Measurements of one engine run."""

    engine: str
    num_records: int
    num_queries: int
    insert_time_us: int
    query_time_us: int
    memory_bytes: int
    found: int
    queries_by_kind: dict[str, int] = field(default_factory=dict)
    results_by_kind: dict[str, int] = field(default_factory=dict)

    @property
    def total_time_us(self) -> int:
        """Generation plus query wall time in microseconds."""
        return self.insert_time_us + self.query_time_us

    @property
    def memory_kb(self) -> int:
        """Estimated memory in whole kilobytes."""
        return self.memory_bytes // 1024

    @property
    def hit_rate(self) -> float:
        """Average number of records surfaced per query."""
        if self.num_queries == 0:
            return 0.0
        return self.found / self.num_queries


def _elapsed_us(start_ns: int) -> int:
    return (time.perf_counter_ns() - start_ns) // 1000


class WorkloadDriver:
    """Runs the generation and query phases against either engine.

    Query loops only touch local tallies; Prometheus collectors are updated
    once per run, after the query timer has stopped.

    Example:
        >>> driver = WorkloadDriver()
        >>> result = driver.run_document(num_records=100, num_queries=50, seed=42)
        >>> result.engine
        'document'
    """

    def __init__(
        self,
        workload: WorkloadConfig | None = None,
        memory_model: MemoryModel | None = None,
        metrics: MetricsRegistry | None = None,
        retract_stale_entries: bool = False,
    ) -> None:
        """Initialize the driver.

        Args:
            workload: Workload shape (probabilities and buckets)
            memory_model: Memory estimation constants
            metrics: Metrics registry (defaults to the global one)
            retract_stale_entries: Build document stores that retract stale
                index entries on replacement
        """
        self._workload = workload or WorkloadConfig()
        self._memory_model = memory_model or MemoryModel()
        self._metrics = metrics or get_metrics()
        self._retract_stale_entries = retract_stale_entries
        self._log = get_logger(__name__)

    @property
    def workload(self) -> WorkloadConfig:
        return self._workload

    # ------------------------------------------------------------------
    # Generation phase
    # ------------------------------------------------------------------

    def populate_document_store(
        self,
        store: DocumentEnginePort,
        rng: DeterministicGenerator,
        num_records: int,
    ) -> int:
        """Write ``num_records`` synthetic documents into ``store``.

        Returns:
            Number of documents stored
        """
        for record in synthesize_records(rng, num_records, self._workload):
            doc = Document.new(record.doc_id, record.payload())
            for tag in record.tags():
                doc.add_tag(tag)
            if record.link_target_id is not None:
                doc.add_link(REFERENCES_RELATIONSHIP, record.link_target_id)
            store.store(doc)

        self._metrics.records_inserted_total.labels(engine=DOCUMENT_ENGINE).inc(num_records)
        return num_records

    def populate_relational(
        self,
        database: RelationalEnginePort,
        rng: DeterministicGenerator,
        num_records: int,
    ) -> int:
        """Write ``num_records`` synthetic records into the three tables.

        The tables must already exist; rows for a missing table are dropped.

        Returns:
            Number of rows actually inserted, across all tables
        """
        inserted = 0
        dropped: Counter = Counter()

        def insert(table_name: str, row: Row) -> None:
            nonlocal inserted
            if database.insert(table_name, row):
                inserted += 1
            else:
                dropped[table_name] += 1

        for record in synthesize_records(rng, num_records, self._workload):
            insert(DOCUMENTS_TABLE, Row(id=record.doc_id, data=record.payload()))

            # Tag assignments live in their own table
            for slot, tag in enumerate(record.tags(), start=1):
                insert(
                    TAGS_TABLE,
                    Row(id=tag_row_id(record.index, slot), data={"doc_id": record.doc_id, "tag": tag}),
                )

            # So do references
            if record.link_target is not None:
                insert(
                    LINKS_TABLE,
                    Row(
                        id=link_row_id(record.index, record.link_target),
                        data={
                            "from_id": record.doc_id,
                            "to_id": record.link_target_id,
                            "relationship": REFERENCES_RELATIONSHIP,
                        },
                    ),
                )

        if inserted:
            self._metrics.records_inserted_total.labels(engine=RELATIONAL_ENGINE).inc(inserted)
        for table_name, count in dropped.items():
            self._metrics.dropped_inserts_total.labels(table=table_name).inc(count)
        return inserted

    # ------------------------------------------------------------------
    # Query phase
    # ------------------------------------------------------------------

    def query_document_store(
        self,
        store: DocumentEnginePort,
        rng: DeterministicGenerator,
        num_records: int,
        num_queries: int,
    ) -> QueryTally:
        """Issue ``num_queries`` random queries against the document store."""
        tally = QueryTally()
        for _ in range(num_queries):
            kind = DOCUMENT_QUERY_KINDS[rng.range(0, len(DOCUMENT_QUERY_KINDS))]
            if kind is QueryKind.DIRECT_LOOKUP:
                hits = 1 if store.get(document_id(rng.range(0, num_records))) is not None else 0
            elif kind is QueryKind.TAG_SEARCH:
                hits = len(store.find_by_tag(tag_name(rng.range(1, self._workload.tag_buckets))))
            elif kind is QueryKind.LINK_SEARCH:
                hits = len(store.find_linked_to(document_id(rng.range(0, num_records))))
            else:
                hits = len(store.find_by_tag(IMPORTANT_TAG))
            tally.add(kind, hits)
        return tally

    def query_relational(
        self,
        database: RelationalEnginePort,
        rng: DeterministicGenerator,
        num_records: int,
        num_queries: int,
    ) -> QueryTally:
        """Issue ``num_queries`` random queries against the relational tables."""
        tally = QueryTally()
        for _ in range(num_queries):
            kind = RELATIONAL_QUERY_KINDS[rng.range(0, len(RELATIONAL_QUERY_KINDS))]
            if kind is QueryKind.DIRECT_LOOKUP:
                row = database.get(DOCUMENTS_TABLE, document_id(rng.range(0, num_records)))
                hits = 1 if row is not None else 0
            elif kind is QueryKind.TAG_SEARCH:
                # Join simulation: tags table lookup by tag value
                tag = tag_name(rng.range(1, self._workload.tag_buckets))
                hits = len(database.find_by_column(TAGS_TABLE, "tag", serialize_value(tag)))
            else:
                # Join simulation: links table lookup by target id
                target = document_id(rng.range(0, num_records))
                hits = len(database.find_by_column(LINKS_TABLE, "to_id", serialize_value(target)))
            tally.add(kind, hits)
        return tally

    # ------------------------------------------------------------------
    # End-to-end runs
    # ------------------------------------------------------------------

    def run_document(self, num_records: int, num_queries: int, seed: int) -> WorkloadResult:
        """Generate, query and measure a fresh document store."""
        rng = DeterministicGenerator(seed)
        store = DocumentStore(retract_stale_entries=self._retract_stale_entries)

        with trace_span("workload.generate", {"engine": DOCUMENT_ENGINE, "num_records": num_records}):
            start = time.perf_counter_ns()
            self.populate_document_store(store, rng, num_records)
            insert_time_us = _elapsed_us(start)

        with trace_span("workload.query", {"engine": DOCUMENT_ENGINE, "num_queries": num_queries}):
            start = time.perf_counter_ns()
            tally = self.query_document_store(store, rng, num_records, num_queries)
            query_time_us = _elapsed_us(start)

        result = WorkloadResult(
            engine=DOCUMENT_ENGINE,
            num_records=num_records,
            num_queries=num_queries,
            insert_time_us=insert_time_us,
            query_time_us=query_time_us,
            memory_bytes=self._memory_model.estimate_document_store(store),
            found=tally.found,
            queries_by_kind=dict(tally.issued),
            results_by_kind=dict(tally.results),
        )
        self._observe(result)
        return result

    def run_relational(self, num_records: int, num_queries: int, seed: int) -> WorkloadResult:
        """Generate, query and measure a fresh relational database."""
        rng = DeterministicGenerator(seed)
        database = RelationalDatabase()
        for name in RELATIONAL_TABLES:
            database.create_table(name)

        with trace_span("workload.generate", {"engine": RELATIONAL_ENGINE, "num_records": num_records}):
            start = time.perf_counter_ns()
            self.populate_relational(database, rng, num_records)
            insert_time_us = _elapsed_us(start)

        with trace_span("workload.query", {"engine": RELATIONAL_ENGINE, "num_queries": num_queries}):
            start = time.perf_counter_ns()
            tally = self.query_relational(database, rng, num_records, num_queries)
            query_time_us = _elapsed_us(start)

        result = WorkloadResult(
            engine=RELATIONAL_ENGINE,
            num_records=num_records,
            num_queries=num_queries,
            insert_time_us=insert_time_us,
            query_time_us=query_time_us,
            memory_bytes=self._memory_model.estimate_relational(database, num_records),
            found=tally.found,
            queries_by_kind=dict(tally.issued),
            results_by_kind=dict(tally.results),
        )
        self._observe(result)
        return result

    def _observe(self, result: WorkloadResult) -> None:
        labels = {"engine": result.engine}
        self._metrics.phase_duration_seconds.labels(phase="generate", **labels).observe(
            result.insert_time_us / 1_000_000
        )
        self._metrics.phase_duration_seconds.labels(phase="query", **labels).observe(
            result.query_time_us / 1_000_000
        )
        self._metrics.estimated_memory_bytes.labels(**labels).set(result.memory_bytes)

        for kind, count in result.queries_by_kind.items():
            self._metrics.queries_total.labels(query_kind=kind, **labels).inc(count)
        for kind, count in result.results_by_kind.items():
            if count:
                self._metrics.query_results_total.labels(query_kind=kind, **labels).inc(count)

        self._log.info(
            "workload_completed",
            engine=result.engine,
            num_records=result.num_records,
            num_queries=result.num_queries,
            total_time_us=result.total_time_us,
            memory_bytes=result.memory_bytes,
            hit_rate=round(result.hit_rate, 4),
        )
