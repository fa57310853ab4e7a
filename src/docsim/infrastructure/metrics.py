"""Prometheus metrics for the storage simulation.

Collectors live in-process only; the simulation never opens a network
listener. Use ``render_metrics`` to get the exposition text.
"""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    REGISTRY,
    CollectorRegistry,
    generate_latest,
)


class MetricsRegistry:
    """Registry of all simulation metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Engine write metrics
        self.records_inserted_total = Counter(
            "docsim_records_inserted_total",
            "Documents or rows actually written into an engine",
            ["engine"],  # document, relational
            registry=self._registry,
        )

        self.dropped_inserts_total = Counter(
            "docsim_dropped_inserts_total",
            "Rows silently dropped because their table does not exist",
            ["table"],
            registry=self._registry,
        )

        # Query metrics
        self.queries_total = Counter(
            "docsim_queries_total",
            "Total queries issued by the workload driver",
            ["engine", "query_kind"],
            registry=self._registry,
        )

        self.query_results_total = Counter(
            "docsim_query_results_total",
            "Total records surfaced by queries",
            ["engine", "query_kind"],
            registry=self._registry,
        )

        # Phase timing
        self.phase_duration_seconds = Histogram(
            "docsim_phase_duration_seconds",
            "Wall-clock duration of a workload phase in seconds",
            ["engine", "phase"],  # phase: generate, query
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 5.0),
            registry=self._registry,
        )

        # Memory estimate
        self.estimated_memory_bytes = Gauge(
            "docsim_estimated_memory_bytes",
            "Estimated memory footprint of the last run",
            ["engine"],
            registry=self._registry,
        )

        # Build info
        self.info = Info(
            "docsim",
            "Storage simulation information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """The underlying collector registry."""
        return self._registry


_metrics: MetricsRegistry | None = None


def setup_metrics(registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Build the process-wide metrics registry.

    A CLI run passes a fresh ``CollectorRegistry`` so that its counters start
    at zero; without one the existing registry is reused.

    Args:
        registry: Collector registry to bind to

    Returns:
        The metrics registry
    """
    global _metrics
    if registry is None and _metrics is not None:
        return _metrics

    from docsim import __version__

    metrics = MetricsRegistry(registry)
    metrics.info.info({"version": __version__})
    _metrics = metrics
    return metrics


def get_metrics() -> MetricsRegistry:
    """The process-wide registry, bound to the default collector registry on first use."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics


def render_metrics(metrics: MetricsRegistry | None = None) -> str:
    """Render a registry in the Prometheus text exposition format."""
    metrics = metrics or get_metrics()
    return generate_latest(metrics.registry).decode("utf-8")
