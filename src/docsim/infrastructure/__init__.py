"""Infrastructure layer - cross-cutting concerns."""

from docsim.infrastructure.config import Config, get_config
from docsim.infrastructure.logging import setup_logging, get_logger, run_context
from docsim.infrastructure.metrics import setup_metrics, get_metrics, render_metrics, MetricsRegistry
from docsim.infrastructure.tracing import setup_tracing, shutdown_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "run_context",
    "setup_metrics",
    "get_metrics",
    "render_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "shutdown_tracing",
    "get_tracer",
    "trace_span",
]
