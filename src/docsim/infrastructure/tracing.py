"""OpenTelemetry spans around workload phases.

docsim keeps its own ``TracerProvider`` instead of installing a process-wide
one, so ``setup_tracing`` can be called again with a different exporter
(one CLI invocation after another in the same process, or a test with an
in-memory exporter). Until it is called, ``trace_span`` uses the global
tracer, which is a no-op unless the host application configured one.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor, SpanExporter

_provider: TracerProvider | None = None
_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "docsim",
    console_export: bool = False,
    exporter: SpanExporter | None = None,
) -> trace.Tracer:
    """
    Install a fresh tracer provider for docsim spans.

    Args:
        service_name: ``service.name`` resource attribute
        console_export: Print finished spans to stderr
        exporter: Additional exporter for finished spans

    Returns:
        The tracer ``trace_span`` will use
    """
    global _provider, _tracer

    from docsim import __version__

    shutdown_tracing()

    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name, "service.version": __version__})
    )
    if console_export:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    if exporter is not None:
        provider.add_span_processor(SimpleSpanProcessor(exporter))

    _provider = provider
    _tracer = provider.get_tracer("docsim", __version__)
    return _tracer


def shutdown_tracing() -> None:
    """Flush and drop the docsim provider, if one is installed."""
    global _provider, _tracer
    if _provider is not None:
        _provider.shutdown()
    _provider = None
    _tracer = None


def get_tracer() -> trace.Tracer:
    """The docsim tracer, or the global one before ``setup_tracing``."""
    if _tracer is not None:
        return _tracer
    return trace.get_tracer("docsim")


@contextmanager
def trace_span(name: str, attributes: dict[str, Any] | None = None) -> Iterator[trace.Span]:
    """
    Run the block inside a span.

    Args:
        name: Span name, e.g. ``workload.generate``
        attributes: Attributes set when the span starts

    Yields:
        The active span
    """
    with get_tracer().start_as_current_span(name, attributes=attributes) as span:
        yield span
