"""OpenTelemetry tracing configuration."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)

from cvd import __version__
from cvd.infrastructure.config import ObservabilityConfig

_tracer: trace.Tracer | None = None
_provider: TracerProvider | None = None


def setup_tracing(config: ObservabilityConfig | None = None) -> trace.Tracer:
    """
    Set up OpenTelemetry tracing.

    Spans are exported over OTLP only when an endpoint is configured, and
    printed to stderr only when console export is enabled. Otherwise they
    are recorded and dropped.

    Args:
        config: Observability settings. Defaults apply when omitted.

    Returns:
        Configured tracer instance
    """
    global _tracer, _provider
    config = config or ObservabilityConfig()

    resource = Resource.create(
        {
            "service.name": config.otel_service_name,
            "service.version": __version__,
        }
    )

    provider = TracerProvider(resource=resource)

    if config.otel_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=config.otel_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    if config.trace_console_export:
        console_exporter = ConsoleSpanExporter(out=sys.stderr)
        provider.add_span_processor(SimpleSpanProcessor(console_exporter))

    _provider = provider
    _tracer = provider.get_tracer(config.otel_service_name)

    return _tracer


def shutdown_tracing() -> None:
    """Flush pending spans. The process exits right after selection."""
    global _provider
    if _provider is not None:
        _provider.shutdown()
        _provider = None


def get_tracer() -> trace.Tracer:
    """Get the global tracer instance."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("cvd")
    return _tracer


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
    tracer: trace.Tracer | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Context manager for creating a trace span.

    Exceptions raised inside the block are recorded on the span and
    re-raised.

    Args:
        name: Span name
        attributes: Initial span attributes
        tracer: Tracer to use, the global one by default

    Yields:
        The active span
    """
    tracer = tracer or get_tracer()
    with tracer.start_as_current_span(name, attributes=attributes) as span:
        yield span
