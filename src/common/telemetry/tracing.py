"""
Tracing Utilities.

Thin helpers over the OpenTelemetry API. Without an SDK tracer provider
configured, every span is a non-recording no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

logger = logging.getLogger(__name__)

DEFAULT_TRACER_NAME = "ip-resolution"


def get_tracer(name: str = DEFAULT_TRACER_NAME) -> trace.Tracer:
    """
    Get a tracer for creating spans.

    Args:
        name: Tracer name (typically module or component name)
    """
    return trace.get_tracer(name)


def record_exception(exception: Exception, span: Any = None) -> None:
    """
    Record an exception on the current or specified span.

    Args:
        exception: The exception to record
        span: Optional span (uses current span if not provided)
    """
    if span is None:
        span = trace.get_current_span()

    if span.is_recording():
        span.record_exception(exception)
        span.set_status(Status(StatusCode.ERROR, str(exception)))


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
    tracer_name: str = DEFAULT_TRACER_NAME,
) -> Generator[Any, None, None]:
    """
    Context manager for creating a traced span.

    Args:
        name: Span name (e.g., "ip.lookup.fetch")
        attributes: Optional initial span attributes
        tracer_name: Tracer to create the span from

    Yields:
        The active span

    Example:
        with trace_span("ip.cache.resolve", {"force": force}) as span:
            result = fetch()
            span.set_attribute("ip.valid", result.is_valid())
    """
    tracer = get_tracer(tracer_name)

    with tracer.start_as_current_span(name) as span:
        if attributes:
            span.set_attributes(attributes)
        try:
            yield span
        except Exception as e:
            record_exception(e, span)
            raise
