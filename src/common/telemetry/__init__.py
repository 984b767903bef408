"""
Telemetry helpers.

Usage:
    from src.common.telemetry import trace_span

    with trace_span("ip.lookup.fetch", {"ip.lookup.host": host}) as span:
        ...
"""

from src.common.telemetry.tracing import (
    get_tracer,
    record_exception,
    trace_span,
)

__all__ = [
    "get_tracer",
    "record_exception",
    "trace_span",
]
