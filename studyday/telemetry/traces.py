"""Span context manager for bridge dispatch tracing."""

from __future__ import annotations

from opentelemetry import trace
from collections.abc import Iterator
from contextlib import contextmanager
from ..config.telemetry import SPAN_DISPATCH, OTEL_SERVICE_NAME


def _tracer() -> trace.Tracer:
    return trace.get_tracer(OTEL_SERVICE_NAME)


@contextmanager
def dispatch_span(*, command: str, request_id: str) -> Iterator[trace.Span]:
    """Span wrapping one bridge request, from payload parse to encoded result."""
    with _tracer().start_as_current_span(
        SPAN_DISPATCH,
        attributes={"command": command, "request.id": request_id},
    ) as span:
        yield span


__all__ = ["dispatch_span"]
