"""MetricInstruments registry: typed accessors for the bridge's OTel instruments."""

from __future__ import annotations

import logging
from opentelemetry import metrics
from ..config.telemetry import (
    OTEL_SERVICE_NAME,
    METRIC_DAYS_ELAPSED,
    METRIC_ERRORS_TOTAL,
    METRIC_REQUESTS_TOTAL,
    METRIC_REQUEST_LATENCY,
    METRIC_CLOCK_SKEW_TOTAL,
)

logger = logging.getLogger(__name__)


def _histogram(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.Histogram:
    name, unit, desc = spec
    return meter.create_histogram(name, unit=unit, description=desc)


def _counter(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.Counter:
    name, unit, desc = spec
    return meter.create_counter(name, unit=unit, description=desc)


class MetricInstruments:
    """Holds all OTel metric instruments created from config specs."""

    __slots__ = (
        "request_latency",
        "days_elapsed",
        "requests_total",
        "errors_total",
        "clock_skew_total",
    )

    def __init__(self, meter: metrics.Meter) -> None:
        # Histograms
        self.request_latency = _histogram(meter, METRIC_REQUEST_LATENCY)
        self.days_elapsed = _histogram(meter, METRIC_DAYS_ELAPSED)
        # Counters
        self.requests_total = _counter(meter, METRIC_REQUESTS_TOTAL)
        self.errors_total = _counter(meter, METRIC_ERRORS_TOTAL)
        self.clock_skew_total = _counter(meter, METRIC_CLOCK_SKEW_TOTAL)


_metrics: MetricInstruments | None = None


def get_metrics() -> MetricInstruments:
    """Return the global MetricInstruments (no-op meter if OTel not initialized)."""
    global _metrics  # noqa: PLW0603
    if _metrics is None:
        meter = metrics.get_meter(OTEL_SERVICE_NAME)
        _metrics = MetricInstruments(meter)
    return _metrics


def initialize_metrics() -> None:
    """Create MetricInstruments from the current global meter provider."""
    global _metrics  # noqa: PLW0603
    meter = metrics.get_meter(OTEL_SERVICE_NAME)
    _metrics = MetricInstruments(meter)
    logger.info("Telemetry metrics initialized")


__all__ = ["MetricInstruments", "get_metrics", "initialize_metrics"]
