"""Telemetry configuration: env vars, metric specs, span names, Sentry constants."""

import os

# ---------------------------------------------------------------------------
# Sentry
# ---------------------------------------------------------------------------
SENTRY_DSN: str = os.getenv("SENTRY_DSN", "")
SENTRY_ENVIRONMENT: str = os.getenv("SENTRY_ENVIRONMENT", "production")
SENTRY_RELEASE: str = os.getenv("SENTRY_RELEASE", "")
SENTRY_SAMPLE_RATE: float = float(os.getenv("SENTRY_SAMPLE_RATE", "1.0"))

# ---------------------------------------------------------------------------
# OTLP export
# ---------------------------------------------------------------------------
OTEL_EXPORTER_ENDPOINT: str = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "").rstrip("/")
OTEL_EXPORTER_TOKEN: str = os.getenv("OTEL_EXPORTER_TOKEN", "")
OTEL_ENVIRONMENT: str = os.getenv("OTEL_ENVIRONMENT", "production")

# ---------------------------------------------------------------------------
# OTel tuning
# ---------------------------------------------------------------------------
OTEL_SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "studyday")
OTEL_TRACES_EXPORT_INTERVAL_MS: int = int(os.getenv("OTEL_TRACES_EXPORT_INTERVAL_MS", "5000"))
OTEL_METRICS_EXPORT_INTERVAL_MS: int = int(os.getenv("OTEL_METRICS_EXPORT_INTERVAL_MS", "15000"))
OTEL_TRACES_BATCH_SIZE: int = int(os.getenv("OTEL_TRACES_BATCH_SIZE", "512"))

# ---------------------------------------------------------------------------
# Metric spec tuples: (name, unit, description)
# ---------------------------------------------------------------------------

# Histograms
METRIC_REQUEST_LATENCY = ("studyday.request_latency", "s", "Bridge dispatch latency")
METRIC_DAYS_ELAPSED = ("studyday.days_elapsed", "{day}", "Study days elapsed per timing request")

# Counters
METRIC_REQUESTS_TOTAL = ("studyday.requests_total", "{request}", "Dispatched bridge requests")
METRIC_ERRORS_TOTAL = ("studyday.errors_total", "{error}", "Failed bridge requests")
METRIC_CLOCK_SKEW_TOTAL = ("studyday.clock_skew_total", "{request}", "Requests where now precedes creation")

# ---------------------------------------------------------------------------
# Span names
# ---------------------------------------------------------------------------
SPAN_DISPATCH = "studyday.dispatch"

# ---------------------------------------------------------------------------
# Sentry constants
# ---------------------------------------------------------------------------
SENTRY_RATE_LIMIT_S: float = 10.0
SENTRY_TAG_COMMAND = "command"
SENTRY_TAG_REQUEST_ID = "request_id"


__all__ = [
    # Sentry env
    "SENTRY_DSN",
    "SENTRY_ENVIRONMENT",
    "SENTRY_RELEASE",
    "SENTRY_SAMPLE_RATE",
    # OTLP env
    "OTEL_EXPORTER_ENDPOINT",
    "OTEL_EXPORTER_TOKEN",
    "OTEL_ENVIRONMENT",
    # OTel tuning
    "OTEL_SERVICE_NAME",
    "OTEL_TRACES_EXPORT_INTERVAL_MS",
    "OTEL_METRICS_EXPORT_INTERVAL_MS",
    "OTEL_TRACES_BATCH_SIZE",
    # Histograms
    "METRIC_REQUEST_LATENCY",
    "METRIC_DAYS_ELAPSED",
    # Counters
    "METRIC_REQUESTS_TOTAL",
    "METRIC_ERRORS_TOTAL",
    "METRIC_CLOCK_SKEW_TOTAL",
    # Span names
    "SPAN_DISPATCH",
    # Sentry constants
    "SENTRY_RATE_LIMIT_S",
    "SENTRY_TAG_COMMAND",
    "SENTRY_TAG_REQUEST_ID",
]
