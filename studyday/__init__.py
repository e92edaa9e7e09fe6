"""Study-day timing for a spaced-repetition collection.

This package answers one question for a host application: which study day
is it now, counted from when the collection was created, and when does the
next one begin. The answer honours a per-collection rollover hour and stays
stable across timezone changes and DST transitions.

Architecture Overview:
    - timing/: Pure day-boundary engine, rollover normalization, clock and
      timezone-offset helpers
    - bridge/: Named-command dispatch with JSON payload decode/encode
    - state/: Immutable request/result dataclasses
    - errors/: Typed failures (decode, rollover, unknown command)
    - config/: Environment-driven constants
    - logging/: Context-aware logging setup
    - telemetry/: Sentry and OpenTelemetry wiring
    - server.py: FastAPI surface (POST /request/{command})
    - cli.py: ``python -m studyday`` surface

Example (with STUDYDAY_TIMEZONE=UTC):
    >>> from studyday.bridge import dispatch
    >>> dispatch("timingToday", '{"createdAt": 0, "createdOffset": 0, "rollover": 4}', now_secs=100800)
    '{"daysElapsed": 1, "nextDayAt": 187200}'

Environment Variables:
    Optional:
        - STUDYDAY_TIMEZONE: IANA zone for the current offset (default: host zone)
        - STUDYDAY_LEGACY_CREATED_MINS_WEST: Offset for collections with no
          recorded creation offset (default: 0)
        - APP_LOG_LEVEL / APP_LOG_FORMAT / APP_LOG_DATEFMT
        - SENTRY_DSN, OTEL_EXPORTER_OTLP_ENDPOINT: enable telemetry
"""
