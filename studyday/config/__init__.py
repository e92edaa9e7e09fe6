"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- timing: day arithmetic constants, rollover bounds, timezone defaults
- bridge: command names, payload fields, error codes, exit codes
- logging: log level and format
- telemetry: Sentry/OTel settings (import directly from .telemetry)
"""

from .timing import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    LOCAL_TIMEZONE,
    LEGACY_CREATED_MINS_WEST,
)
from .bridge import (
    COMMAND_TIMING_TODAY,
    COMMAND_LOCAL_OFFSET,
)
from .logging import (
    APP_LOG_LEVEL,
    APP_LOG_FORMAT,
    APP_LOG_DATEFMT,
)

__all__ = [
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "LOCAL_TIMEZONE",
    "LEGACY_CREATED_MINS_WEST",
    "COMMAND_TIMING_TODAY",
    "COMMAND_LOCAL_OFFSET",
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
]
