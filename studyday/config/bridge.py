"""Command bridge configuration values.

Commands:
    Names are the exact strings a host sends; they are case-sensitive.

Payload fields:
    Arguments and results are JSON objects with camelCase keys. The snake_case
    aliases are the names the first Android bridge used and are accepted
    wherever a payload is decoded, arguments and results alike. Encoding
    always writes the camelCase names, so a host still reading
    ``days_elapsed``/``next_day_at`` must decode results with
    ``decode_timing_result`` or switch to the camelCase keys.

Error codes:
    Machine-readable identifiers carried by ``ValidationError`` subclasses and
    returned by the HTTP and CLI surfaces.
"""

from __future__ import annotations

# ============================================================================
# Commands
# ============================================================================

COMMAND_TIMING_TODAY = "timingToday"
COMMAND_LOCAL_OFFSET = "localOffset"

# ============================================================================
# Payload fields
# ============================================================================

FIELD_CREATED_AT = "createdAt"
FIELD_CREATED_OFFSET = "createdOffset"
FIELD_ROLLOVER = "rollover"
FIELD_AT = "at"

FIELD_DAYS_ELAPSED = "daysElapsed"
FIELD_NEXT_DAY_AT = "nextDayAt"
FIELD_MINUTES_WEST = "minutesWest"

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    FIELD_CREATED_AT: ("created_secs",),
    FIELD_CREATED_OFFSET: ("created_mins_west",),
    FIELD_ROLLOVER: ("rollover_hour",),
    FIELD_DAYS_ELAPSED: ("days_elapsed",),
    FIELD_NEXT_DAY_AT: ("next_day_at",),
}

# ============================================================================
# Error codes
# ============================================================================

ERROR_EMPTY_PAYLOAD = "empty_payload"
ERROR_INVALID_JSON = "invalid_json"
ERROR_INVALID_PAYLOAD = "invalid_payload"
ERROR_MISSING_FIELD = "missing_field"
ERROR_INVALID_FIELD = "invalid_field"
ERROR_INVALID_ROLLOVER = "invalid_rollover"
ERROR_INVALID_INSTANT = "invalid_instant"
ERROR_UNKNOWN_COMMAND = "unknown_command"
ERROR_INTERNAL = "internal"

# ============================================================================
# CLI exit codes (sysexits.h)
# ============================================================================

EXIT_OK = 0
EXIT_VALIDATION = 2
EXIT_SOFTWARE = 70


__all__ = [
    "COMMAND_TIMING_TODAY",
    "COMMAND_LOCAL_OFFSET",
    "FIELD_CREATED_AT",
    "FIELD_CREATED_OFFSET",
    "FIELD_ROLLOVER",
    "FIELD_AT",
    "FIELD_DAYS_ELAPSED",
    "FIELD_NEXT_DAY_AT",
    "FIELD_MINUTES_WEST",
    "FIELD_ALIASES",
    "ERROR_EMPTY_PAYLOAD",
    "ERROR_INVALID_JSON",
    "ERROR_INVALID_PAYLOAD",
    "ERROR_MISSING_FIELD",
    "ERROR_INVALID_FIELD",
    "ERROR_INVALID_ROLLOVER",
    "ERROR_INVALID_INSTANT",
    "ERROR_UNKNOWN_COMMAND",
    "ERROR_INTERNAL",
    "EXIT_OK",
    "EXIT_VALIDATION",
    "EXIT_SOFTWARE",
]
