"""Study-day timing constants.

Day arithmetic:
    All timing math runs on integer seconds. Offsets are minutes *west* of
    UTC, so ``local = instant - mins_west * 60``.

Rollover hours:
    Canonical hours are 0..23. Older collections stored the rollover as a
    negative count of hours before midnight (-1 == 23:00), so -23..-1 is
    accepted and folded onto the canonical range. Anything else is rejected.

Instants:
    Offsets are resolved through ``datetime``, which only spans years 1..9999.
    ``INSTANT_MIN``/``INSTANT_MAX`` keep one day of margin inside that range so
    shifting into any local zone stays representable.

Environment Variables:
    STUDYDAY_LEGACY_CREATED_MINS_WEST: Offset applied when a collection has no
        recorded creation offset (payload sends ``null``). Defaults to 0 (UTC).
    STUDYDAY_TIMEZONE: IANA zone used to derive the current offset. When unset
        the host's local timezone is used.
"""

from __future__ import annotations

from ..utils.env import env_int, env_str

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

ROLLOVER_HOUR_MIN = 0
ROLLOVER_HOUR_MAX = 23
LEGACY_ROLLOVER_HOUR_MIN = -23
HOURS_PER_DAY = 24

# 0001-01-02T00:00:00Z and 9999-12-30T23:59:59Z
INSTANT_MIN = -62_135_510_400
INSTANT_MAX = 253_402_214_399

LEGACY_CREATED_MINS_WEST = env_int("STUDYDAY_LEGACY_CREATED_MINS_WEST", 0)
LOCAL_TIMEZONE = env_str("STUDYDAY_TIMEZONE")


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "ROLLOVER_HOUR_MIN",
    "ROLLOVER_HOUR_MAX",
    "LEGACY_ROLLOVER_HOUR_MIN",
    "HOURS_PER_DAY",
    "INSTANT_MIN",
    "INSTANT_MAX",
    "LEGACY_CREATED_MINS_WEST",
    "LOCAL_TIMEZONE",
]
