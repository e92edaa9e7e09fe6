"""Wall clock and local timezone offsets.

The bridge reads the clock once per request and derives the current offset
from the configured zone (``STUDYDAY_TIMEZONE``) or, when unset, the host's
local zone. Offsets follow the rest of the package: minutes *west* of UTC.
"""

from __future__ import annotations

import time
import logging
from functools import lru_cache
from zoneinfo import ZoneInfo
from datetime import datetime, timedelta, timezone, tzinfo

from ..config.timing import INSTANT_MAX, INSTANT_MIN, LOCAL_TIMEZONE
from ..errors.instant import InstantOutOfRangeError

logger = logging.getLogger(__name__)

_ONE_MINUTE = timedelta(minutes=1)


def now_secs() -> int:
    """Current wall-clock instant in whole seconds since the epoch."""
    return int(time.time())


@lru_cache(maxsize=8)
def _zone(name: str) -> ZoneInfo:
    zone = ZoneInfo(name)
    logger.info("timezone resolved: %s", name)
    return zone


def configured_timezone() -> tzinfo | None:
    """Return the configured zone, or None to fall back to the host zone.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: ``STUDYDAY_TIMEZONE`` names no known zone.
    """
    if not LOCAL_TIMEZONE:
        return None
    return _zone(LOCAL_TIMEZONE)


def local_mins_west(instant: int, tz: tzinfo | None = None) -> int:
    """Offset of ``tz`` at ``instant`` in minutes west of UTC.

    DST is resolved for the instant itself, so two instants on either side of
    a transition report different offsets.

    Args:
        instant: Seconds since the epoch.
        tz: Zone to evaluate; defaults to the configured or host zone.

    Raises:
        InstantOutOfRangeError: ``instant`` falls outside the years ``datetime``
            can represent, or the platform cannot convert it.
    """
    if not INSTANT_MIN <= instant <= INSTANT_MAX:
        raise InstantOutOfRangeError(instant)
    zone = tz or configured_timezone()
    try:
        moment = datetime.fromtimestamp(instant, tz=timezone.utc)
        local = moment.astimezone(zone) if zone is not None else moment.astimezone()
    except (OverflowError, ValueError, OSError) as exc:
        raise InstantOutOfRangeError(instant) from exc
    offset = local.utcoffset() or timedelta(0)
    return -(offset // _ONE_MINUTE)


__all__ = ["now_secs", "configured_timezone", "local_mins_west"]
