"""Rollover-hour normalization.

Rollover hours are stored as an hour of the day, 0..23. Older collections
stored a negative count of hours before midnight instead, so ``-1`` means
23:00 and ``-23`` means 01:00. Both encodings fold onto the canonical range
here and nowhere else; values outside -23..23 have no sensible hour and are
rejected.
"""

from __future__ import annotations

from typing import Any

from ..errors.rollover import InvalidRolloverError
from ..config.timing import (
    HOURS_PER_DAY,
    ROLLOVER_HOUR_MAX,
    ROLLOVER_HOUR_MIN,
    LEGACY_ROLLOVER_HOUR_MIN,
)


def normalize_rollover_hour(hour: Any) -> int:
    """Map a stored rollover value onto its canonical hour.

    Args:
        hour: Stored rollover value.

    Returns:
        Hour of day in 0..23 at which a new study day begins.

    Raises:
        InvalidRolloverError: ``hour`` is not an int (bools included) or lies
            outside -23..23.
    """
    if isinstance(hour, bool) or not isinstance(hour, int):
        raise InvalidRolloverError(hour)
    if ROLLOVER_HOUR_MIN <= hour <= ROLLOVER_HOUR_MAX:
        return hour
    if LEGACY_ROLLOVER_HOUR_MIN <= hour < ROLLOVER_HOUR_MIN:
        return HOURS_PER_DAY + hour
    raise InvalidRolloverError(hour)


__all__ = ["normalize_rollover_hour"]
