"""Typed decode/encode of command arguments and results.

Fields are looked up by their canonical camelCase name first, then by any
legacy alias. Extra keys are ignored so newer hosts can send more than this
side understands.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors.decode import PayloadDecodeError
from ..config.timing import INSTANT_MAX, INSTANT_MIN, LEGACY_CREATED_MINS_WEST
from ..state.timing import OffsetResult, TimingResult, OffsetRequest, TimingRequest
from ..config.bridge import (
    FIELD_AT,
    FIELD_ALIASES,
    FIELD_ROLLOVER,
    FIELD_CREATED_AT,
    FIELD_NEXT_DAY_AT,
    ERROR_INVALID_FIELD,
    ERROR_MISSING_FIELD,
    FIELD_DAYS_ELAPSED,
    FIELD_MINUTES_WEST,
    FIELD_CREATED_OFFSET,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def _lookup(payload: dict[str, Any], field: str) -> Any:
    for key in (field, *FIELD_ALIASES.get(field, ())):
        if key in payload:
            return payload[key]
    return _MISSING


def _as_int(field: str, value: Any) -> int:
    # bool is an int subclass; true/false is never a timestamp or hour.
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadDecodeError(
            ERROR_INVALID_FIELD,
            f"'{field}' must be an integer, got {type(value).__name__}",
            field=field,
        )
    return value


def require_int(payload: dict[str, Any], field: str) -> int:
    value = _lookup(payload, field)
    if value is _MISSING:
        raise PayloadDecodeError(ERROR_MISSING_FIELD, f"Missing '{field}' in payload.", field=field)
    return _as_int(field, value)


def require_nullable_int(payload: dict[str, Any], field: str) -> int | None:
    """Like ``require_int`` but an explicit ``null`` is allowed."""
    value = _lookup(payload, field)
    if value is _MISSING:
        raise PayloadDecodeError(ERROR_MISSING_FIELD, f"Missing '{field}' in payload.", field=field)
    if value is None:
        return None
    return _as_int(field, value)


def optional_int(payload: dict[str, Any], field: str) -> int | None:
    value = _lookup(payload, field)
    if value is _MISSING or value is None:
        return None
    return _as_int(field, value)


def decode_timing_request(payload: dict[str, Any]) -> TimingRequest:
    """Decode ``timingToday`` arguments.

    A ``null`` creation offset marks a collection created before offsets were
    recorded; it is replaced by ``LEGACY_CREATED_MINS_WEST``.
    """
    created_secs = require_int(payload, FIELD_CREATED_AT)
    created_mins_west = require_nullable_int(payload, FIELD_CREATED_OFFSET)
    rollover_hour = require_int(payload, FIELD_ROLLOVER)

    if created_mins_west is None:
        logger.debug("no creation offset recorded; using legacy default %d", LEGACY_CREATED_MINS_WEST)
        created_mins_west = LEGACY_CREATED_MINS_WEST

    return TimingRequest(
        created_secs=created_secs,
        created_mins_west=created_mins_west,
        rollover_hour=rollover_hour,
    )


def encode_timing_result(result: TimingResult) -> dict[str, int]:
    return {
        FIELD_DAYS_ELAPSED: result.days_elapsed,
        FIELD_NEXT_DAY_AT: result.next_day_at,
    }


def decode_timing_result(payload: dict[str, Any]) -> TimingResult:
    """Host-side decode of a ``timingToday`` result payload; snake_case keys are accepted."""
    return TimingResult(
        days_elapsed=require_int(payload, FIELD_DAYS_ELAPSED),
        next_day_at=require_int(payload, FIELD_NEXT_DAY_AT),
    )


def decode_offset_request(payload: dict[str, Any]) -> OffsetRequest:
    at = optional_int(payload, FIELD_AT)
    if at is not None and not INSTANT_MIN <= at <= INSTANT_MAX:
        raise PayloadDecodeError(
            ERROR_INVALID_FIELD,
            f"'{FIELD_AT}' must be an instant between {INSTANT_MIN} and {INSTANT_MAX}, got {at}",
            field=FIELD_AT,
        )
    return OffsetRequest(at=at)


def encode_offset_result(result: OffsetResult) -> dict[str, int]:
    return {FIELD_MINUTES_WEST: result.minutes_west}


__all__ = [
    "require_int",
    "require_nullable_int",
    "optional_int",
    "decode_timing_request",
    "encode_timing_result",
    "decode_timing_result",
    "decode_offset_request",
    "encode_offset_result",
]
