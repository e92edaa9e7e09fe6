"""Command handlers: decode arguments, run the pure computation, encode the result."""

from __future__ import annotations

import logging
from typing import Any

from ..timing import clock
from ..timing.engine import compute_timing
from ..telemetry.instruments import get_metrics
from ..state.timing import OffsetResult
from .codec import (
    encode_offset_result,
    encode_timing_result,
    decode_offset_request,
    decode_timing_request,
)

logger = logging.getLogger(__name__)


def handle_timing_today(payload: dict[str, Any], *, now_secs: int) -> dict[str, Any]:
    request = decode_timing_request(payload)
    now_mins_west = clock.local_mins_west(now_secs)

    if now_secs < request.created_secs:
        get_metrics().clock_skew_total.add(1)
        logger.warning(
            "clock skew: now=%d precedes created=%d; days elapsed clamped to 0",
            now_secs,
            request.created_secs,
        )

    result = compute_timing(
        request.created_secs,
        request.created_mins_west,
        now_secs,
        now_mins_west,
        request.rollover_hour,
    )
    get_metrics().days_elapsed.record(result.days_elapsed)
    logger.debug(
        "timing: created=%d/%d now=%d/%d rollover=%d -> days=%d next=%d",
        request.created_secs,
        request.created_mins_west,
        now_secs,
        now_mins_west,
        request.rollover_hour,
        result.days_elapsed,
        result.next_day_at,
    )
    return encode_timing_result(result)


def handle_local_offset(payload: dict[str, Any], *, now_secs: int) -> dict[str, Any]:
    request = decode_offset_request(payload)
    at = now_secs if request.at is None else request.at
    return encode_offset_result(OffsetResult(minutes_west=clock.local_mins_west(at)))


__all__ = ["handle_timing_today", "handle_local_offset"]
