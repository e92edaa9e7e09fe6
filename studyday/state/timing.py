"""Timing-related dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TimingRequest:
    """Decoded ``timingToday`` arguments.

    Attributes:
        created_secs: Collection creation instant, seconds since the epoch.
        created_mins_west: Offset at creation, minutes west of UTC.
        rollover_hour: Rollover hour as stored; may use the legacy encoding.
    """

    created_secs: int
    created_mins_west: int
    rollover_hour: int


@dataclass(frozen=True, slots=True)
class TimingResult:
    """Where "now" falls relative to the collection's first study day.

    Attributes:
        days_elapsed: Rollover boundaries passed since the creation day began.
        next_day_at: Instant of the first rollover boundary strictly after now.
    """

    days_elapsed: int
    next_day_at: int


@dataclass(frozen=True, slots=True)
class OffsetRequest:
    """Decoded ``localOffset`` arguments; ``at`` defaults to now."""

    at: int | None = None


@dataclass(frozen=True, slots=True)
class OffsetResult:
    """Timezone offset effective at an instant, minutes west of UTC."""

    minutes_west: int


__all__ = ["TimingRequest", "TimingResult", "OffsetRequest", "OffsetResult"]
