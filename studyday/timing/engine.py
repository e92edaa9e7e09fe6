"""Day-boundary timing engine.

Maps a collection's creation instant and the current instant onto local days:

- Each instant is shifted into its own local wall clock with its own offset
  (minutes west of UTC). Creation and now are anchored independently, so an
  offset change between them (travel, DST) never adds or drops a day by
  itself.
- The collection's first study day starts at ``rollover:00`` on the local
  calendar date it was created. "Now" is shifted back by the rollover hour
  before flooring, so the current study day only turns over once the local
  clock reaches ``rollover:00``.
- Days elapsed is the difference of the two day indices, floored at zero.
- The next boundary is the start of the following study day, converted back
  to an absolute instant with the current offset.

Everything is integer arithmetic on plain ints; the function is pure.
"""

from __future__ import annotations

from .rollover import normalize_rollover_hour
from ..state.timing import TimingResult
from ..config.timing import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE


def local_seconds(instant: int, mins_west: int) -> int:
    """Wall-clock seconds for ``instant`` in a zone ``mins_west`` of UTC."""
    return instant - mins_west * SECONDS_PER_MINUTE


def study_day_index(instant: int, mins_west: int, rollover_hour: int) -> int:
    """Index of the study day containing ``instant``; day N starts at N*86400 + rollover local."""
    return (local_seconds(instant, mins_west) - rollover_hour * SECONDS_PER_HOUR) // SECONDS_PER_DAY


def study_day_start(day_index: int, mins_west: int, rollover_hour: int) -> int:
    """Absolute instant at which study day ``day_index`` begins."""
    local_start = day_index * SECONDS_PER_DAY + rollover_hour * SECONDS_PER_HOUR
    return local_start + mins_west * SECONDS_PER_MINUTE


def compute_timing(
    created_secs: int,
    created_mins_west: int,
    now_secs: int,
    now_mins_west: int,
    rollover_hour: int,
) -> TimingResult:
    """Compute days elapsed since creation and the next day boundary.

    Args:
        created_secs: Collection creation instant, seconds since the epoch.
        created_mins_west: Offset in effect at creation, minutes west of UTC.
        now_secs: Current instant, seconds since the epoch.
        now_mins_west: Offset in effect now, minutes west of UTC.
        rollover_hour: Hour at which a study day begins; legacy negative
            encodings are accepted.

    Returns:
        TimingResult with ``days_elapsed >= 0`` and ``next_day_at > now_secs``.

    Raises:
        InvalidRolloverError: ``rollover_hour`` has no canonical hour.
    """
    rollover = normalize_rollover_hour(rollover_hour)

    today = study_day_index(now_secs, now_mins_west, rollover)
    next_day_at = study_day_start(today + 1, now_mins_west, rollover)

    # Clock skew: a "now" before creation is day zero.
    if now_secs < created_secs:
        return TimingResult(days_elapsed=0, next_day_at=next_day_at)

    creation_day = local_seconds(created_secs, created_mins_west) // SECONDS_PER_DAY
    # Now may still precede the first rollover on the creation date.
    days_elapsed = max(0, today - creation_day)
    return TimingResult(days_elapsed=days_elapsed, next_day_at=next_day_at)


__all__ = ["compute_timing", "local_seconds", "study_day_index", "study_day_start"]
