"""Property-style sweeps over the timing engine."""

from __future__ import annotations

import pytest

from studyday.timing import compute_timing
from tests.helpers.timing import DAY, T0, HOUR, MINUTE

OFFSETS = (0, 300, -60, -330, -345, 600)
ROLLOVERS = (0, 4, 12, 23)
STEP = 17 * MINUTE


def _sweep(start: int, stop: int) -> range:
    return range(start, stop, STEP)


def test_identical_inputs_give_identical_results() -> None:
    args = (T0 + 5 * HOUR, -330, T0 + 9 * DAY + 2 * HOUR, 300, 4)
    assert compute_timing(*args) == compute_timing(*args)


@pytest.mark.parametrize("mins_west", OFFSETS)
@pytest.mark.parametrize("rollover", ROLLOVERS)
def test_results_are_non_decreasing_in_now(mins_west: int, rollover: int) -> None:
    created = T0 + 7 * HOUR
    previous = None
    for now in _sweep(created - DAY, created + 4 * DAY):
        result = compute_timing(created, 0, now, mins_west, rollover)
        if previous is not None:
            assert result.days_elapsed >= previous.days_elapsed
            assert result.next_day_at >= previous.next_day_at
        previous = result


@pytest.mark.parametrize("mins_west", OFFSETS)
@pytest.mark.parametrize("rollover", ROLLOVERS)
def test_next_day_is_strictly_ahead_and_within_a_day(mins_west: int, rollover: int) -> None:
    for now in _sweep(T0, T0 + 2 * DAY):
        next_day_at = compute_timing(T0, 0, now, mins_west, rollover).next_day_at
        assert now < next_day_at <= now + DAY


@pytest.mark.parametrize("mins_west", OFFSETS)
@pytest.mark.parametrize("rollover", ROLLOVERS)
def test_same_offset_reduces_to_local_day_difference(mins_west: int, rollover: int) -> None:
    for created in (T0, T0 + 3 * HOUR + 7, T0 + 19 * HOUR):
        local_created = created - mins_west * MINUTE
        local_creation_day_start = (local_created // DAY) * DAY + rollover * HOUR
        for now in _sweep(created, created + 3 * DAY):
            local_now = now - mins_west * MINUTE
            expected = max(0, (local_now - local_creation_day_start) // DAY)
            assert compute_timing(created, mins_west, now, mins_west, rollover).days_elapsed == expected
