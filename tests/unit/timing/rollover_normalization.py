"""Unit tests for rollover-hour normalization."""

from __future__ import annotations

import pytest

from studyday.errors import ValidationError, InvalidRolloverError
from studyday.timing import normalize_rollover_hour


@pytest.mark.parametrize("hour", range(0, 24))
def test_canonical_hours_pass_through(hour: int) -> None:
    assert normalize_rollover_hour(hour) == hour


@pytest.mark.parametrize(("legacy", "expected"), [(-1, 23), (-4, 20), (-12, 12), (-23, 1)])
def test_negative_hours_before_midnight_fold_onto_day(legacy: int, expected: int) -> None:
    assert normalize_rollover_hour(legacy) == expected


@pytest.mark.parametrize("value", [24, 25, -24, -100, 1000])
def test_out_of_range_hours_are_rejected(value: int) -> None:
    with pytest.raises(InvalidRolloverError) as excinfo:
        normalize_rollover_hour(value)
    assert excinfo.value.value == value
    assert excinfo.value.error_code == "invalid_rollover"


@pytest.mark.parametrize("value", [True, False, 4.0, "4", None])
def test_non_integer_values_are_rejected(value: object) -> None:
    with pytest.raises(InvalidRolloverError):
        normalize_rollover_hour(value)


def test_invalid_rollover_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        normalize_rollover_hour(48)
