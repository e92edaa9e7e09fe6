"""Unit tests for named-command dispatch through the bridge."""

from __future__ import annotations

import json

import pytest

from studyday.bridge import dispatch, registered_commands
from studyday.bridge import codec
from studyday.errors import (
    ValidationError,
    PayloadDecodeError,
    UnknownCommandError,
    InvalidRolloverError,
    InstantOutOfRangeError,
)
from studyday.timing import clock, compute_timing
from tests.helpers.timing import DAY, T0, HOUR, MINUTE, timing_args, args_without


def test_registered_commands() -> None:
    assert registered_commands() == ("localOffset", "timingToday")


# --- timingToday ---


def test_timing_today_before_rollover(pinned_zone) -> None:
    out = dispatch("timingToday", timing_args(), now_secs=T0 + DAY + 3 * HOUR + 59 * MINUTE)
    assert json.loads(out) == {"daysElapsed": 0, "nextDayAt": T0 + DAY + 4 * HOUR}


def test_timing_today_at_rollover(pinned_zone) -> None:
    out = dispatch("timingToday", timing_args(), now_secs=T0 + DAY + 4 * HOUR)
    assert json.loads(out) == {"daysElapsed": 1, "nextDayAt": T0 + 2 * DAY + 4 * HOUR}


def test_now_offset_comes_from_configured_zone(pinned_zone) -> None:
    pinned_zone("Asia/Tokyo")
    # 19:00 UTC on day 0 is 04:00 on day 1 in Tokyo.
    out = dispatch("timingToday", timing_args(created_offset=-540), now_secs=T0 + 19 * HOUR)
    assert json.loads(out) == {"daysElapsed": 1, "nextDayAt": T0 + DAY + 19 * HOUR}


@pytest.mark.parametrize("zone", ["UTC", "America/New_York", "Asia/Kolkata", "Australia/Lord_Howe"])
def test_round_trip_matches_direct_engine_call(pinned_zone, zone: str) -> None:
    pinned_zone(zone)
    now = T0 + 200 * DAY + 13 * HOUR + 7 * MINUTE
    args = timing_args(created_at=T0 + 5 * HOUR, created_offset=300, rollover=4)

    result = codec.decode_timing_result(json.loads(dispatch("timingToday", args, now_secs=now)))

    expected = compute_timing(T0 + 5 * HOUR, 300, now, clock.local_mins_west(now), 4)
    assert result == expected


def test_clock_is_read_when_now_not_supplied(pinned_zone, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []

    def _fake_now() -> int:
        calls.append(1)
        return T0 + 3 * DAY + 5 * HOUR

    monkeypatch.setattr(clock, "now_secs", _fake_now)
    out = dispatch("timingToday", timing_args())
    assert json.loads(out)["daysElapsed"] == 3
    assert len(calls) == 1


def test_legacy_rollover_encoding_is_normalized(pinned_zone) -> None:
    now = T0 + 2 * DAY + 22 * HOUR
    legacy = json.loads(dispatch("timingToday", timing_args(rollover=-1), now_secs=now))
    canonical = json.loads(dispatch("timingToday", timing_args(rollover=23), now_secs=now))
    assert legacy == canonical


def test_clock_skew_is_not_an_error(pinned_zone) -> None:
    out = json.loads(dispatch("timingToday", timing_args(created_at=T0 + 10 * DAY), now_secs=T0))
    assert out["daysElapsed"] == 0
    assert out["nextDayAt"] > T0


def test_extra_fields_are_ignored(pinned_zone) -> None:
    out = dispatch("timingToday", timing_args(schema=2, deck="default"), now_secs=T0 + DAY + 4 * HOUR)
    assert json.loads(out)["daysElapsed"] == 1


# --- failures ---


def test_missing_rollover_is_a_decode_error(pinned_zone) -> None:
    with pytest.raises(PayloadDecodeError) as excinfo:
        dispatch("timingToday", args_without("rollover"), now_secs=T0)
    assert excinfo.value.error_code == "missing_field"
    assert excinfo.value.field == "rollover"
    assert "rollover" in excinfo.value.message


def test_malformed_payload_is_a_decode_error() -> None:
    with pytest.raises(PayloadDecodeError) as excinfo:
        dispatch("timingToday", "{not json", now_secs=T0)
    assert excinfo.value.error_code == "invalid_json"


def test_invalid_rollover_is_surfaced(pinned_zone) -> None:
    with pytest.raises(InvalidRolloverError):
        dispatch("timingToday", timing_args(rollover=30), now_secs=T0)


def test_deeply_nested_payload_is_a_decode_error() -> None:
    depth = 100_000
    args = '{"createdAt": ' + "[" * depth + "]" * depth + ', "createdOffset": 0, "rollover": 4}'
    with pytest.raises(PayloadDecodeError) as excinfo:
        dispatch("timingToday", args, now_secs=T0)
    assert excinfo.value.error_code == "invalid_json"


def test_now_outside_datetime_range_is_a_validation_error(pinned_zone) -> None:
    with pytest.raises(InstantOutOfRangeError) as excinfo:
        dispatch("timingToday", timing_args(), now_secs=10**15)
    assert isinstance(excinfo.value, ValidationError)
    assert excinfo.value.error_code == "invalid_instant"
    assert excinfo.value.value == 10**15


def test_unknown_command_is_fatal_and_distinct() -> None:
    with pytest.raises(UnknownCommandError) as excinfo:
        dispatch("timingTomorrow", timing_args(), now_secs=T0)
    assert not isinstance(excinfo.value, ValidationError)
    assert excinfo.value.command == "timingTomorrow"
    assert "timingToday" in excinfo.value.known


def test_unknown_command_is_reported_before_payload_is_read() -> None:
    with pytest.raises(UnknownCommandError):
        dispatch("nope", "{not json", now_secs=T0)


def test_command_names_are_case_sensitive() -> None:
    with pytest.raises(UnknownCommandError):
        dispatch("TimingToday", timing_args(), now_secs=T0)


# --- localOffset ---


def test_local_offset_defaults_to_now(pinned_zone) -> None:
    pinned_zone("Asia/Kolkata")
    assert json.loads(dispatch("localOffset", "{}", now_secs=T0)) == {"minutesWest": -330}


def test_local_offset_at_instant(pinned_zone) -> None:
    pinned_zone("America/New_York")
    summer = T0 + 196 * DAY + 12 * HOUR
    assert json.loads(dispatch("localOffset", json.dumps({"at": summer}), now_secs=T0)) == {"minutesWest": 240}


@pytest.mark.parametrize("at", [10**15, -(10**15)])
def test_local_offset_rejects_instant_outside_datetime_range(pinned_zone, at: int) -> None:
    with pytest.raises(PayloadDecodeError) as excinfo:
        dispatch("localOffset", json.dumps({"at": at}), now_secs=T0)
    assert excinfo.value.error_code == "invalid_field"
    assert excinfo.value.field == "at"
