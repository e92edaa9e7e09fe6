"""Unit tests for the FastAPI bridge surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from studyday.server import app
from studyday.bridge.dispatch import _COMMAND_HANDLERS
from studyday.timing import clock
from tests.helpers.timing import DAY, T0, HOUR, timing_args, args_without


@pytest.fixture
def client(pinned_zone, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(clock, "now_secs", lambda: T0 + DAY + 4 * HOUR)
    with TestClient(app) as test_client:
        yield test_client


def test_healthz(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_lists_commands(client: TestClient) -> None:
    assert client.get("/").json() == {"status": "ok", "commands": ["localOffset", "timingToday"]}


def test_timing_today_returns_result_payload(client: TestClient) -> None:
    response = client.post("/request/timingToday", content=timing_args())
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"daysElapsed": 1, "nextDayAt": T0 + 2 * DAY + 4 * HOUR}


def test_missing_field_maps_to_400(client: TestClient) -> None:
    response = client.post("/request/timingToday", content=args_without("rollover"))
    assert response.status_code == 400
    assert response.json() == {
        "error_code": "missing_field",
        "message": "Missing 'rollover' in payload.",
        "field": "rollover",
    }


def test_empty_body_maps_to_400(client: TestClient) -> None:
    response = client.post("/request/timingToday", content=b"")
    assert response.status_code == 400
    assert response.json()["error_code"] == "empty_payload"


def test_invalid_rollover_maps_to_400(client: TestClient) -> None:
    response = client.post("/request/timingToday", content=timing_args(rollover=40))
    assert response.status_code == 400
    assert response.json()["error_code"] == "invalid_rollover"


def test_unknown_command_maps_to_500(client: TestClient) -> None:
    response = client.post("/request/timingTomorrow", content=timing_args())
    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "unknown_command"
    assert "timingTomorrow" in body["message"]


def test_out_of_range_instant_maps_to_400(client: TestClient) -> None:
    response = client.post("/request/localOffset", content=b'{"at": 1000000000000000}')
    assert response.status_code == 400
    assert response.json()["error_code"] == "invalid_field"
    assert response.json()["field"] == "at"


def test_unexpected_failure_maps_to_json_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(payload, *, now_secs):
        raise RuntimeError("boom")

    monkeypatch.setitem(_COMMAND_HANDLERS, "timingToday", _boom)
    response = client.post("/request/timingToday", content=timing_args())
    assert response.status_code == 500
    assert response.json() == {"error_code": "internal", "message": "Internal error."}
