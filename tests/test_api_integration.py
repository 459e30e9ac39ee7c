# tests/test_api_integration.py
"""
Integration tests for the RecurViz HTTP API.

Focus
-----
These tests verify the HTTP contract (request/response schemas) and the
session command flow. Runs are real but instant (`speed` 99), so the
background task completes before the next request is served.

Scenarios
---------
1. **Health Check**: service is up.
2. **Happy Path**: create session -> run (202) -> poll -> seek.
3. **Refusals**: out-of-range seeks and bad speeds answer `accepted=false`.
4. **Error Handling**: 404 for unknown sessions, 400 for unknown algorithms.
"""

from __future__ import annotations

import math
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from recurviz.api.app import create_app
from recurviz.api.session_store import get_session_store


@pytest.fixture  # type: ignore[misc]
def client() -> Generator[TestClient, None, None]:
    """A fresh API client over an empty session store."""
    get_session_store().clear()
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture  # type: ignore[misc]
def session_id(client: TestClient) -> str:
    resp = client.post("/sessions")
    assert resp.status_code == 201
    return str(resp.json()["session_id"])


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data


def test_list_algorithms(client: TestClient) -> None:
    data = client.get("/algorithms").json()
    assert [a["name"] for a in data] == ["factorial", "fibonacci", "power", "palindrome"]
    assert data[0]["max_input"] == 12
    assert data[3]["input_kind"] == "str"


def test_new_session_is_idle(client: TestClient, session_id: str) -> None:
    view = client.get(f"/sessions/{session_id}").json()["view"]
    assert view["in_progress"] is False
    assert view["total_steps"] == 0
    assert view["snapshot"]["logs"][0]["message"] == "Recursion engine ready."


def test_run_and_poll_flow(client: TestClient, session_id: str) -> None:
    resp = client.post(
        f"/sessions/{session_id}/run",
        json={"algorithm": "factorial", "input": 4, "speed": 99},
    )
    assert resp.status_code == 202
    assert resp.json()["accepted"] is True

    # TestClient runs background tasks before returning, so the run is done.
    view = client.get(f"/sessions/{session_id}").json()["view"]
    assert view["in_progress"] is False
    assert view["total_steps"] == 22
    assert view["algorithm"] == "FACTORIAL"
    snap = view["snapshot"]
    root = next(f for f in snap["frames"] if f["id"] == snap["root_id"])
    assert root["return_value"] == "24"
    assert snap["stack"] == []


def test_seek_within_and_beyond_history(client: TestClient, session_id: str) -> None:
    client.post(
        f"/sessions/{session_id}/run",
        json={"algorithm": "fib", "input": "3", "speed": 99},
    )

    resp = client.post(f"/sessions/{session_id}/seek", json={"step": 4})
    data = resp.json()
    assert data["accepted"] is True
    assert data["view"]["current_step"] == 4

    resp = client.post(f"/sessions/{session_id}/seek", json={"step": 999})
    data = resp.json()
    assert data["accepted"] is False
    assert "out of range" in data["detail"]
    assert data["view"]["current_step"] == 4


def test_reset_clears_session(client: TestClient, session_id: str) -> None:
    client.post(
        f"/sessions/{session_id}/run",
        json={"algorithm": "palindrome", "input": "level", "speed": 99},
    )
    data = client.post(f"/sessions/{session_id}/reset").json()
    assert data["accepted"] is True
    assert data["view"]["total_steps"] == 0
    assert data["view"]["snapshot"]["frames"] == []
    assert data["view"]["snapshot"]["logs"][0]["message"] == "Visualization reset."


def test_speed_validation(client: TestClient, session_id: str) -> None:
    data = client.put(f"/sessions/{session_id}/speed", json={"speed": 5}).json()
    assert data["accepted"] is True and data["view"]["speed"] == 5.0

    data = client.put(f"/sessions/{session_id}/speed", json={"speed": 0}).json()
    assert data["accepted"] is False
    assert data["view"]["speed"] == 5.0


def test_unknown_algorithm_is_bad_request(client: TestClient, session_id: str) -> None:
    resp = client.post(f"/sessions/{session_id}/run", json={"algorithm": "quicksort"})
    assert resp.status_code == 400
    assert "Unknown algorithm" in resp.json()["detail"]


def test_unknown_session_is_not_found(client: TestClient) -> None:
    response = client.get("/sessions/fake-uuid-1234")
    assert response.status_code == 404
    assert "not found" in response.json()["detail"].lower()


def test_run_claims_session_before_responding(client: TestClient, session_id: str) -> None:
    """The 202 response already reports the session as busy."""
    resp = client.post(
        f"/sessions/{session_id}/run",
        json={"algorithm": "power", "input": 3, "speed": 99},
    )
    data = resp.json()
    assert data["accepted"] is True
    assert data["view"]["in_progress"] is True
    assert data["view"]["total_steps"] == 0

    view = client.get(f"/sessions/{session_id}").json()["view"]
    assert view["in_progress"] is False and view["total_steps"] > 0


def test_run_without_input_uses_algorithm_default(client: TestClient, session_id: str) -> None:
    client.post(
        f"/sessions/{session_id}/run",
        json={"algorithm": "factorial", "input": 10, "speed": 99},
    )
    client.post(f"/sessions/{session_id}/run", json={"algorithm": "fibonacci"})

    view = client.get(f"/sessions/{session_id}").json()["view"]
    assert view["raw_input"] is None
    assert view["snapshot"]["logs"][0]["message"] == "Preparing to run: Fibonacci(4)"


def test_non_finite_speed_is_unprocessable(client: TestClient, session_id: str) -> None:
    for bad in ("nan", "inf"):
        resp = client.put(f"/sessions/{session_id}/speed", json={"speed": bad})
        assert resp.status_code == 422

    resp = client.post(
        f"/sessions/{session_id}/run",
        json={"algorithm": "factorial", "speed": "nan"},
    )
    assert resp.status_code == 422
    view = client.get(f"/sessions/{session_id}").json()["view"]
    assert view["total_steps"] == 0
    assert math.isfinite(view["speed"])
