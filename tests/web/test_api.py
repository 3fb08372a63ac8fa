from __future__ import annotations

import pytest

from src.careclock.careclock.main import create_app

CENTER = {"latitude": 0.0, "longitude": 0.0}
FAR_AWAY = {"latitude": 0.018, "longitude": 0.0}


@pytest.fixture
def app():
    return create_app(settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def sign_in(client, worker_id, role, name=""):
    with client.session_transaction() as sess:
        sess["worker_id"] = worker_id
        sess["role"] = role
        sess["email"] = f"{worker_id}@example.com"
        sess["name"] = name


@pytest.fixture
def as_manager(client):
    sign_in(client, "mgr-1", "MANAGER", "Boss")
    return client


@pytest.fixture
def as_worker(app):
    c = app.test_client()
    sign_in(c, "cw-1", "CARE_WORKER", "Ann")
    return c


def error_code(resp):
    return resp.get_json()["error"]["code"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


@pytest.mark.parametrize(
    "method,path",
    [
        ("post", "/api/clock-in"),
        ("post", "/api/clock-out"),
        ("get", "/api/clock-status"),
        ("get", "/api/perimeter"),
        ("put", "/api/perimeter"),
        ("get", "/api/dashboard"),
    ],
)
def test_requests_without_session_are_unauthenticated(client, method, path):
    resp = getattr(client, method)(path, json={})
    assert resp.status_code == 401
    assert error_code(resp) == "UNAUTHENTICATED"


def test_identity_headers_are_ignored(client):
    resp = client.get("/api/dashboard", headers={"X-User-Id": "mgr-1", "X-User-Role": "MANAGER"})
    assert resp.status_code == 401


def test_perimeter_is_null_until_configured(as_worker):
    resp = as_worker.get("/api/perimeter")
    assert resp.status_code == 200
    assert resp.get_json() == {"perimeter": None}


def test_care_worker_cannot_set_perimeter(as_worker):
    resp = as_worker.put("/api/perimeter", json={"center": CENTER, "radius_km": 1})
    assert resp.status_code == 403
    assert error_code(resp) == "FORBIDDEN"


@pytest.mark.parametrize("radius", [0, -1, "abc", None])
def test_invalid_radius_is_rejected(as_manager, radius):
    resp = as_manager.put("/api/perimeter", json={"center": CENTER, "radius_km": radius})
    assert resp.status_code == 400
    body = resp.get_json()["error"]
    assert body["code"] == "VALIDATION"
    assert body["retryable"] is False


def test_manager_sets_perimeter(as_manager):
    resp = as_manager.put("/api/perimeter", json={"center": {"latitude": 10.5, "longitude": 106.7}, "radius_km": 0.5})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["perimeter"]["radius_km"] == 0.5
    assert as_manager.get("/api/perimeter").get_json()["perimeter"]["center_latitude"] == 10.5


def test_clock_in_without_perimeter_is_not_in_perimeter(as_worker):
    resp = as_worker.post("/api/clock-in", json={"location": CENTER})
    assert resp.status_code == 422
    assert error_code(resp) == "NOT_IN_PERIMETER"


def test_clock_in_with_bad_location_is_validation_error(as_manager, as_worker):
    as_manager.put("/api/perimeter", json={"center": CENTER, "radius_km": 1})

    resp = as_worker.post("/api/clock-in", json={"location": {"latitude": "north"}})
    assert resp.status_code == 400
    assert error_code(resp) == "VALIDATION"


def test_clock_cycle_over_http(as_manager, as_worker):
    as_manager.put("/api/perimeter", json={"center": CENTER, "radius_km": 1})

    resp = as_worker.post("/api/clock-in", json={"location": FAR_AWAY})
    assert resp.status_code == 422

    resp = as_worker.post("/api/clock-in", json={"location": CENTER, "note": "morning"})
    assert resp.status_code == 201
    record = resp.get_json()
    assert record["worker_id"] == "cw-1"
    assert record["is_clock_in"] is True
    assert record["clock_in_note"] == "morning"

    resp = as_worker.post("/api/clock-in", json={"location": CENTER})
    assert resp.status_code == 409
    assert error_code(resp) == "ALREADY_CLOCKED_IN"

    status = as_worker.get("/api/clock-status").get_json()
    assert status["open_shift"]["id"] == record["id"]

    resp = as_worker.post("/api/clock-out", json={"location": {"latitude": 0.0, "longitude": 0.02}})
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "Clocked Out"

    resp = as_worker.post("/api/clock-out", json={"location": CENTER})
    assert resp.status_code == 409
    assert error_code(resp) == "NO_OPEN_SHIFT"

    assert as_worker.get("/api/clock-status").get_json()["open_shift"] is None


def test_clock_records_visibility(as_manager, as_worker):
    as_manager.put("/api/perimeter", json={"center": CENTER, "radius_km": 1})
    as_worker.post("/api/clock-in", json={"location": CENTER})
    as_manager.post("/api/clock-in", json={"location": CENTER})

    mine = as_worker.get("/api/clock-records").get_json()
    assert [r["worker_id"] for r in mine] == ["cw-1"]

    resp = as_worker.get("/api/clock-records?worker_id=mgr-1")
    assert resp.status_code == 403

    everyone = as_manager.get("/api/clock-records").get_json()
    assert sorted(r["worker_id"] for r in everyone) == ["cw-1", "mgr-1"]

    resp = as_manager.get("/api/clock-records?start=2026-02-02&end=yesterday")
    assert resp.status_code == 400


def test_manager_views_require_manager_role(as_worker):
    for path in ("/api/dashboard", "/api/staff-overview", "/api/active-staff"):
        resp = as_worker.get(path)
        assert resp.status_code == 403, path


def test_manager_views(as_manager, as_worker):
    as_manager.put("/api/perimeter", json={"center": CENTER, "radius_km": 1})
    as_worker.post("/api/clock-in", json={"location": CENTER})

    dashboard = as_manager.get("/api/dashboard").get_json()
    assert dashboard["total_staff_count"] == 1
    assert dashboard["active_staff_count"] == 1
    assert len(dashboard["daily_stats"]) == 6

    [row] = as_manager.get("/api/staff-overview").get_json()
    assert row["name"] == "Ann"
    assert row["status"] == "Active"

    [active] = as_manager.get("/api/active-staff").get_json()
    assert active["worker_id"] == "cw-1"
    assert active["location"] == CENTER


HUGE = 10**400  # serialized as an integer literal no float can hold


@pytest.mark.parametrize(
    "body",
    [
        {"center": CENTER, "radius_km": HUGE},
        {"center": {"latitude": HUGE, "longitude": 0.0}, "radius_km": 1},
        {"center": {"latitude": 0.0, "longitude": -HUGE}, "radius_km": 1},
    ],
)
def test_oversized_numbers_in_perimeter_are_validation_errors(as_manager, body):
    resp = as_manager.put("/api/perimeter", json=body)

    assert resp.status_code == 400
    assert error_code(resp) == "VALIDATION"
    assert as_manager.get("/api/perimeter").get_json() == {"perimeter": None}


@pytest.mark.parametrize("path", ["/api/clock-in", "/api/clock-out"])
def test_oversized_location_is_validation_error(as_manager, as_worker, path):
    as_manager.put("/api/perimeter", json={"center": CENTER, "radius_km": 1})

    resp = as_worker.post(path, json={"location": {"latitude": HUGE, "longitude": 0.0}})

    assert resp.status_code == 400
    assert error_code(resp) == "VALIDATION"
    assert as_worker.get("/api/clock-status").get_json()["open_shift"] is None


def test_clock_records_accepts_offset_timestamps(as_manager, as_worker):
    as_manager.put("/api/perimeter", json={"center": CENTER, "radius_km": 1})
    as_worker.post("/api/clock-in", json={"location": CENTER})

    resp = as_manager.get("/api/clock-records", query_string={"start": "2020-01-01T00:00:00+00:00"})
    assert resp.status_code == 200
    assert [r["worker_id"] for r in resp.get_json()] == ["cw-1"]

    resp = as_manager.get("/api/clock-records", query_string={"end": "2020-01-01T00:00:00-05:00"})
    assert resp.status_code == 200
    assert resp.get_json() == []
