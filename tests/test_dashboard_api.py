import json

import pytest
from fastapi.testclient import TestClient

from dashboard.app import create_app
from models import keys
from services import ServiceManager

from conftest import CountingStore, UnavailableStore


@pytest.fixture
def store():
    return CountingStore(fields={keys.WRITING_TARGET: "500"})


@pytest.fixture
def client(app_config, clock, store):
    manager = ServiceManager(app_config, document_store=store, clock=clock)
    with TestClient(create_app(manager)) as client:
        yield client


def test_health_reports_loaded_document(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "momentum-dashboard"
    assert body["checks"]["data_service"]["checks"]["remote_load"]["status"] == "healthy"


def test_navigation_round_trip(client):
    assert client.get("/api/navigation").json() == {"section": "writing"}
    assert client.put("/api/navigation", json={"section": "calendar"}).json() == {"section": "calendar"}
    assert client.get("/api/navigation").json() == {"section": "calendar"}
    assert client.put("/api/navigation", json={"section": "admin"}).status_code == 400


def test_writing_endpoints(client):
    assert client.get("/api/writing").json()["target"] == 500

    response = client.post("/api/writing/sessions", json={"amount": 250})
    assert response.status_code == 201
    assert response.json()["percent"] == 50

    assert client.post("/api/writing/sessions", json={"amount": 0}).status_code == 400
    assert client.put("/api/writing/target", json={"target": 0}).status_code == 400

    body = client.put("/api/writing/target", json={"target": 1000, "unit": "words"}).json()
    assert body["percent"] == 25

    assert client.delete("/api/writing/sessions/0").json()["total"] == 0
    assert client.delete("/api/writing/sessions/0").status_code == 404


def test_goals_endpoints_update_streak(client):
    goal = client.post("/api/goals", json={"text": "Journal"}).json()["goal"]
    assert client.post("/api/goals", json={"text": " "}).status_code == 400

    body = client.post(f"/api/goals/{goal['id']}/toggle").json()
    assert body["checked"] is True
    assert body["all_done"] is True
    assert body["streak"] == {"count": 1, "lastDate": "2024-01-05"}

    assert client.post("/api/goals/unknown/toggle").status_code == 404
    body = client.post(f"/api/goals/{goal['id']}/toggle").json()
    assert body["checked"] is False
    assert body["goal_id"] == goal["id"]
    assert body["goals"][0]["checked"] is False
    assert client.delete(f"/api/goals/{goal['id']}").json()["total"] == 0


def test_calendar_endpoints(client):
    body = client.put("/api/calendar/2024-01-12/note", json={"text": "Review"}).json()
    assert body["note"] == "Review"
    assert client.get("/api/calendar/2024-01-12").json()["note"] == "Review"
    assert client.get("/api/calendar/not-a-date").status_code == 400

    month = client.get("/api/calendar", params={"year": 2024, "month": 1}).json()
    assert month["title"] == "January 2024"
    assert client.get("/api/calendar", params={"month": 13}).status_code == 422


def test_three_things_endpoints(client):
    assert client.put("/api/three-things", json={"first": "a", "second": "", "third": "c"}).status_code == 400
    body = client.put("/api/three-things", json={"first": "a", "second": "b", "third": "c"}).json()
    assert body["planned"]
    assert client.post("/api/three-things/2/toggle").json()["things"][2]["done"] is True
    assert client.post("/api/three-things/7/toggle").status_code == 404
    assert client.get("/api/three-things/archive").json() == {"days": []}
    assert client.delete("/api/three-things").json()["planned"] is False


def test_fitness_endpoints(client):
    body = client.post("/api/fitness/workouts", json={"type": "Swimming", "duration": 35, "notes": "pool"}).json()
    assert body["workouts"][0]["type"] == "Swimming"
    assert body["streak"]["count"] == 1
    assert body["week"]["total_minutes"] == 35

    assert client.post("/api/fitness/workouts", json={"type": "Swimming", "duration": 0}).status_code == 400
    assert client.post("/api/fitness/types", json={"name": "Boxing"}).status_code == 201
    assert client.post("/api/fitness/types", json={"name": "Boxing"}).status_code == 400
    assert "Boxing" not in client.delete("/api/fitness/types/Boxing").json()["exercise_types"]
    assert client.delete("/api/fitness/workouts/3").status_code == 404


def test_shutdown_flushes_background_writes(app_config, clock, store):
    manager = ServiceManager(app_config, document_store=store, clock=clock)
    with TestClient(create_app(manager)) as client:
        client.put("/api/navigation", json={"section": "goals"})
    assert json.loads(store.snapshot()[keys.ACTIVE_SECTION]) == "goals"
    assert store.load_calls == 1


def test_api_works_when_document_unavailable(app_config, clock):
    manager = ServiceManager(app_config, document_store=UnavailableStore(), clock=clock)
    with TestClient(create_app(manager)) as client:
        assert client.get("/health").json()["status"] == "warning"
        assert client.post("/api/writing/sessions", json={"amount": 100}).status_code == 201
        assert client.get("/api/writing").json()["total"] == 100


def test_routes_unavailable_before_boot(app_config):
    client = TestClient(create_app(ServiceManager(app_config)))
    assert client.get("/api/writing").status_code == 503
