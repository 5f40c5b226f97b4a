"""Tests for the dashboard HTTP endpoints."""

import asyncio
from datetime import datetime, timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lif.domain.app_data import AppData
from lif.domain.reminder import Reminder, ReminderStatus
from lif.interface.dashboard_router import get_now, router
from lif.services.runtime import DashboardRuntime
from tests.unit.mocks import InMemoryStore, RecordingNotifier


NOW = datetime(2024, 1, 1, 8, 0, 0)


@pytest.fixture
def stored_data() -> AppData:
    return AppData(
        reminders=[
            Reminder(
                id=1,
                reminder="tea",
                alarm_or_countdown="30m",
                status=ReminderStatus.ACTIVE,
                target_time=NOW + timedelta(minutes=30),
                is_countdown=True,
            )
        ]
    )


@pytest.fixture
def client(stored_data) -> TestClient:
    """Test client for an app with the dashboard router and an in-memory runtime."""
    app = FastAPI()
    app.include_router(router)
    runtime = DashboardRuntime(InMemoryStore(stored_data), RecordingNotifier())
    asyncio.run(runtime.startup(NOW))
    app.state.runtime = runtime
    app.dependency_overrides[get_now] = lambda: NOW
    return TestClient(app)


@pytest.mark.unit
class TestDailies:
    """Tests for /dailies endpoints."""

    def test_create_list_and_toggle(self, client: TestClient) -> None:
        created = client.post("/dailies", json={"task": "Stretch", "priority": "H"})

        assert created.status_code == 201
        assert created.json()["record"]["task"] == "stretch"
        assert created.json()["record"]["priority"] == "HIGH"

        toggled = client.post("/dailies/1/toggle")
        assert toggled.status_code == 200
        assert toggled.json()["record"]["status"] == "DONE"
        assert toggled.json()["record"]["current_streak"] == 1

        listed = client.get("/dailies")
        assert [d["task"] for d in listed.json()] == ["stretch"]

    def test_blank_task_rejected(self, client: TestClient) -> None:
        response = client.post("/dailies", json={"task": "   "})

        assert response.status_code == 422

    def test_toggle_unknown_is_404(self, client: TestClient) -> None:
        response = client.post("/dailies/9/toggle")

        assert response.status_code == 404
        assert response.json()["detail"] == "No daily with id 9"

    def test_update(self, client: TestClient) -> None:
        client.post("/dailies", json={"task": "stretch"})

        response = client.put("/dailies/1", json={"task": "stretch twice", "category": "Health"})

        assert response.status_code == 200
        assert response.json()["record"]["category"] == "health"


@pytest.mark.unit
class TestTodos:
    """Tests for /todos endpoints."""

    def test_create_update_delete(self, client: TestClient) -> None:
        assert client.post("/todos", json={"task": "taxes"}).status_code == 201
        response = client.put("/todos/1", json={"task": "taxes", "deadline": "April"})
        assert response.json()["record"]["deadline"] == "April"

        deleted = client.delete("/todos/1")

        assert deleted.status_code == 200
        assert client.get("/todos").json() == []

    def test_delete_unknown_kind_is_422(self, client: TestClient) -> None:
        assert client.delete("/glossary/1").status_code == 422


@pytest.mark.unit
class TestReminders:
    """Tests for /reminders endpoints."""

    def test_list_includes_time_label(self, client: TestClient) -> None:
        reminders = client.get("/reminders").json()

        assert reminders[0]["time_label"] == "30m (30m0s)"

    def test_create_with_unparseable_spec(self, client: TestClient) -> None:
        response = client.post("/reminders", json={"reminder": "call mum", "alarm_or_countdown": "later"})

        assert response.status_code == 201
        body = response.json()
        assert body["outcome"]["code"] == "spec_unparseable"
        assert body["record"]["status"] == "inactive"
        assert body["record"]["id"] == 2

    def test_pause_then_pause_again_is_noop(self, client: TestClient) -> None:
        first = client.post("/reminders/1/pause")
        second = client.post("/reminders/1/pause")

        assert first.json()["record"]["status"] == "paused"
        assert second.status_code == 200
        assert second.json()["outcome"]["code"] == "not_active"
        assert second.json()["outcome"]["severity"] == "low"

    def test_unknown_action_is_400(self, client: TestClient) -> None:
        assert client.post("/reminders/1/snooze").status_code == 400

    def test_unknown_reminder_is_404(self, client: TestClient) -> None:
        assert client.post("/reminders/5/reset").status_code == 404


@pytest.mark.unit
def test_dashboard_summary(client: TestClient) -> None:
    response = client.get("/dashboard")

    assert response.status_code == 200
    body = response.json()
    assert body["level"] == 1
    assert body["upcoming"][0]["label"] == "tea"
    assert body["upcoming"][0]["countdown"] == "30m0s"
