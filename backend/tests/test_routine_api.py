from __future__ import annotations

import json
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from lipidcare.core.config import settings
from lipidcare.domain.fallback import FALLBACK_SCHEDULE_DATA
from lipidcare.main import app
from lipidcare.services import completion_client
from lipidcare.services.session_store import SessionStore, get_session_store
from fakes import FailingCompletionClient, RecordingFactory, StaticCompletionClient, ai_schedule_payload


@pytest.fixture()
def client(monkeypatch):
    store = SessionStore()
    monkeypatch.setattr(settings, "fallback_delay_seconds", 0)
    monkeypatch.setattr(settings, "openai_api_key", None)
    app.dependency_overrides[get_session_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create_session(client: TestClient) -> str:
    response = client.post("/sessions")
    assert response.status_code == 201
    body = response.json()
    assert body["state"] == "idle"
    return body["sessionId"]


def _generate(client: TestClient, session_id: str, **profile) -> dict:
    payload = {"currentLevel": "300", **profile}
    response = client.post(f"/sessions/{session_id}/generate", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def test_generate_without_credential_returns_fallback(client) -> None:
    session_id = _create_session(client)

    body = _generate(client, session_id)

    assert body["source"] == "fallback"
    assert body["failureKind"] == "no_credential"
    assert body["generation"] == 1
    assert body["schedule"] == FALLBACK_SCHEDULE_DATA

    summary = client.get(f"/sessions/{session_id}").json()
    assert summary["state"] == "ready"
    assert summary["hasSchedule"] is True
    assert summary["scheduleSource"] == "fallback"


def test_generate_uses_ai_schedule(client, monkeypatch) -> None:
    fake = StaticCompletionClient("```json\n" + json.dumps(ai_schedule_payload()) + "\n```")
    monkeypatch.setattr(completion_client, "get_completion_client", RecordingFactory(fake))
    session_id = _create_session(client)

    body = _generate(client, session_id, dietaryPreference="pescatarian")

    assert body["source"] == "ai"
    assert body["failureKind"] is None
    assert body["schedule"]["weekSchedule"][2]["theme"] == "AI theme 3"
    assert "Diet: pescatarian" in fake.prompts[0]


def test_generate_absorbs_service_failure(client, monkeypatch) -> None:
    monkeypatch.setattr(completion_client, "get_completion_client", RecordingFactory(FailingCompletionClient()))
    session_id = _create_session(client)

    body = _generate(client, session_id)

    assert body["source"] == "fallback"
    assert body["failureKind"] == "transport"


def test_profile_check_and_invalid_generate(client) -> None:
    session_id = _create_session(client)

    ok = client.post(f"/sessions/{session_id}/profile/check", json={"currentLevel": "185"})
    missing = client.post(f"/sessions/{session_id}/profile/check", json={"wakeTime": "07:00"})
    assert ok.json() == {"submittable": True}
    assert missing.json() == {"submittable": False}

    rejected = client.post(f"/sessions/{session_id}/generate", json={"currentLevel": ""})
    assert rejected.status_code == 422
    assert client.get(f"/sessions/{session_id}").json()["state"] == "idle"


def test_toggle_and_day_overview(client) -> None:
    session_id = _create_session(client)
    _generate(client, session_id)

    for item_index in (0, 2):
        response = client.post(
            f"/sessions/{session_id}/completions/toggle",
            json={"dayIndex": 0, "itemIndex": item_index},
        )
        assert response.status_code == 200
        assert response.json()["completed"] is True

    day = client.get(f"/sessions/{session_id}/days/0").json()
    assert day["completionPercentage"] == 40
    assert day["theme"] == "메타 활성 월요일"
    assert day["currentLevel"] == 300.0
    assert [item["completed"] for item in day["items"]] == [True, False, True, False, False]

    undo = client.post(f"/sessions/{session_id}/completions/toggle", json={"dayIndex": 0, "itemIndex": 2})
    assert undo.json()["completed"] is False
    assert client.get(f"/sessions/{session_id}/days/0").json()["completionPercentage"] == 20


def test_toggle_before_generation_conflicts(client) -> None:
    session_id = _create_session(client)

    response = client.post(f"/sessions/{session_id}/completions/toggle", json={"dayIndex": 0, "itemIndex": 0})

    assert response.status_code == 409


def test_select_day(client) -> None:
    session_id = _create_session(client)
    _generate(client, session_id)

    response = client.put(f"/sessions/{session_id}/selected-day", json={"dayIndex": 4})
    assert response.status_code == 200
    assert response.json()["day"] == "금요일"
    assert client.get(f"/sessions/{session_id}").json()["selectedDayIndex"] == 4

    missing = client.put(f"/sessions/{session_id}/selected-day", json={"dayIndex": 7})
    assert missing.status_code == 404
    assert client.get(f"/sessions/{session_id}/days/9").status_code == 404


def test_projection(client) -> None:
    session_id = _create_session(client)
    _generate(client, session_id, currentLevel=250)

    body = client.get(f"/sessions/{session_id}/projection").json()

    assert [point["level"] for point in body["series"]] == [250, 243, 235, 228, 220, 213, 205]
    assert body["targetLevel"] == 205
    assert body["adherenceThreshold"] == 85


def test_regenerate_clears_completions(client) -> None:
    session_id = _create_session(client)
    _generate(client, session_id)
    client.post(f"/sessions/{session_id}/completions/toggle", json={"dayIndex": 0, "itemIndex": 0})

    body = _generate(client, session_id, currentLevel=220)

    assert body["generation"] == 2
    assert client.get(f"/sessions/{session_id}/days/0").json()["completionPercentage"] == 0


def test_reset_and_schedule_lookup(client) -> None:
    session_id = _create_session(client)
    assert client.get(f"/sessions/{session_id}/schedule").status_code == 404
    assert client.post(f"/sessions/{session_id}/reset").status_code == 409

    _generate(client, session_id)
    reset = client.post(f"/sessions/{session_id}/reset")
    assert reset.status_code == 200
    assert reset.json()["state"] == "idle"

    schedule = client.get(f"/sessions/{session_id}/schedule")
    assert schedule.status_code == 200
    assert schedule.json()["source"] == "fallback"


def test_unknown_and_deleted_sessions(client) -> None:
    assert client.get(f"/sessions/{uuid4()}").status_code == 404

    session_id = _create_session(client)
    assert client.delete(f"/sessions/{session_id}").status_code == 204
    assert client.get(f"/sessions/{session_id}").status_code == 404
    assert client.delete(f"/sessions/{session_id}").status_code == 404


def test_guides(client) -> None:
    body = client.get("/guides").json()

    assert len(body["guides"]) == 3
    assert body["guides"][0]["title"] == "수분 섭취 가이드"
    assert body["expertNote"]
