from __future__ import annotations

import json

from app.services.ai import client as llm_client
from app.services.ai.error_handler import RATE_LIMIT_MESSAGE
from app.services.initial_data import initial_app_data


def _reply_with(monkeypatch, payload):
    def fake_complete(system_prompt, user_prompt, *, model=None):
        return None if payload is None else json.dumps(payload)

    monkeypatch.setattr(llm_client, "complete_json", fake_complete)


def test_goal_tips_action_returns_result(client, monkeypatch) -> None:
    _reply_with(monkeypatch, {"tips": ["Start small"]})

    resp = client.post("/actions/goal-tips", json={"goal": "Save 40K", "obstacle": "Impulse buys"})

    assert resp.status_code == 200
    assert resp.json() == {"tips": ["Start small"]}


def test_action_failure_returns_error_payload(client, monkeypatch) -> None:
    _reply_with(monkeypatch, None)

    resp = client.post("/actions/goal-tips", json={"goal": "Save 40K", "obstacle": "Impulse buys"})

    assert resp.status_code == 200
    assert resp.json() == {"error": "The AI model failed to generate valid tips. This may be a temporary issue."}


def test_action_reports_normalized_provider_error(client, monkeypatch) -> None:
    def rate_limited(system_prompt, user_prompt, *, model=None):
        raise RuntimeError("RATE_LIMIT_EXCEEDED: slow down")

    monkeypatch.setattr(llm_client, "complete_json", rate_limited)

    resp = client.post("/actions/goal-suggestions", json={"context": initial_app_data()})

    assert resp.json() == {"error": RATE_LIMIT_MESSAGE}


def test_invalid_input_becomes_error_payload(client) -> None:
    resp = client.post("/actions/goal-tips", json={"goal": "Save 40K"})

    assert resp.status_code == 200
    assert "obstacle" in resp.json()["error"]


def test_critical_steps_action_serializes_camel_case(client, monkeypatch) -> None:
    step = {"text": "Pay EMI", "priority": "Urgent", "category": "Finance", "reasoning": "Due", "timeframe": "Today"}
    _reply_with(monkeypatch, {"steps": [step, step, step]})

    resp = client.post("/actions/critical-steps", json={"context": initial_app_data()})

    assert resp.status_code == 200
    assert len(resp.json()["steps"]) == 3


def test_parse_resume_action(client, monkeypatch) -> None:
    resume = {
        "contactInfo": {
            "name": "Asha Verma",
            "location": "New Delhi",
            "phone": "1",
            "email": "asha@example.com",
            "linkedin": "https://linkedin.com/in/asha",
            "github": "https://github.com/asha",
        },
        "summary": {"title": "QA", "text": "Automation engineer"},
        "skills": {"Testing": "Selenium, Pytest"},
        "workExperience": [],
        "projects": [],
        "education": [],
    }
    _reply_with(monkeypatch, resume)

    resp = client.post("/actions/parse-resume", json={"resumeText": "Asha Verma, QA engineer..."})

    assert resp.status_code == 200
    assert resp.json()["contactInfo"]["name"] == "Asha Verma"
    assert resp.json()["skills"] == {"Testing": "Selenium, Pytest"}


def test_travel_suggestion_accepts_empty_body(client, monkeypatch) -> None:
    _reply_with(monkeypatch, {"destination": "Hampi, India", "reasoning": "Cool season."})

    resp = client.post("/actions/travel-suggestion")

    assert resp.json()["destination"] == "Hampi, India"


def test_non_object_body_becomes_error_payload(client) -> None:
    resp = client.post("/actions/goal-tips", json=["a"])

    assert resp.status_code == 200
    assert "error" in resp.json()


def test_missing_body_becomes_error_payload(client) -> None:
    resp = client.post("/actions/travel-image")

    assert resp.status_code == 200
    assert "error" in resp.json()
