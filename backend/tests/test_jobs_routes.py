from __future__ import annotations

import pytest

from app.api.routes import jobs as jobs_route
from app.services import job_suggestions
from app.services.ai.job_suggestions import GenerateJobSuggestionsOutput


@pytest.fixture()
def debug_client(client, monkeypatch):
    monkeypatch.setattr(jobs_route.settings, "debug", True)
    monkeypatch.setattr(
        job_suggestions,
        "generate_job_suggestions",
        lambda payload: GenerateJobSuggestionsOutput(suggestions=[]),
    )
    return client


def test_jobs_config_reports_schedule(client, monkeypatch) -> None:
    monkeypatch.setattr(jobs_route.settings, "job_suggestion_hour", 9)
    monkeypatch.setattr(jobs_route.settings, "job_suggestion_minute", 0)

    resp = client.get("/jobs")

    assert resp.status_code == 200
    body = resp.json()
    assert "scheduler_enabled" in body
    assert body["schedule"]["job_suggestions_time"] == "09:00"
    assert body["request_id"]


def test_run_now_for_all_users(debug_client) -> None:
    debug_client.get("/users/user-1/data")

    resp = debug_client.post("/jobs/run-now", json={})

    assert resp.status_code == 200
    data = resp.json()
    assert data["job"] == "job_suggestions"
    assert data["users_processed"] == 1
    assert data["request_id"]


def test_run_now_unknown_user_is_404(debug_client) -> None:
    resp = debug_client.post("/jobs/run-now", json={"user_id": "nobody"})

    assert resp.status_code == 404


def test_run_now_forbidden_outside_debug(client, monkeypatch) -> None:
    monkeypatch.setattr(jobs_route.settings, "debug", False)

    resp = client.post("/jobs/run-now", json={})

    assert resp.status_code == 403
