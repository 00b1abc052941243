from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.services import job_suggestions
from app.services.ai.errors import FlowGenerationError
from app.services.ai.job_suggestions import GenerateJobSuggestionsOutput, SuggestedJobApplication
from app.services.app_data_store import load_app_data, save_app_data
from app.services.job_suggestions import (
    is_job_check_due,
    merge_job_suggestions,
    run_job_suggestion_check,
)

MORNING = datetime(2025, 9, 15, 10, 30, tzinfo=timezone.utc)
EARLY = datetime(2025, 9, 15, 7, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def utc_schedule(monkeypatch):
    monkeypatch.setattr(job_suggestions.settings, "scheduler_timezone", "UTC")
    monkeypatch.setattr(job_suggestions.settings, "job_suggestion_hour", 9)
    monkeypatch.setattr(job_suggestions.settings, "job_suggestion_minute", 0)


def _suggestion(company, role):
    return SuggestedJobApplication(company=company, role=role, reasoning="Matches automation experience.")


def test_check_due_after_nine_when_not_checked_today() -> None:
    assert is_job_check_due(MORNING, "2025-09-14T11:00:00.000Z", has_resume=True) is True


def test_check_not_due_before_nine_or_when_already_checked() -> None:
    assert is_job_check_due(EARLY, "2025-09-14T11:00:00.000Z", has_resume=True) is False
    assert is_job_check_due(MORNING, "2025-09-15T09:05:00.000Z", has_resume=True) is False


def test_check_requires_resume() -> None:
    assert is_job_check_due(MORNING, None, has_resume=False) is False


def test_merge_prepends_and_skips_existing() -> None:
    data = {"jobApplications": [{"company": "Acme", "role": "SDET", "status": "Applied", "date": "x"}]}

    added = merge_job_suggestions(data, [_suggestion("Acme", "SDET"), _suggestion("Globex", "QA Lead")], MORNING)

    assert added == 1
    first = data["jobApplications"][0]
    assert (first["company"], first["status"], first["source"]) == ("Globex", "Need to Apply", "AI")
    assert first["date"] == "2025-09-15T10:30:00.000Z"
    assert first["reasoning"] == "Matches automation experience."
    assert data["lastJobSuggestionCheck"] == "2025-09-15T10:30:00.000Z"


def _seed_with_resume(db_session, resume):
    load_app_data(db_session, "user-1")
    save_app_data(db_session, "user-1", {"resume": resume})


def test_run_check_adds_suggestions(db_session, sample_resume, monkeypatch) -> None:
    _seed_with_resume(db_session, sample_resume)
    monkeypatch.setattr(
        job_suggestions,
        "generate_job_suggestions",
        lambda payload: GenerateJobSuggestionsOutput(suggestions=[_suggestion("Globex", "QA Lead")]),
    )

    result = run_job_suggestion_check(db_session, "user-1", MORNING)

    assert result.due is True and result.added == 1
    data = load_app_data(db_session, "user-1")
    assert data["jobApplications"][0]["company"] == "Globex"
    assert data["lastJobSuggestionCheck"] == "2025-09-15T10:30:00.000Z"


def test_run_check_stamps_time_when_flow_fails(db_session, sample_resume, monkeypatch) -> None:
    _seed_with_resume(db_session, sample_resume)

    def failing(payload):
        raise FlowGenerationError("no output")

    monkeypatch.setattr(job_suggestions, "generate_job_suggestions", failing)

    result = run_job_suggestion_check(db_session, "user-1", MORNING)

    assert result.failed is True and result.added == 0
    assert load_app_data(db_session, "user-1")["lastJobSuggestionCheck"] == "2025-09-15T10:30:00.000Z"
    assert run_job_suggestion_check(db_session, "user-1", MORNING).due is False


def test_run_check_skips_users_without_resume(db_session) -> None:
    load_app_data(db_session, "user-1")

    assert run_job_suggestion_check(db_session, "user-1", MORNING).due is False


def test_run_check_stamps_documents_with_partial_sections(db_session, sample_resume, monkeypatch) -> None:
    load_app_data(db_session, "user-1")
    save_app_data(
        db_session,
        "user-1",
        {"resume": sample_resume, "livingAdvisor": {"questionnaire": {"currentProfession": "QA"}}},
    )
    monkeypatch.setattr(
        job_suggestions,
        "generate_job_suggestions",
        lambda payload: GenerateJobSuggestionsOutput(suggestions=[_suggestion("Globex", "QA Lead")]),
    )

    result = run_job_suggestion_check(db_session, "user-1", MORNING)

    assert result.added == 1
    data = load_app_data(db_session, "user-1")
    assert data["lastJobSuggestionCheck"] == "2025-09-15T10:30:00.000Z"
    assert data["livingAdvisor"]["questionnaire"] == {"currentProfession": "QA"}
