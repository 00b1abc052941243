from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.db.models.user import User
from app.services.app_data_store import (
    EPOCH_ISO,
    delete_app_data,
    list_user_ids,
    load_app_data,
    merge_documents,
    normalize_app_data,
    save_app_data,
    update_app_data,
)
from app.services.initial_data import DEFAULT_INCOME_SOURCES, initial_app_data


def test_first_load_seeds_initial_plan(db_session) -> None:
    data = load_app_data(db_session, "user-1")

    assert [goal["id"] for goal in data["goals"]] == ["goal-1", "goal-2", "goal-3"]
    assert len(data["carSaleChecklist"]) == 8
    assert data["lastJobSuggestionCheck"] == EPOCH_ISO
    assert db_session.get(User, "user-1") is not None


def test_updater_without_changes_round_trips(db_session) -> None:
    before = load_app_data(db_session, "user-1")
    stored_at = db_session.get(User, "user-1").updated_at

    after = update_app_data(db_session, "user-1", lambda draft: None)

    assert after == before
    assert db_session.get(User, "user-1").updated_at == stored_at


def test_updater_mutations_are_persisted(db_session) -> None:
    load_app_data(db_session, "user-1")

    def complete_first_step(draft):
        draft["goals"][0]["steps"][0]["completed"] = True

    update_app_data(db_session, "user-1", complete_first_step)

    assert load_app_data(db_session, "user-1")["goals"][0]["steps"][0]["completed"] is True


def test_updater_may_return_replacement(db_session) -> None:
    load_app_data(db_session, "user-1")

    update_app_data(db_session, "user-1", lambda draft: {**draft, "emergencyFund": "12000"})

    assert load_app_data(db_session, "user-1")["emergencyFund"] == "12000"


def test_updater_result_is_validated(db_session) -> None:
    load_app_data(db_session, "user-1")

    def break_goal(draft):
        draft["goals"][0]["category"] = "Hobby"

    with pytest.raises(ValidationError):
        update_app_data(db_session, "user-1", break_goal)

    assert load_app_data(db_session, "user-1")["goals"][0]["category"] == "Career"


def test_merge_write_keeps_untouched_keys(db_session) -> None:
    load_app_data(db_session, "user-1")
    save_app_data(
        db_session,
        "user-1",
        {"livingAdvisor": {"questionnaire": {"currentProfession": "QA"}, "recommendations": []}},
    )

    save_app_data(db_session, "user-1", {"livingAdvisor": {"recommendations": [{"country": "Canada"}]}})

    data = load_app_data(db_session, "user-1")
    assert data["livingAdvisor"]["questionnaire"] == {"currentProfession": "QA"}
    assert data["livingAdvisor"]["recommendations"] == [{"country": "Canada"}]
    assert len(data["goals"]) == 3


def test_merge_documents_replaces_lists() -> None:
    merged = merge_documents({"a": {"b": 1, "c": [1, 2]}, "d": 1}, {"a": {"c": [3]}})

    assert merged == {"a": {"b": 1, "c": [3]}, "d": 1}


def test_normalize_fills_missing_fields() -> None:
    data = normalize_app_data({"goals": None, "incomeSources": [], "emergencyFundTarget": ""})

    assert data["goals"] == []
    assert data["incomeSources"] == DEFAULT_INCOME_SOURCES
    assert data["emergencyFundTarget"] == "40000"
    assert data["lastJobSuggestionCheck"] == EPOCH_ISO


def test_normalize_keeps_unknown_keys() -> None:
    raw = {**initial_app_data(), "dashboardLayout": ["goals", "finance"]}

    assert normalize_app_data(raw)["dashboardLayout"] == ["goals", "finance"]


def test_delete_and_list(db_session) -> None:
    load_app_data(db_session, "user-b")
    load_app_data(db_session, "user-a")

    assert list_user_ids(db_session) == ["user-a", "user-b"]
    assert delete_app_data(db_session, "user-a") is True
    assert delete_app_data(db_session, "user-a") is False
    assert list_user_ids(db_session) == ["user-b"]
