from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from app.api.routes import process_task as process_task_route
from app.services.task_processor import AI_MODELS, PROMPT_CONTEXTS, generate_ai_response


@pytest.fixture()
def task_client(monkeypatch):
    from app.main import app

    monkeypatch.setattr(process_task_route.settings, "process_task_simulate_latency", False)
    return TestClient(app)


def test_health_lists_models(task_client) -> None:
    resp = task_client.get("/api/ai/process-task")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["service"] == "AI Task Processing API"
    assert body["models"] == ["gemini-1.5-flash", "gemini-1.5-pro", "gemini-1.0-ultra", "gemini-pro-vision"]
    assert body["timestamp"].endswith("Z")


def test_process_task_success(task_client) -> None:
    resp = task_client.post(
        "/api/ai/process-task",
        json={"prompt": "Summarize my week", "model": "gemini-1.5-pro", "taskId": "task-7"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["model"] == "Gemini 1.5 Pro"
    assert body["taskId"] == "task-7"
    assert "Summarize my week" in body["result"]
    assert body["executionTime"] >= 0


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"model": "gemini-1.5-pro", "taskId": "t"}, "Missing required fields: prompt, model, or taskId"),
        (["prompt", "model"], "Missing required fields: prompt, model, or taskId"),
        ({"prompt": 5, "model": "gemini-1.5-pro", "taskId": "t"}, "Missing required fields: prompt, model, or taskId"),
        ({"prompt": "hi", "model": "gpt-9", "taskId": "t"}, "Invalid AI model specified"),
        (
            {"prompt": "x" * 16385, "model": "gemini-pro-vision", "taskId": "t"},
            "Prompt exceeds maximum token limit for Gemini Pro Vision",
        ),
    ],
)
def test_process_task_rejects_bad_requests(task_client, payload, message) -> None:
    resp = task_client.post("/api/ai/process-task", json=payload)

    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert resp.json()["error"] == message


def test_process_task_unexpected_failure_is_500(task_client, monkeypatch) -> None:
    def explode(prompt, spec):
        raise RuntimeError("template store unavailable")

    monkeypatch.setattr(process_task_route, "generate_ai_response", explode)

    resp = task_client.post(
        "/api/ai/process-task",
        json={"prompt": "hi", "model": "gemini-1.5-flash", "taskId": "t"},
    )

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "error": "Internal server error during AI task processing",
        "executionTime": 0,
        "model": "",
        "taskId": "",
    }


@pytest.mark.parametrize(
    "prompt, heading",
    [
        ("Review this Python code", "Additional Programming Context"),
        ("Run an analysis of sales", "Additional Analysis Context"),
        ("Write a short poem", "Additional Creative Context"),
    ],
)
def test_response_gets_subject_section(prompt, heading) -> None:
    result = generate_ai_response(prompt, AI_MODELS["gemini-1.5-flash"], rng=random.Random(1))

    assert heading in result


def test_first_matching_subject_wins() -> None:
    result = generate_ai_response("write code for data import", AI_MODELS["gemini-1.5-flash"])

    assert result.endswith(PROMPT_CONTEXTS[0][1])


def test_plain_prompt_has_no_extra_section() -> None:
    result = generate_ai_response("Plan my weekend", AI_MODELS["gemini-1.5-flash"])

    assert "Additional" not in result
