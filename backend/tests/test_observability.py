"""Tests ensuring observability wiring is safe by default."""
from __future__ import annotations

import importlib

import pytest

from app.observability import tracing


def test_app_import_succeeds_when_opik_is_disabled(monkeypatch) -> None:
    monkeypatch.setenv("OPIK_ENABLED", "false")
    monkeypatch.delenv("OPIK_API_KEY", raising=False)

    import app.core.config as core_config
    import app.observability.client as client_module
    import app.main as main_module

    importlib.reload(core_config)
    importlib.reload(client_module)
    reloaded_app = importlib.reload(main_module)

    assert hasattr(reloaded_app, "app")
    assert client_module.get_opik_client() is None


class _RecordingTrace:
    def __init__(self, name, metadata=None, tags=None):
        self.name = name
        self.metadata = metadata or {}
        self.tags = tags
        self.error_info = None
        self.ended = False

    def update(self, error_info=None, **kwargs):
        self.error_info = error_info

    def end(self):
        self.ended = True


class _RecordingClient:
    def __init__(self):
        self.traces = []

    def trace(self, name, metadata=None, tags=None):
        recorded = _RecordingTrace(name, metadata, tags)
        self.traces.append(recorded)
        return recorded


def test_trace_folds_ids_into_metadata(monkeypatch) -> None:
    client = _RecordingClient()
    monkeypatch.setattr(tracing, "get_opik_client", lambda: client)

    with tracing.trace("app_data.load", metadata={"route": "/x"}, user_id="user-1", request_id="req-1"):
        pass

    recorded = client.traces[0]
    assert recorded.metadata == {"route": "/x", "user_id": "user-1", "request_id": "req-1"}
    assert recorded.ended is True


def test_trace_attaches_error_and_reraises(monkeypatch) -> None:
    client = _RecordingClient()
    monkeypatch.setattr(tracing, "get_opik_client", lambda: client)

    with pytest.raises(ValueError):
        with tracing.trace("flow.generate_goal_tips"):
            raise ValueError("bad input")

    recorded = client.traces[0]
    assert recorded.error_info["exception_type"] == "ValueError"
    assert recorded.error_info["message"] == "bad input"
    assert recorded.ended is True
