from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from app.services import unsplash


def _mock_unsplash(monkeypatch, handler) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    monkeypatch.setattr(
        unsplash,
        "get_http_client",
        lambda: httpx.Client(base_url="https://api.unsplash.test", transport=httpx.MockTransport(recording)),
    )
    return seen


@pytest.fixture()
def photo_client(monkeypatch):
    from app.main import app

    monkeypatch.setattr(unsplash.settings, "unsplash_access_key", "demo-key")
    return TestClient(app)


def test_returns_regular_photo_url(photo_client, monkeypatch) -> None:
    seen = _mock_unsplash(
        monkeypatch,
        lambda request: httpx.Response(200, json={"urls": {"regular": "https://images.test/lisbon.jpg"}}),
    )

    resp = photo_client.get("/api/unsplash", params={"query": "Lisbon"})

    assert resp.status_code == 200
    assert resp.json() == {"url": "https://images.test/lisbon.jpg"}
    assert seen[0].url.path == "/photos/random"
    assert seen[0].url.params["query"] == "Lisbon"
    assert seen[0].url.params["client_id"] == "demo-key"


def test_missing_query_is_400(photo_client) -> None:
    resp = photo_client.get("/api/unsplash")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Query parameter is required"}


def test_missing_access_key_is_500(photo_client, monkeypatch) -> None:
    monkeypatch.setattr(unsplash.settings, "unsplash_access_key", None)

    resp = photo_client.get("/api/unsplash", params={"query": "Lisbon"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Unsplash API key is not configured"}


def test_upstream_status_and_errors_pass_through(photo_client, monkeypatch) -> None:
    _mock_unsplash(monkeypatch, lambda request: httpx.Response(401, json={"errors": ["OAuth error: invalid token"]}))

    resp = photo_client.get("/api/unsplash", params={"query": "Lisbon"})

    assert resp.status_code == 401
    assert resp.json() == {"error": ["OAuth error: invalid token"]}


def test_upstream_failure_without_errors_uses_default_message(photo_client, monkeypatch) -> None:
    _mock_unsplash(monkeypatch, lambda request: httpx.Response(503, json={}))

    resp = photo_client.get("/api/unsplash", params={"query": "Lisbon"})

    assert resp.status_code == 503
    assert resp.json() == {"error": "Failed to fetch image from Unsplash"}


def test_transport_failure_is_500(photo_client, monkeypatch) -> None:
    def unreachable(request):
        raise httpx.ConnectError("connection refused", request=request)

    _mock_unsplash(monkeypatch, unreachable)

    resp = photo_client.get("/api/unsplash", params={"query": "Lisbon"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}
