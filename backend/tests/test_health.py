from fastapi.testclient import TestClient


def _get_client() -> TestClient:
    from app.main import app

    return TestClient(app)


def test_health_endpoint_returns_ok() -> None:
    client = _get_client()
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_request_id_generated_and_returned() -> None:
    client = _get_client()
    response = client.get("/health")

    assert response.headers.get("X-Request-Id")


def test_request_id_echoed_from_header() -> None:
    client = _get_client()
    req_id = "resolve25-req-42"
    response = client.get("/health", headers={"X-Request-Id": req_id})

    assert response.headers.get("X-Request-Id") == req_id


def test_openapi_lists_document_and_action_routes() -> None:
    client = _get_client()
    paths = client.get("/openapi.json").json()["paths"]

    assert "/users/{user_id}/data" in paths
    assert "/actions/critical-steps" in paths
    assert "/api/ai/process-task" in paths
