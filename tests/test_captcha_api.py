"""HTTP tests for the reCAPTCHA verification proxy."""

from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from src.codewave.api.dependencies import get_http_client
from src.codewave.core.config import get_settings
from src.codewave.main import create_app


@pytest.fixture
def upstream_client(storage_dir, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """App with a configured secret and a mocked siteverify API."""
    monkeypatch.setenv("RECAPTCHA_SECRET", "s3cret")
    get_settings.cache_clear()

    def handler(request: httpx.Request) -> httpx.Response:
        if b"response=good" in request.content:
            return httpx.Response(200, json={"success": True})
        return httpx.Response(200, json={"success": False, "error-codes": ["timeout-or-duplicate"]})

    async def mock_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            yield client

    app = create_app()
    app.dependency_overrides[get_http_client] = mock_http_client
    with TestClient(app) as client:
        yield client


def test_missing_token(client: TestClient) -> None:
    response = client.post("/verify-recaptcha", json={})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing token"


def test_not_configured(client: TestClient) -> None:
    response = client.post("/verify-recaptcha", json={"token": "abc"})

    assert response.status_code == 502
    assert response.json()["success"] is False


def test_verified_token(upstream_client: TestClient) -> None:
    response = upstream_client.post("/verify-recaptcha", json={"token": "good"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "reCAPTCHA verified"}


def test_rejected_token(upstream_client: TestClient) -> None:
    response = upstream_client.post("/verify-recaptcha", json={"token": "bad"})

    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "error": "reCAPTCHA failed",
        "details": ["timeout-or-duplicate"],
    }
