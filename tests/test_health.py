"""Tests for health, metrics and service-wide response headers."""

import pytest
from fastapi.testclient import TestClient

from src.codewave.core.config import Settings, get_settings
from src.codewave.main import create_app


def test_health_reports_storage(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["sites_dir"] == "healthy"
    assert data["projects_count"] == 0


def test_health_unhealthy_on_corrupt_records(client: TestClient, settings: Settings) -> None:
    settings.projects_file.write_text("[{]")

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["project_store"].startswith("unhealthy")


def test_metrics_exposed(client: TestClient) -> None:
    client.get("/")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "http_requests_total" in response.text


def test_metrics_key_required_when_configured(
    storage_dir, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("METRICS_API_KEY", "scrape-me")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        assert client.get("/metrics").status_code == 401
        assert client.get("/metrics", headers={"X-Metrics-Key": "scrape-me"}).status_code == 200


def test_service_security_headers(client: TestClient) -> None:
    response = client.get("/api/projects")

    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert "content-security-policy" in response.headers
    assert response.headers["x-request-id"]
