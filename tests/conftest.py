"""Root test fixtures shared across all test types.

Every fixture that touches storage points STORAGE_DIR at a fresh tmp_path,
so tests never see each other's projects.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.codewave.core.config import Settings, get_settings
from src.codewave.main import create_app
from src.codewave.repositories import ContentStore, InMemoryProjectStore, JsonProjectStore

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- Storage Fixtures ---


@pytest.fixture
def storage_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the service at an empty storage directory."""
    path = tmp_path / "storage"
    monkeypatch.setenv("STORAGE_DIR", str(path))
    for name in ("PUBLIC_BASE_URL", "RECAPTCHA_SECRET", "METRICS_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


@pytest.fixture
def settings(storage_dir: Path) -> Settings:
    return get_settings()


@pytest.fixture
def content_store(settings: Settings) -> ContentStore:
    return ContentStore(settings.sites_dir)


@pytest.fixture
def project_store(settings: Settings) -> JsonProjectStore:
    return JsonProjectStore(settings.projects_file)


@pytest.fixture
def memory_store() -> InMemoryProjectStore:
    return InMemoryProjectStore()


# --- HTTP Fixtures ---


@pytest.fixture
def app(storage_dir: Path) -> FastAPI:
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
