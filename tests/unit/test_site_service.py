"""Tests for hosted-site path resolution."""

from pathlib import Path

import pytest

from src.codewave.core.exceptions import (
    AssetNotFound,
    MissingEntryPoint,
    NotFound,
    ProjectNotFound,
    SiteError,
)
from src.codewave.repositories import ContentStore
from src.codewave.services import SiteService

pytestmark = pytest.mark.unit


@pytest.fixture
def content(tmp_path: Path) -> ContentStore:
    store = ContentStore(tmp_path / "sites")
    store.ensure_directory("my-site-")
    store.write_file("my-site-", "index.html", b"<h1>home</h1>")
    store.write_file("my-site-", "style.css", b"p{}")
    store.ensure_directory("no-index")
    store.write_file("no-index", "style.css", b"p{}")
    return store


@pytest.fixture
def service(content: ContentStore) -> SiteService:
    return SiteService(content)


def test_root_serves_entry_point(service: SiteService):
    assert service.resolve("my-site-").read_bytes() == b"<h1>home</h1>"
    assert service.resolve("my-site-", "").name == "index.html"


def test_asset_served(service: SiteService):
    assert service.resolve("my-site-", "style.css").read_bytes() == b"p{}"


def test_unknown_project(service: SiteService):
    with pytest.raises(ProjectNotFound) as exc_info:
        service.resolve("missing")
    assert exc_info.value.project == "missing"
    assert exc_info.value.status_code == 404


def test_directory_without_index(service: SiteService):
    """Other files do not make a project servable."""
    with pytest.raises(MissingEntryPoint):
        service.resolve("no-index", "style.css")


def test_missing_asset(service: SiteService):
    with pytest.raises(AssetNotFound):
        service.resolve("my-site-", "app.js")


def test_traversal_is_not_found(service: SiteService, content: ContentStore):
    (content.sites_dir / "secret.txt").write_text("secret")

    with pytest.raises(AssetNotFound):
        service.resolve("my-site-", "../secret.txt")


def test_non_slug_project_is_unknown(service: SiteService):
    with pytest.raises(ProjectNotFound):
        service.resolve("My Site!")


def test_reserved_names_are_plain_not_found(service: SiteService):
    with pytest.raises(NotFound) as exc_info:
        service.check_project("api")
    assert not isinstance(exc_info.value, SiteError)
