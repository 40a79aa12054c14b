"""Tests for the filesystem content store."""

from pathlib import Path

import pytest

from src.codewave.core.exceptions import NotFound, UnsupportedType
from src.codewave.repositories import ContentStore

pytestmark = pytest.mark.unit


@pytest.fixture
def store(tmp_path: Path) -> ContentStore:
    return ContentStore(tmp_path / "sites")


class TestDirectories:
    def test_ensure_directory_creates_parents(self, store: ContentStore):
        directory = store.ensure_directory("my-site-")

        assert directory.is_dir()
        assert directory == store.sites_dir / "my-site-"

    def test_ensure_directory_is_idempotent(self, store: ContentStore):
        store.ensure_directory("my-site-")
        store.write_file("my-site-", "index.html", b"<h1>hi</h1>")
        store.ensure_directory("my-site-")

        assert store.read_file("my-site-", "index.html") == b"<h1>hi</h1>"

    def test_non_slug_names_cannot_exist(self, store: ContentStore):
        with pytest.raises(NotFound):
            store.ensure_directory("../escape")
        assert not store.project_exists("../escape")

    def test_delete_project_removes_tree(self, store: ContentStore):
        store.ensure_directory("my-site-")
        store.write_file("my-site-", "index.html", b"x")

        assert store.delete_project("my-site-") is True
        assert not (store.sites_dir / "my-site-").exists()

    def test_delete_absent_project_is_noop(self, store: ContentStore):
        assert store.delete_project("missing") is False
        assert store.delete_project("../escape") is False


class TestFiles:
    def test_write_then_read_round_trip(self, store: ContentStore):
        data = bytes(range(256))
        store.ensure_directory("bin")
        store.write_file("bin", "logo.png", data)

        assert store.read_file("bin", "logo.png") == data

    def test_write_sanitizes_filename(self, store: ContentStore):
        store.ensure_directory("my-site-")
        stored = store.write_file("my-site-", "../my page.html", b"x")

        assert stored == ".._my_page.html"
        assert (store.sites_dir / "my-site-" / ".._my_page.html").is_file()
        assert not (store.sites_dir / "my page.html").exists()

    def test_write_overwrites(self, store: ContentStore):
        store.ensure_directory("my-site-")
        store.write_file("my-site-", "index.html", b"old")
        store.write_file("my-site-", "index.html", b"new")

        assert store.read_file("my-site-", "index.html") == b"new"

    def test_list_files(self, store: ContentStore):
        store.ensure_directory("my-site-")
        store.write_file("my-site-", "style.css", b"a" * 200)
        store.write_file("my-site-", "index.html", b"a" * 500)
        (store.sites_dir / "my-site-" / "assets").mkdir()

        files = store.list_files("my-site-")

        assert [(f.name, f.size) for f in files] == [("index.html", 500), ("style.css", 200)]
        assert all(f.last_modified.tzinfo is not None for f in files)

    def test_list_files_of_missing_project(self, store: ContentStore):
        with pytest.raises(NotFound, match="Project not found"):
            store.list_files("missing")

    def test_read_missing_file(self, store: ContentStore):
        store.ensure_directory("my-site-")
        with pytest.raises(NotFound, match="File not found"):
            store.read_file("my-site-", "nope.html")

    def test_read_missing_project(self, store: ContentStore):
        with pytest.raises(NotFound, match="Project not found"):
            store.read_file("missing", "index.html")

    @pytest.mark.parametrize("filename", ["..", ".", "../secret.txt", "a/b.html", ""])
    def test_read_outside_project_is_not_found(self, store: ContentStore, filename: str):
        store.ensure_directory("my-site-")
        (store.sites_dir / "secret.txt").write_text("secret")

        with pytest.raises(NotFound):
            store.read_file("my-site-", filename)

    def test_read_text_rejects_binary(self, store: ContentStore):
        store.ensure_directory("my-site-")
        store.write_file("my-site-", "logo.png", b"\x89PNG\r\n\x1a\n\xff")

        with pytest.raises(UnsupportedType):
            store.read_text("my-site-", "logo.png")

    def test_replace_text_overwrites(self, store: ContentStore):
        store.ensure_directory("my-site-")
        store.write_file("my-site-", "index.html", b"<h1>old</h1>")
        store.replace_text("my-site-", "index.html", "<h1>new</h1>\r\n")

        assert store.read_text("my-site-", "index.html") == "<h1>new</h1>\r\n"

    def test_replace_text_never_creates(self, store: ContentStore):
        store.ensure_directory("my-site-")

        with pytest.raises(NotFound, match="File not found"):
            store.replace_text("my-site-", "new.html", "<h1>new</h1>")
        assert not (store.sites_dir / "my-site-" / "new.html").exists()


class TestAssetResolution:
    @pytest.fixture
    def site(self, store: ContentStore) -> ContentStore:
        store.ensure_directory("my-site-")
        store.write_file("my-site-", "index.html", b"<h1>home</h1>")
        store.write_file("my-site-", "style.css", b"p{}")
        docs = store.sites_dir / "my-site-" / "docs"
        docs.mkdir()
        (docs / "index.html").write_bytes(b"<h1>docs</h1>")
        return store

    def test_has_entry_point(self, site: ContentStore):
        assert site.has_entry_point("my-site-")
        site.ensure_directory("bare")
        assert not site.has_entry_point("bare")
        assert not site.has_entry_point("missing")

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("", "index.html"),
            ("/", "index.html"),
            ("style.css", "style.css"),
            ("docs/", "docs/index.html"),
            ("docs", "docs/index.html"),
        ],
    )
    def test_resolves_inside_project(self, site: ContentStore, path: str, expected: str):
        asset = site.resolve_asset("my-site-", path)
        assert asset == (site.sites_dir / "my-site-" / expected).resolve()

    @pytest.mark.parametrize("path", ["missing.js", "../other/index.html", "docs/../../x"])
    def test_unresolvable_paths(self, site: ContentStore, path: str):
        other = site.ensure_directory("other")
        (other / "index.html").write_bytes(b"other")

        assert site.resolve_asset("my-site-", path) is None
