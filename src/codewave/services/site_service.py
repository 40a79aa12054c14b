"""Resolution of hosted-site paths onto stored files."""

from pathlib import Path

from src.codewave.core.exceptions import (
    AssetNotFound,
    MissingEntryPoint,
    NotFound,
    ProjectNotFound,
)
from src.codewave.core.validators import RESERVED_PROJECT_NAMES
from src.codewave.repositories import ContentStore


class SiteService:
    """Decide what a path under ``/<project>/`` serves.

    The project must have a directory, the directory must hold a literal
    ``index.html``, and the remaining path must name a file inside it.
    """

    def __init__(self, content_store: ContentStore):
        self.content_store = content_store

    def check_project(self, project: str) -> None:
        """Raise the diagnostic error for a project that cannot be served."""
        # Service routes that fell through to here are plain 404s, not sites
        if project in RESERVED_PROJECT_NAMES:
            raise NotFound()
        if not self.content_store.project_exists(project):
            raise ProjectNotFound(project)
        if not self.content_store.has_entry_point(project):
            raise MissingEntryPoint(project)

    def resolve(self, project: str, path: str = "") -> Path:
        """Return the file to serve for ``/<project>/<path>``.

        Raises:
            ProjectNotFound: No directory exists for the project.
            MissingEntryPoint: The directory has no index.html.
            AssetNotFound: The path names no file inside the project.
        """
        self.check_project(project)
        asset = self.content_store.resolve_asset(project, path)
        if asset is None:
            raise AssetNotFound(project)
        return asset
