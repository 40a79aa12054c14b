"""Per-project file trees on the local filesystem."""

import shutil
from datetime import UTC, datetime
from pathlib import Path

from src.codewave.core.exceptions import NotFound, StoreError, UnsupportedType
from src.codewave.core.logging import get_logger
from src.codewave.core.validators import is_project_slug, sanitize_filename
from src.codewave.schemas.project import StoredFile

logger = get_logger(__name__)

ENTRY_POINT = "index.html"


class ContentStore:
    """Owns the bytes of hosted files, one directory per project.

    Knows nothing about the project record store: writing here never updates
    the cached file list of a project record.
    """

    def __init__(self, sites_dir: Path):
        self.sites_dir = sites_dir

    def project_dir(self, project: str) -> Path:
        """Directory for a project. Names that are not slugs cannot exist."""
        if not is_project_slug(project):
            raise NotFound("Project not found")
        return self.sites_dir / project

    def _existing_dir(self, project: str) -> Path:
        directory = self.project_dir(project)
        if not directory.is_dir():
            raise NotFound("Project not found")
        return directory

    @staticmethod
    def _member(directory: Path, filename: str) -> Path:
        """Direct child of a project directory; anything else is absent."""
        if (
            not filename
            or filename in (".", "..")
            or "/" in filename
            or "\\" in filename
            or "\x00" in filename
        ):
            raise NotFound("File not found")
        return directory / filename

    def project_exists(self, project: str) -> bool:
        return is_project_slug(project) and (self.sites_dir / project).is_dir()

    def has_entry_point(self, project: str) -> bool:
        """True if the project directory holds a literal index.html."""
        return self.project_exists(project) and (self.sites_dir / project / ENTRY_POINT).is_file()

    def ensure_directory(self, project: str) -> Path:
        """Create the project directory and its parents. Idempotent."""
        directory = self.project_dir(project)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create directory for '{project}': {e.strerror}") from e
        return directory

    def write_file(self, project: str, filename: str, data: bytes) -> str:
        """Write bytes under the sanitized filename, overwriting any existing file.

        Returns:
            The filename the bytes were stored under.
        """
        stored_name = sanitize_filename(filename)
        path = self._member(self.project_dir(project), stored_name)
        try:
            path.write_bytes(data)
        except OSError as e:
            raise StoreError(f"Cannot write '{stored_name}': {e.strerror}") from e
        logger.debug("File written", project=project, filename=stored_name, size=len(data))
        return stored_name

    def list_files(self, project: str) -> list[StoredFile]:
        """Files directly inside the project directory, sorted by name."""
        directory = self._existing_dir(project)
        files = []
        try:
            for entry in sorted(directory.iterdir()):
                if not entry.is_file():
                    continue
                stat = entry.stat()
                files.append(
                    StoredFile(
                        name=entry.name,
                        size=stat.st_size,
                        last_modified=datetime.fromtimestamp(stat.st_mtime, UTC),
                    )
                )
        except OSError as e:
            raise StoreError(f"Cannot list files of '{project}': {e.strerror}") from e
        return files

    def read_file(self, project: str, filename: str) -> bytes:
        path = self._member(self._existing_dir(project), filename)
        if not path.is_file():
            raise NotFound("File not found")
        try:
            return path.read_bytes()
        except OSError as e:
            raise StoreError(f"Cannot read '{filename}': {e.strerror}") from e

    def read_text(self, project: str, filename: str) -> str:
        data = self.read_file(project, filename)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnsupportedType(f"'{filename}' is not a UTF-8 text file") from e

    def replace_text(self, project: str, filename: str, content: str) -> None:
        """Overwrite an existing file. Never creates one."""
        path = self._member(self._existing_dir(project), filename)
        if not path.is_file():
            raise NotFound("File not found")
        try:
            path.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            raise StoreError(f"Cannot write '{filename}': {e.strerror}") from e

    def delete_project(self, project: str) -> bool:
        """Remove the project directory tree. Returns False if it was absent."""
        if not self.project_exists(project):
            return False
        try:
            shutil.rmtree(self.sites_dir / project)
        except OSError as e:
            raise StoreError(f"Cannot delete directory of '{project}': {e.strerror}") from e
        logger.info("Project directory deleted", project=project)
        return True

    def resolve_asset(self, project: str, path: str) -> Path | None:
        """Map a path inside a hosted site onto a file, or None.

        An empty path, or one ending in ``/``, names that directory's
        index.html. Paths escaping the project directory resolve to None.
        """
        root = (self.sites_dir / project).resolve()
        relative = path.lstrip("/")
        if not relative or relative.endswith("/"):
            relative = f"{relative}{ENTRY_POINT}"
        if "\x00" in relative:
            return None
        candidate = (root / relative).resolve()
        if not candidate.is_relative_to(root):
            return None
        if candidate.is_dir():
            candidate = candidate / ENTRY_POINT
        return candidate if candidate.is_file() else None
