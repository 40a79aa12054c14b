"""Project metadata and file editor operations."""

from src.codewave.core.exceptions import ValidationError
from src.codewave.core.logging import bind_project_context, get_logger
from src.codewave.core.validators import is_project_slug
from src.codewave.repositories import ContentStore, ProjectStore
from src.codewave.schemas.project import ProjectRecord, StoredFile

logger = get_logger(__name__)


class ProjectService:
    """Project management service.

    Records and file trees are separate collaborators. Editing a file here
    does not refresh the file list cached on the project record.
    """

    def __init__(self, project_store: ProjectStore, content_store: ContentStore):
        self.project_store = project_store
        self.content_store = content_store

    def list_projects(self) -> list[ProjectRecord]:
        return self.project_store.list_all()

    def save_project(self, record: ProjectRecord) -> None:
        """Upsert a record as given.

        Raises:
            ValidationError: If the name is not a slug that can address a
                project directory.
        """
        if not is_project_slug(record.name):
            raise ValidationError(f"invalid project name '{record.name}': use [a-z0-9-] only")
        self.project_store.upsert(record)

    def delete_project(self, name: str) -> bool:
        """Delete the record and the directory of a project.

        Returns:
            True if either a record or a directory was removed.
        """
        bind_project_context(name)
        removed_record = self.project_store.delete(name)
        removed_files = self.content_store.delete_project(name)
        logger.info("Project deleted", record=removed_record, directory=removed_files)
        return removed_record or removed_files

    def list_files(self, name: str) -> list[StoredFile]:
        return self.content_store.list_files(name)

    def get_file(self, name: str, filename: str) -> str:
        """Raw text of one file. Raises NotFound if project or file is absent."""
        return self.content_store.read_text(name, filename)

    def put_file(self, name: str, filename: str, content: str) -> None:
        """Overwrite an existing file. Raises NotFound rather than creating it."""
        bind_project_context(name)
        self.content_store.replace_text(name, filename, content)
        logger.info("File edited", filename=filename, size=len(content.encode("utf-8")))
