"""Upload pipeline: validate a file bundle, store it and record the project."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from src.codewave.core.exceptions import PayloadTooLarge, UnsupportedType, ValidationError
from src.codewave.core.logging import bind_project_context, get_logger
from src.codewave.core.validators import (
    RESERVED_PROJECT_NAMES,
    is_allowed_upload,
    sanitize_project_name,
)
from src.codewave.repositories import ContentStore, ProjectStore
from src.codewave.schemas.project import FileSummary, ProjectRecord, UploadSummary

logger = get_logger(__name__)


@dataclass(frozen=True)
class IncomingFile:
    """One file of an upload, as declared by the client."""

    filename: str
    content_type: str | None
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class UploadService:
    """Upload pipeline - validation, persistence and metadata update.

    The whole batch is validated before anything touches the disk, so a
    rejected upload leaves no files behind. A write failure part-way through
    a valid batch is not rolled back.
    """

    def __init__(
        self,
        project_store: ProjectStore,
        content_store: ContentStore,
        max_file_size: int,
        max_files: int,
    ):
        self.project_store = project_store
        self.content_store = content_store
        self.max_file_size = max_file_size
        self.max_files = max_files

    def validate(self, project: str | None, files: Sequence[IncomingFile]) -> str:
        """Check an upload request and return the sanitized project name.

        Raises:
            ValidationError: Missing project or files, too many files, or a
                reserved project name.
            UnsupportedType: A file extension or content type is not allowed.
            PayloadTooLarge: A file exceeds the size cap.
        """
        if not project:
            raise ValidationError("missing project")
        if not files:
            raise ValidationError("missing files")
        if len(files) > self.max_files:
            raise ValidationError(f"too many files: at most {self.max_files} per upload")

        for incoming in files:
            if not is_allowed_upload(incoming.filename, incoming.content_type):
                raise UnsupportedType(
                    f"unsupported file type: {incoming.filename!r} ({incoming.content_type})"
                )
            if incoming.size > self.max_file_size:
                raise PayloadTooLarge(
                    f"file too large: {incoming.filename!r} exceeds "
                    f"{self.max_file_size // (1024 * 1024)} MB"
                )

        name = sanitize_project_name(project)
        if name in RESERVED_PROJECT_NAMES:
            raise ValidationError(f"project name '{name}' is reserved")
        return name

    def upload(
        self, project: str | None, files: Sequence[IncomingFile], base_url: str
    ) -> UploadSummary:
        """Store a bundle of files for a project and upsert its record.

        Args:
            project: Raw project name from the client
            files: Files to store, 1 to max_files
            base_url: Scheme and host the project will be reachable under

        Returns:
            Summary with the sanitized name, file count and public URL
        """
        try:
            name = self.validate(project, files)
        except (ValidationError, UnsupportedType, PayloadTooLarge) as e:
            logger.info("Upload rejected", reason=e.message, file_count=len(files))
            raise

        bind_project_context(name)
        self.content_store.ensure_directory(name)

        # Names that collide after sanitizing overwrite each other on disk;
        # the last write wins and keeps the first-seen position
        stored: dict[str, FileSummary] = {}
        for incoming in files:
            stored_name = self.content_store.write_file(name, incoming.filename, incoming.data)
            stored[stored_name] = FileSummary(
                name=stored_name, size=incoming.size, uploaded=datetime.now(UTC)
            )
        summaries = list(stored.values())

        url = f"{base_url.rstrip('/')}/{name}"
        self.project_store.upsert(
            ProjectRecord(name=name, url=url, date=datetime.now(UTC), files=summaries)
        )

        logger.info(
            "Upload stored",
            file_count=len(summaries),
            total_bytes=sum(s.size for s in summaries),
            url=url,
        )
        return UploadSummary(project=name, file_count=len(summaries), url=url)
