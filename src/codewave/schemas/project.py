"""Project schemas for storage records and API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class FileSummary(BaseModel):
    """Snapshot of one uploaded file, taken at upload time."""

    name: str
    size: int = Field(ge=0)
    uploaded: datetime | None = None


class ProjectRecord(BaseModel):
    """Project metadata as kept in the record store."""

    name: str = Field(min_length=1)
    url: str = ""
    date: datetime | None = None
    files: list[FileSummary] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Project name cannot be empty or whitespace only")
        return v


class StoredFile(BaseModel):
    """Live directory entry for a file in a project's directory."""

    name: str
    size: int
    last_modified: datetime


class FileContent(BaseModel):
    """Body of the file editor endpoints."""

    content: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class UploadSummary(BaseModel):
    """Result of a successful upload."""

    project: str
    file_count: int
    url: str
