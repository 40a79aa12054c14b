"""File listing and editor endpoints for a single project."""

from fastapi import APIRouter

from src.codewave.api.dependencies import ProjectServiceDep
from src.codewave.schemas.project import FileContent, MessageResponse, StoredFile

router = APIRouter(prefix="/project/{name}", tags=["files"])


@router.get(
    "/files",
    response_model=list[StoredFile],
    summary="List project files",
    description="List the files currently stored in a project's directory.",
    responses={
        200: {"description": "Files with size and modification time"},
        404: {"description": "Project not found"},
    },
)
def list_files(name: str, service: ProjectServiceDep) -> list[StoredFile]:
    """List stored files of a project."""
    return service.list_files(name)


@router.get(
    "/file/{filename}",
    response_model=FileContent,
    summary="Read file",
    responses={
        200: {"description": "File content as text"},
        404: {"description": "Project or file not found"},
    },
)
def get_file(name: str, filename: str, service: ProjectServiceDep) -> FileContent:
    """Read the raw text of one file."""
    return FileContent(content=service.get_file(name, filename))


@router.put(
    "/file/{filename}",
    response_model=MessageResponse,
    summary="Overwrite file",
    description="Replace the content of an existing file. Does not create files "
    "and does not refresh the project record's file list.",
    responses={
        200: {"description": "File updated"},
        404: {"description": "Project or file not found"},
    },
)
def put_file(
    name: str, filename: str, body: FileContent, service: ProjectServiceDep
) -> MessageResponse:
    """Overwrite the text of one file."""
    service.put_file(name, filename, body.content)
    return MessageResponse(message=f"File '{filename}' updated")
