"""Project record endpoints."""

from fastapi import APIRouter

from src.codewave.api.dependencies import ProjectServiceDep
from src.codewave.schemas.project import MessageResponse, ProjectRecord

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRecord],
    summary="List projects",
    description="List every project record in the record store.",
    responses={
        200: {"description": "All project records"},
        500: {"description": "Record store could not be read"},
    },
)
def list_projects(service: ProjectServiceDep) -> list[ProjectRecord]:
    """List all project records."""
    return service.list_projects()


@router.post(
    "",
    response_model=MessageResponse,
    summary="Save project",
    description="Create or fully replace the record with the same name.",
    responses={
        200: {"description": "Project saved"},
        500: {"description": "Record store could not be written"},
    },
)
def save_project(record: ProjectRecord, service: ProjectServiceDep) -> MessageResponse:
    """Upsert a project record."""
    service.save_project(record)
    return MessageResponse(message=f"Project '{record.name}' saved")


@router.delete(
    "/{name}",
    response_model=MessageResponse,
    summary="Delete project",
    description="Delete a project record and its hosted files. Absent projects are not an error.",
    responses={
        200: {"description": "Project deleted"},
        500: {"description": "Record store or filesystem failure"},
    },
)
def delete_project(name: str, service: ProjectServiceDep) -> MessageResponse:
    """Delete a project record and its directory."""
    service.delete_project(name)
    return MessageResponse(message=f"Project '{name}' deleted")
