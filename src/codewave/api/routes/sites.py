"""Landing page and hosted-site serving.

This router owns the catch-all ``/{project}/...`` paths and must be
included after every other route.
"""

from fastapi import APIRouter
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse

from src.codewave.api.dependencies import SettingsDep, SiteServiceDep
from src.codewave.core.pages import render_landing

router = APIRouter(tags=["sites"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
def landing(settings: SettingsDep) -> HTMLResponse:
    """Informational page, not tied to any project."""
    return HTMLResponse(render_landing(settings.app_name))


@router.api_route("/{project}", methods=["GET", "HEAD"])
def project_root(project: str, service: SiteServiceDep) -> RedirectResponse:
    """Redirect to the trailing-slash form so relative links resolve."""
    service.check_project(project)
    return RedirectResponse(f"/{project}/", status_code=307)


@router.api_route("/{project}/{path:path}", methods=["GET", "HEAD"])
def serve_site(project: str, path: str, service: SiteServiceDep) -> FileResponse:
    """Serve a file from a hosted project, index.html for directory paths."""
    return FileResponse(service.resolve(project, path))
