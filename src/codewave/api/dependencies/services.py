"""Service factory dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

import httpx
from fastapi import Depends, Request

from src.codewave.api.dependencies.stores import ContentStoreDep, ProjectStoreDep, SettingsDep
from src.codewave.services import CaptchaService, ProjectService, SiteService, UploadService


def get_upload_service(
    project_store: ProjectStoreDep,
    content_store: ContentStoreDep,
    settings: SettingsDep,
) -> UploadService:
    """Get upload service with the configured limits."""
    return UploadService(
        project_store,
        content_store,
        max_file_size=settings.max_file_size,
        max_files=settings.max_files,
    )


def get_project_service(
    project_store: ProjectStoreDep,
    content_store: ContentStoreDep,
) -> ProjectService:
    """Get project service."""
    return ProjectService(project_store, content_store)


def get_site_service(content_store: ContentStoreDep) -> SiteService:
    """Get site resolution service."""
    return SiteService(content_store)


async def get_http_client(
    request: Request, settings: SettingsDep
) -> AsyncGenerator[httpx.AsyncClient]:
    """Get the shared upstream HTTP client.

    Falls back to a per-request client when the application lifespan has not
    run (e.g. a TestClient used without its context manager).
    """
    client = getattr(request.app.state, "http_client", None)
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=settings.upstream_timeout_seconds) as client:
        yield client


HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]


def get_captcha_service(client: HttpClientDep, settings: SettingsDep) -> CaptchaService:
    """Get reCAPTCHA verification service."""
    return CaptchaService(client, settings.recaptcha_secret, settings.recaptcha_verify_url)


UploadServiceDep = Annotated[UploadService, Depends(get_upload_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
SiteServiceDep = Annotated[SiteService, Depends(get_site_service)]
CaptchaServiceDep = Annotated[CaptchaService, Depends(get_captcha_service)]
