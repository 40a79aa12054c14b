"""Multipart upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from src.codewave.api.dependencies import BaseUrl, SettingsDep, UploadServiceDep
from src.codewave.core.pages import render_upload_success
from src.codewave.core.rate_limit import limiter, upload_rate_limit
from src.codewave.services import IncomingFile

router = APIRouter(tags=["upload"])


async def _read_upload(upload: UploadFile, limit: int) -> IncomingFile:
    """Read at most limit + 1 bytes, enough to detect an oversized file."""
    try:
        data = await upload.read(limit + 1)
    finally:
        await upload.close()
    return IncomingFile(filename=upload.filename or "", content_type=upload.content_type, data=data)


@router.post(
    "/upload",
    response_class=HTMLResponse,
    summary="Upload project files",
    description="Store 1-20 static files under a project name and serve them at /<project>/.",
    responses={
        200: {"description": "Human-readable confirmation"},
        400: {"description": "Missing fields, unsupported type or file too large (plain text)"},
    },
)
@limiter.limit(upload_rate_limit)
async def upload_project(
    request: Request,
    service: UploadServiceDep,
    settings: SettingsDep,
    base_url: BaseUrl,
    project: Annotated[str | None, Form()] = None,
    files: Annotated[list[UploadFile] | None, File()] = None,
) -> HTMLResponse:
    """Accept a bundle of files for a project."""
    incoming = [
        await _read_upload(upload, settings.max_file_size)
        for upload in files or []
        # Browsers send an empty part when no file was picked
        if upload.filename or upload.size
    ]
    summary = await run_in_threadpool(service.upload, project, incoming, base_url)
    return HTMLResponse(render_upload_success(summary.project, summary.file_count, summary.url))
