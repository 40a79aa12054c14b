"""Error taxonomy and the handlers that map it onto HTTP responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.codewave.core.logging import get_logger
from src.codewave.core.pages import render_site_error

logger = get_logger(__name__)

# Routes whose errors are rendered as plain text instead of JSON
PLAIN_TEXT_PATHS = frozenset({"/upload"})


class HostingError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(HostingError):
    """Bad or missing input."""

    status_code = 400
    default_message = "Invalid request"


class UnsupportedType(HostingError):
    """File extension or content type outside the allow-set."""

    status_code = 400
    default_message = "Unsupported file type"


class PayloadTooLarge(HostingError):
    """A single uploaded file exceeds the size cap."""

    status_code = 400
    default_message = "File too large"


class NotFound(HostingError):
    status_code = 404
    default_message = "Not found"


class SiteError(NotFound):
    """Hosted-site resolution failure, rendered as a diagnostic page."""

    title: str = "Not found"

    def __init__(self, project: str, message: str | None = None):
        self.project = project
        super().__init__(message)


class ProjectNotFound(SiteError):
    title = "Project not found"
    default_message = "No project is hosted under this name."


class MissingEntryPoint(SiteError):
    title = "Missing index.html"
    default_message = "This project exists but has no index.html to serve."


class AssetNotFound(SiteError):
    title = "File not found"
    default_message = "The requested file does not exist in this project."


class StoreError(HostingError):
    """Filesystem or metadata document failure."""

    status_code = 500
    default_message = "Storage failure"


class UpstreamError(HostingError):
    """A third-party API call failed."""

    status_code = 502
    default_message = "Upstream service failure"


def _error_body(message: object, request_id: str | None) -> dict[str, object]:
    return {"success": False, "error": message, "request_id": request_id}


def render_error(request: Request, exc: HostingError) -> Response:
    """Render a hosting error in the representation its route expects."""
    if isinstance(exc, SiteError):
        return HTMLResponse(render_site_error(exc.title, exc.project, exc.message), exc.status_code)
    if request.url.path in PLAIN_TEXT_PATHS:
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, correlation_id.get()),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(HostingError)
    async def hosting_error_handler(request: Request, exc: HostingError) -> Response:
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                error=type(exc).__name__,
                message=exc.message,
                path=request.url.path,
            )
        else:
            logger.info(
                "Request rejected",
                error=type(exc).__name__,
                message=exc.message,
                path=request.url.path,
            )
        return render_error(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        if request.url.path in PLAIN_TEXT_PATHS:
            return PlainTextResponse("Invalid request", status_code=400)
        content = _error_body("Invalid request", correlation_id.get())
        content["details"] = jsonable_encoder(exc.errors())
        return JSONResponse(status_code=400, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.detail, correlation_id.get()),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal server error", request_id),
        )
