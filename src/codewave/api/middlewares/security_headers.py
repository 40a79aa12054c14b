"""Security headers middleware (Helmet-style)."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.codewave.core.validators import RESERVED_PROJECT_NAMES

# File editor responses carry project source and must not be cached
_NO_CACHE_PREFIX = "/api/project/"


def is_hosted_site_path(path: str) -> bool:
    """True for paths served from a hosted project rather than the service."""
    segment = path.lstrip("/").split("/", 1)[0]
    return bool(segment) and segment not in RESERVED_PROJECT_NAMES and segment != "openapi.json"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses (similar to Helmet.js).

    Hosted sites are user content: they get no Content-Security-Policy and
    may be framed by the same origin.
    """

    # CSP for development with Swagger UI: requires inline scripts and CDN assets
    DEFAULT_CSP = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
        "img-src 'self' data: cdn.jsdelivr.net https://fastapi.tiangolo.com; "
        "frame-ancestors 'none'"
    )

    def __init__(
        self,
        app: ASGIApp,
        content_security_policy: str | None = None,
        x_content_type_options: str = "nosniff",
        x_frame_options: str = "DENY",
        referrer_policy: str = "strict-origin-when-cross-origin",
    ):
        super().__init__(app)
        self.headers: dict[str, str] = {}
        self.site_headers: dict[str, str] = {}
        csp = content_security_policy if content_security_policy is not None else self.DEFAULT_CSP
        if csp:
            self.headers["Content-Security-Policy"] = csp
        if x_content_type_options:
            self.headers["X-Content-Type-Options"] = x_content_type_options
            self.site_headers["X-Content-Type-Options"] = x_content_type_options
        if x_frame_options:
            self.headers["X-Frame-Options"] = x_frame_options
            self.site_headers["X-Frame-Options"] = "SAMEORIGIN"
        if referrer_policy:
            self.headers["Referrer-Policy"] = referrer_policy
            self.site_headers["Referrer-Policy"] = referrer_policy

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        path = request.url.path

        headers = self.site_headers if is_hosted_site_path(path) else self.headers
        for header, value in headers.items():
            response.headers[header] = value

        if path.startswith(_NO_CACHE_PREFIX):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
            response.headers["Pragma"] = "no-cache"

        return response
