from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.codewave.api.middlewares import setup_middlewares
from src.codewave.api.routes.router import api_router, service_router, site_router
from src.codewave.core.config import get_settings
from src.codewave.core.exceptions import setup_exception_handlers
from src.codewave.core.health import setup_health_endpoint, setup_metrics
from src.codewave.core.logging import get_logger, setup_logging
from src.codewave.core.rate_limit import limiter

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", storage_dir=str(settings.storage_dir))

    settings.sites_dir.mkdir(parents=True, exist_ok=True)
    app.state.http_client = httpx.AsyncClient(timeout=settings.upstream_timeout_seconds)

    yield

    logger.info("Closing connections...")
    await app.state.http_client.aclose()
    app.state.http_client = None
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "upload", "description": "Upload static files for a project"},
    {"name": "projects", "description": "Project metadata records"},
    {"name": "files", "description": "Read and overwrite files of a hosted project"},
    {"name": "captcha", "description": "reCAPTCHA verification proxy"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Static mini-site hosting with a JSON project record store",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    setup_middlewares(app, settings)

    app.include_router(api_router)
    app.include_router(service_router)
    setup_health_endpoint(app)
    setup_metrics(app)

    # Hosted sites own every remaining path
    app.include_router(site_router)

    return app


app = create_app()
