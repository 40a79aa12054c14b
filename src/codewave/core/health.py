"""Health check and metrics endpoints."""

import os
import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator

from src.codewave.core.config import get_settings
from src.codewave.core.exceptions import StoreError
from src.codewave.repositories import JsonProjectStore


def check_storage() -> dict[str, Any]:
    """Report whether the sites directory and the record store are usable."""
    settings = get_settings()
    health_status: dict[str, Any] = {
        "status": "healthy",
        "sites_dir": "unknown",
        "project_store": "unknown",
        "timestamp": time.time(),
    }

    sites_dir = settings.sites_dir
    if sites_dir.is_dir() and os.access(sites_dir, os.W_OK):
        health_status["sites_dir"] = "healthy"
        health_status["sites_count"] = sum(1 for p in sites_dir.iterdir() if p.is_dir())
    else:
        health_status["sites_dir"] = "unhealthy: missing or not writable"
        health_status["status"] = "unhealthy"

    try:
        health_status["projects_count"] = len(JsonProjectStore(settings.projects_file).list_all())
        health_status["project_store"] = "healthy"
    except StoreError as e:
        health_status["project_store"] = f"unhealthy: {e.message}"
        health_status["status"] = "unhealthy"

    return health_status


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", tags=["health"])
    def health() -> JSONResponse:
        """Health check of the storage backing the service."""
        health_status = check_storage()
        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)


def setup_metrics(app: FastAPI) -> None:
    """Configure Prometheus metrics with optional API key protection."""
    settings = get_settings()
    instrumentator = Instrumentator(excluded_handlers=["/metrics", "/health"]).instrument(app)

    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(
            api_key: str | None = Depends(api_key_header),
        ) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid or missing metrics API key",
                )

        instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
    else:
        instrumentator.expose(app, endpoint="/metrics")
