"""Rate limiting for upload endpoints.

Uses slowapi with in-memory storage (per-process). Disabled in the testing
environment.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.codewave.core.config import get_settings
from src.codewave.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Generate rate limit key from client IP only.

    Never key on user-controlled headers: rotating them would create
    unlimited new buckets.
    """
    return get_remote_address(request) or "unknown"


def upload_rate_limit() -> str:
    """Current upload limit in slowapi syntax, e.g. ``"30/minute"``."""
    return get_settings().upload_rate_limit


def create_limiter() -> Limiter:
    """Create rate limiter, disabled in testing environment."""
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    logger.info("Rate limiter using in-memory backend (not distributed)")
    return Limiter(key_func=get_rate_limit_key)


# Note: This reads settings at import time.
limiter = create_limiter()
