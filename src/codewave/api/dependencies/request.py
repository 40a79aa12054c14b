"""Request-derived dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from src.codewave.api.dependencies.stores import SettingsDep


def get_base_url(request: Request, settings: SettingsDep) -> str:
    """Scheme and host hosted projects are reachable under.

    PUBLIC_BASE_URL wins when configured; otherwise the request's own scheme
    and Host header are used.
    """
    if settings.public_base_url:
        return settings.public_base_url
    host = request.headers.get("host") or request.url.netloc
    return f"{request.url.scheme}://{host}"


BaseUrl = Annotated[str, Depends(get_base_url)]
