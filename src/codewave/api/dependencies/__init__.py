"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Request
from src.codewave.api.dependencies.request import BaseUrl, get_base_url

# Services
from src.codewave.api.dependencies.services import (
    CaptchaServiceDep,
    HttpClientDep,
    ProjectServiceDep,
    SiteServiceDep,
    UploadServiceDep,
    get_captcha_service,
    get_http_client,
    get_project_service,
    get_site_service,
    get_upload_service,
)

# Stores
from src.codewave.api.dependencies.stores import (
    ContentStoreDep,
    ProjectStoreDep,
    SettingsDep,
    get_content_store,
    get_project_store,
)

__all__ = [
    "BaseUrl",
    "CaptchaServiceDep",
    "ContentStoreDep",
    "HttpClientDep",
    "ProjectServiceDep",
    "ProjectStoreDep",
    "SettingsDep",
    "SiteServiceDep",
    "UploadServiceDep",
    "get_base_url",
    "get_captcha_service",
    "get_content_store",
    "get_http_client",
    "get_project_service",
    "get_project_store",
    "get_site_service",
    "get_upload_service",
]
