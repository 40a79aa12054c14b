"""Store factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.codewave.core.config import Settings, get_settings
from src.codewave.repositories import ContentStore, JsonProjectStore, ProjectStore

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_project_store(settings: SettingsDep) -> ProjectStore:
    """Get the JSON-file project record store."""
    return JsonProjectStore(settings.projects_file)


def get_content_store(settings: SettingsDep) -> ContentStore:
    """Get the filesystem content store."""
    return ContentStore(settings.sites_dir)


ProjectStoreDep = Annotated[ProjectStore, Depends(get_project_store)]
ContentStoreDep = Annotated[ContentStore, Depends(get_content_store)]
