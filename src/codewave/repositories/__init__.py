from src.codewave.repositories.base import ProjectStore
from src.codewave.repositories.content import ContentStore
from src.codewave.repositories.memory import InMemoryProjectStore
from src.codewave.repositories.project import JsonProjectStore

__all__ = ["ContentStore", "InMemoryProjectStore", "JsonProjectStore", "ProjectStore"]
