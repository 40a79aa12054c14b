"""In-memory project record store."""

from src.codewave.repositories.base import ProjectStore
from src.codewave.schemas.project import ProjectRecord


class InMemoryProjectStore(ProjectStore):
    """Process-local store, used in tests and for throwaway instances."""

    def __init__(self, records: list[ProjectRecord] | None = None):
        self._records: list[ProjectRecord] = [r.model_copy(deep=True) for r in records or []]

    def list_all(self) -> list[ProjectRecord]:
        return [r.model_copy(deep=True) for r in self._records]

    def upsert(self, record: ProjectRecord) -> None:
        self._records = self._upserted(self._records, record.model_copy(deep=True))

    def delete(self, name: str) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.name != name]
        return len(self._records) != before
