"""Base interface for the project record store."""

from abc import ABC, abstractmethod

from src.codewave.schemas.project import ProjectRecord


class ProjectStore(ABC):
    """Collection of project records keyed by name.

    Implementations persist the whole collection on every mutation and take
    no locks: overlapping writers are last-write-wins. Swapping in a
    transactional backend only needs a new subclass.
    """

    @abstractmethod
    def list_all(self) -> list[ProjectRecord]:
        """Return all records, or an empty list when nothing is stored yet."""

    @abstractmethod
    def upsert(self, record: ProjectRecord) -> None:
        """Replace the record with the same name, or append it."""

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Remove the record with this name. Returns False if it was absent."""

    def get(self, name: str) -> ProjectRecord | None:
        """Get a record by name."""
        for record in self.list_all():
            if record.name == name:
                return record
        return None

    @staticmethod
    def _upserted(records: list[ProjectRecord], record: ProjectRecord) -> list[ProjectRecord]:
        for index, existing in enumerate(records):
            if existing.name == record.name:
                records[index] = record
                return records
        records.append(record)
        return records
