"""Project record store backed by a single JSON document."""

import json
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.codewave.core.exceptions import StoreError
from src.codewave.core.logging import get_logger
from src.codewave.repositories.base import ProjectStore
from src.codewave.schemas.project import ProjectRecord

logger = get_logger(__name__)

_records_adapter = TypeAdapter(list[ProjectRecord])


class JsonProjectStore(ProjectStore):
    """Project records kept as a JSON array in one file.

    Every mutation reads the entire document, changes it in memory and
    writes the entire document back through a temporary file, so readers
    always see a complete array.
    """

    def __init__(self, path: Path):
        self.path = path

    def list_all(self) -> list[ProjectRecord]:
        return self._load()

    def upsert(self, record: ProjectRecord) -> None:
        records = self._upserted(self._load(), record)
        self._save(records)
        logger.info("Project record saved", project=record.name, file_count=len(record.files))

    def delete(self, name: str) -> bool:
        records = self._load()
        remaining = [r for r in records if r.name != name]
        if len(remaining) == len(records):
            return False
        self._save(remaining)
        logger.info("Project record deleted", project=name)
        return True

    def _load(self) -> list[ProjectRecord]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as e:
            raise StoreError(f"Project store {self.path} is not valid UTF-8") from e
        except OSError as e:
            raise StoreError(f"Cannot read project store: {e.strerror}") from e

        try:
            return _records_adapter.validate_python(json.loads(raw))
        except json.JSONDecodeError as e:
            raise StoreError(f"Project store {self.path} is not valid JSON: {e.msg}") from e
        except PydanticValidationError as e:
            raise StoreError(f"Project store {self.path} holds malformed records") from e

    def _save(self, records: list[ProjectRecord]) -> None:
        payload = json.dumps(
            [r.model_dump(mode="json") for r in records],
            indent=2,
            ensure_ascii=False,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(f"Cannot write project store: {e.strerror}") from e
