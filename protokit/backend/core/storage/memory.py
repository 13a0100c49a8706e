"""In-memory collection backend.

Records live in an insertion-ordered dict guarded by a lock, so the id
counter stays consistent when FastAPI runs handlers on its thread pool.
Everything is lost when the process exits.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from protokit.backend.core.storage.base import Collection, R, StorageBackend, as_values

logger = logging.getLogger(__name__)


class MemoryCollection(Collection[R]):
    def __init__(self, name: str, model: type[R]) -> None:
        super().__init__(name, model)
        self._records: dict[int, R] = {}
        self._next_id = 1

    def get(self, record_id: int) -> R | None:
        with self._lock:
            return self._records.get(record_id)

    def all(self) -> list[R]:
        with self._lock:
            return list(self._records.values())

    def insert(self, values: Mapping[str, Any] | BaseModel) -> R:
        data = as_values(values)
        with self._lock:
            explicit = data.pop("id", None)
            if explicit is not None:
                record_id = int(explicit)
                if record_id in self._records:
                    raise ValueError(f"{self.name}: id {record_id} already exists")
            else:
                record_id = self._next_id
            record = self._validate(record_id, data)
            self._records[record_id] = record
            self._next_id = max(self._next_id, record_id + 1)
        logger.debug("Inserted %s #%d", self.name, record_id)
        return record

    def update(self, record_id: int, changes: Mapping[str, Any] | BaseModel) -> R | None:
        patch = as_values(changes, exclude_unset=True)
        patch.pop("id", None)
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            record = self._validate(record_id, {**current.model_dump(), **patch})
            self._records[record_id] = record
        logger.debug("Updated %s #%d", self.name, record_id)
        return record

    def delete(self, record_id: int) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None) is not None
        if removed:
            logger.debug("Deleted %s #%d", self.name, record_id)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


class MemoryBackend(StorageBackend):
    """Collections kept in process memory."""

    kind = "memory"

    def __init__(self) -> None:
        self._collections: dict[str, MemoryCollection] = {}

    def collection(self, name: str, model: type[R]) -> MemoryCollection[R]:
        existing = self._collections.get(name)
        if existing is not None:
            if existing.model is not model:
                raise ValueError(f"Collection {name!r} already holds {existing.model.__name__}")
            return existing
        created = MemoryCollection(name, model)
        self._collections[name] = created
        return created
