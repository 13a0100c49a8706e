"""Storage abstractions shared by every site.

A *collection* holds the records of one entity (``users``, ``properties``,
``episodes``…) and exposes the handful of operations the route handlers
need: lookup by id, equality filters, insert, update and delete.  A
*backend* creates collections; the in-memory and SQL backends are
interchangeable so a site's storage class is written only once.

Ids are integers assigned per collection, starting at 1, strictly
increasing in insertion order and never reused after a delete.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class Collection(ABC, Generic[R]):
    """Records of a single entity type, keyed by integer id."""

    def __init__(self, name: str, model: type[R]) -> None:
        if "id" not in model.model_fields:
            raise TypeError(f"Record model {model.__name__} has no 'id' field")
        self.name = name
        self.model = model
        # Serialises the compound operations below within one process.
        self._lock = threading.RLock()

    # ── Primitive operations (backend specific) ────────────────────────────

    @abstractmethod
    def get(self, record_id: int) -> R | None:
        """Return the record with ``record_id`` or ``None``."""

    @abstractmethod
    def all(self) -> list[R]:
        """Return every record in id order."""

    @abstractmethod
    def insert(self, values: Mapping[str, Any] | BaseModel) -> R:
        """
        Validate ``values``, assign an id and store the record.

        An explicit ``id`` in ``values`` is honoured when unused.

        Raises:
            ValueError: If an explicit id is already taken
            pydantic.ValidationError: If the values do not form a valid record
        """

    @abstractmethod
    def update(self, record_id: int, changes: Mapping[str, Any] | BaseModel) -> R | None:
        """Merge ``changes`` into a record; ``None`` if it does not exist."""

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        """Remove a record; ``False`` if it did not exist."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every record.  The id counter is not reset."""

    # ── Derived queries ────────────────────────────────────────────────────

    def where(self, **criteria: Any) -> list[R]:
        """Records whose fields equal every given value, in id order."""
        self._check_fields(criteria)
        return [r for r in self.all() if _matches(r, criteria)]

    def first(self, **criteria: Any) -> R | None:
        matches = self.where(**criteria)
        return matches[0] if matches else None

    def count(self, **criteria: Any) -> int:
        return len(self.where(**criteria))

    def filter(self, predicate: Callable[[R], bool]) -> list[R]:
        """Records for which ``predicate`` is true, in id order."""
        return [r for r in self.all() if predicate(r)]

    def insert_many(self, rows: Iterable[Mapping[str, Any] | BaseModel]) -> list[R]:
        return [self.insert(row) for row in rows]

    # ── Compound operations ────────────────────────────────────────────────

    def increment(self, record_id: int, field: str, amount: int = 1) -> R | None:
        """Add ``amount`` to a numeric field as one step; ``None`` if the record is missing."""
        self._check_fields([field])
        with self._lock:
            current = self.get(record_id)
            if current is None:
                return None
            return self.update(record_id, {field: getattr(current, field) + amount})

    def get_or_insert(
        self, match: Mapping[str, Any], defaults: Mapping[str, Any] | None = None
    ) -> tuple[R, bool]:
        """
        Return the first record matching ``match``, inserting one if none does.

        Args:
            match: Field values identifying the record
            defaults: Extra values used only when a record is inserted

        Returns:
            The record and whether it was created
        """
        with self._lock:
            existing = self.first(**match)
            if existing is not None:
                return existing, False
            return self.insert({**(defaults or {}), **match}), True

    def upsert(self, match: Mapping[str, Any], values: Mapping[str, Any]) -> R:
        """Update the first record matching ``match`` with ``values``, or insert both."""
        with self._lock:
            existing = self.first(**match)
            if existing is None:
                return self.insert({**values, **match})
            return self.update(existing.id, values)

    # ── Helpers ────────────────────────────────────────────────────────────

    def _check_fields(self, names: Iterable[str]) -> None:
        unknown = [n for n in names if n not in self.model.model_fields]
        if unknown:
            raise ValueError(f"Unknown field(s) for {self.name}: {', '.join(unknown)}")

    def _validate(self, record_id: int, values: Mapping[str, Any]) -> R:
        data = dict(values)
        data["id"] = record_id
        return self.model.model_validate(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.model.__name__})"


def as_values(values: Mapping[str, Any] | BaseModel, *, exclude_unset: bool = False) -> dict[str, Any]:
    """Turn a request model or mapping into a plain ``field -> value`` dict."""
    if isinstance(values, BaseModel):
        return values.model_dump(exclude_unset=exclude_unset)
    return dict(values)


def _matches(record: BaseModel, criteria: Mapping[str, Any]) -> bool:
    return all(getattr(record, key) == value for key, value in criteria.items())


class StorageBackend(ABC):
    """Factory for collections of one storage kind."""

    kind: ClassVar[str]

    @abstractmethod
    def collection(self, name: str, model: type[R]) -> Collection[R]:
        """Create (or reopen) the collection ``name`` holding ``model`` records."""

    def close(self) -> None:
        """Release backend resources."""


class SiteStorage:
    """Base class for a site's storage interface.

    Subclasses list their collections in ``collections``; each one becomes an
    attribute of the same name backed by ``backend``.
    """

    collections: ClassVar[dict[str, type[BaseModel]]] = {}

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend
        for name, model in self.collections.items():
            setattr(self, name, backend.collection(name, model))
        logger.debug("%s ready on %s backend", type(self).__name__, backend.kind)

    def collection(self, name: str) -> Collection:
        if name not in self.collections:
            raise KeyError(name)
        return getattr(self, name)

    def is_empty(self) -> bool:
        return all(self.collection(name).count() == 0 for name in self.collections)

    def counts(self) -> dict[str, int]:
        return {name: self.collection(name).count() for name in self.collections}
