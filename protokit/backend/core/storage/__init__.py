"""Storage package – collections over in-memory or SQL backends."""

from __future__ import annotations

from protokit.backend.core.storage.base import Collection, SiteStorage, StorageBackend
from protokit.backend.core.storage.memory import MemoryBackend, MemoryCollection
from protokit.backend.core.storage.sql import SqlBackend, SqlCollection

BACKENDS = ("memory", "sql")


def create_backend(kind: str = "memory", url: str | None = None) -> StorageBackend:
    """
    Build a storage backend from configuration values.

    Args:
        kind: ``"memory"`` or ``"sql"``
        url: SQLAlchemy URL, required for the SQL backend

    Raises:
        ValueError: If the kind is unknown or the URL is missing
    """
    if kind == "memory":
        return MemoryBackend()
    if kind == "sql":
        if not url:
            raise ValueError("The sql storage backend needs a database URL")
        return SqlBackend(url)
    raise ValueError(f"Unknown storage backend {kind!r} (expected one of {', '.join(BACKENDS)})")


__all__ = [
    "BACKENDS",
    "Collection",
    "MemoryBackend",
    "MemoryCollection",
    "SiteStorage",
    "SqlBackend",
    "SqlCollection",
    "StorageBackend",
    "create_backend",
]
