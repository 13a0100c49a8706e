"""Schema package – re-exports all public symbols for convenient imports."""

from __future__ import annotations

from protokit.backend.schemas.common import HealthOut, MessageOut, Record, Schema, utcnow

__all__ = [
    "HealthOut",
    "MessageOut",
    "Record",
    "Schema",
    "utcnow",
]
