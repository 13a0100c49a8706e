"""Pydantic base models shared by every site."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from protokit import __version__


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the stored representation)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Schema(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_validator("*", mode="after")
    @classmethod
    def _naive_utc(cls, value: Any) -> Any:
        if isinstance(value, datetime) and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class Record(Schema):
    """A stored entity; ``id`` is assigned by the collection."""

    id: int


# ── Response models ─────────────────────────────────────────────────────────


class HealthOut(BaseModel):
    status: str = "ok"
    site: str
    storage: str
    version: str = __version__


class MessageOut(BaseModel):
    message: str
