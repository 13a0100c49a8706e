"""Pydantic schemas for BreathCheck, the breath alcohol screening app."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from protokit.backend.schemas import Record, Schema, utcnow

Level = Literal["safe", "warning", "danger"]

# ── Request models ──────────────────────────────────────────────────────────


class RegisterIn(Schema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    confirm_password: str
    email: str = Field(min_length=1)
    display_name: str | None = None
    subscription_tier: str = "free"
    subscription_expiry: datetime | None = None

    @model_validator(mode="after")
    def _passwords_match(self) -> RegisterIn:
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class LoginIn(Schema):
    username: str
    password: str


class BreathSampleIn(Schema):
    user_id: int | None = None
    audio_sample: str = Field(min_length=1)
    location: str | None = None


class NotifyParentIn(Schema):
    teen_id: str = Field(min_length=1)
    bac: str | float
    status: str


# ── Stored records ──────────────────────────────────────────────────────────


class PublicUser(Record):
    username: str
    email: str
    display_name: str | None = None
    profile_image: str | None = None
    subscription_tier: str = "free"
    subscription_expiry: datetime | None = None
    created_at: datetime = Field(default_factory=utcnow)


class User(PublicUser):
    password: str


class BreathTest(Record):
    user_id: int
    bac: float
    level: Level
    message: str
    location: str | None = None
    audio_sample: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class ParentContact(Record):
    teen_id: str
    email: str | None = None
    phone: str | None = None


class ParentNotification(Record):
    teen_id: str
    contact: str
    message: str
    sent_at: datetime = Field(default_factory=utcnow)


# ── Response models ─────────────────────────────────────────────────────────


class BreathResult(Schema):
    bac: str
    level: Level
    message: str


class Promotion(Schema):
    id: int
    title: str
    url: str


class DeliveryOut(Schema):
    sms: bool
    email: bool


class NotifyParentOut(Schema):
    message: str
    details: DeliveryOut
