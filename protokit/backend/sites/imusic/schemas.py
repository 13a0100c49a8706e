"""Pydantic schemas for the iMusic mentorship platform."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from protokit.backend.schemas import Record, Schema, utcnow

# ── Request models ──────────────────────────────────────────────────────────


class RegisterIn(Schema):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)
    email: str | None = None
    profile_image: str | None = None


class LoginIn(Schema):
    username: str
    password: str


class ForgotPasswordIn(Schema):
    email: str = Field(min_length=1)


class ResetPasswordIn(Schema):
    token: str = Field(min_length=1)
    password: str = Field(min_length=6)


class AssignMentorIn(Schema):
    mentor_id: int | None = None


class ArtistSyncIn(Schema):
    source: str = Field(min_length=1)
    source_id: str = Field(min_length=1)
    sync_interval: str = "daily"
    priority: int = Field(default=5, ge=1, le=10)


# ── Stored records ──────────────────────────────────────────────────────────


class PublicUser(Record):
    """Everything about a user that may leave the server."""

    username: str
    name: str
    email: str | None = None
    profile_image: str | None = None
    subscription_status: str = "free"
    created_at: datetime = Field(default_factory=utcnow)


class User(PublicUser):
    password: str
    reset_token: str | None = None
    reset_token_expires_at: datetime | None = None


class Mentor(Record):
    name: str
    inspired_by: str
    profile_image: str
    genre: str
    genres: list[str] = Field(default_factory=list)
    region: str | None = None
    country: str | None = None
    bio: str
    description: str
    artist_type: str | None = None
    mentor_available: bool = True
    clone_status: str = "AI"
    personality_profile: dict[str, Any] | None = None
    specialties: list[str] = Field(default_factory=list)
    years_active: str | None = None
    spotify_id: str | None = None
    genius_id: str | None = None
    media_url: str | None = None
    sample_prompt: str | None = None
    last_updated: datetime | None = None
    auto_updated: bool = False


class UserMentor(Record):
    user_id: int
    mentor_id: int
    progress: int = 0
    current_message: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class JourneyStep(Record):
    title: str
    description: str
    status: str = "locked"
    order: int
    icon: str


class UserJourneyStep(Record):
    user_id: int
    step_id: int
    status: str = "locked"
    progress: int = 0
    updated_at: datetime = Field(default_factory=utcnow)


class InspirationItem(Record):
    mentor_id: int
    type: str
    title: str
    content: str
    image_url: str | None = None
    audio_url: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class Collaboration(Record):
    title: str
    description: str
    created_by: int
    looking_for: str
    genre: str
    tags: str
    image_url: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class Challenge(Record):
    title: str
    description: str
    entries: int = 0
    days_left: int
    prize: str
    is_featured: bool = False
    audio_url: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class ArtistSync(ArtistSyncIn, Record):
    mentor_id: int | None = None
    last_synced: datetime = Field(default_factory=utcnow)
    sync_status: str = "pending"
    raw_data: str | None = None
    sync_error: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


# ── Response models ─────────────────────────────────────────────────────────


class UserMentorOut(UserMentor):
    mentor: Mentor


class UserJourneyStepOut(UserJourneyStep):
    step: JourneyStep
