"""Pydantic schemas for the TikTalk podcast dashboard."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from protokit.backend.schemas import Record, Schema, utcnow

# ── Request models ──────────────────────────────────────────────────────────


class UserIn(Schema):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class PodcastIn(Schema):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    cover_image_url: str | None = None
    category: str | None = Field(default=None, max_length=100)
    is_published: bool = False


class PodcastPatch(Schema):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    cover_image_url: str | None = None
    category: str | None = Field(default=None, max_length=100)
    is_published: bool | None = None


class EpisodeIn(Schema):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    audio_url: str = Field(min_length=1)
    duration: int | None = Field(default=None, ge=0)
    episode_number: int | None = None
    cover_image_url: str | None = None
    podcast_id: int
    is_published: bool = False
    published_at: datetime | None = None


class EpisodePatch(Schema):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    audio_url: str | None = None
    duration: int | None = Field(default=None, ge=0)
    episode_number: int | None = None
    cover_image_url: str | None = None
    is_published: bool | None = None
    published_at: datetime | None = None


class FollowIn(Schema):
    podcast_id: int


class PlayIn(Schema):
    episode_id: int
    progress: int = Field(default=0, ge=0)
    completed: bool = False


# ── Stored records ──────────────────────────────────────────────────────────


class User(UserIn, Record):
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Podcast(PodcastIn, Record):
    creator_id: int
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Episode(EpisodeIn, Record):
    play_count: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Follow(FollowIn, Record):
    follower_id: int
    created_at: datetime = Field(default_factory=utcnow)


class PlayHistory(PlayIn, Record):
    user_id: int
    played_at: datetime = Field(default_factory=utcnow)


# ── Response models ─────────────────────────────────────────────────────────


class PodcastCounts(Schema):
    episodes: int = 0
    follows: int = 0


class PodcastWithCreator(Podcast):
    creator: User | None = None
    counts: PodcastCounts = Field(default_factory=PodcastCounts, alias="_count")


class PodcastWithEpisodes(Podcast):
    creator: User | None = None
    episodes: list[Episode] = Field(default_factory=list)
    counts: PodcastCounts = Field(default_factory=PodcastCounts, alias="_count")
    is_followed: bool | None = None


class PodcastOwner(Podcast):
    creator: User | None = None


class EpisodeWithPodcast(Episode):
    podcast: PodcastOwner | None = None


class FollowStatus(Schema):
    is_following: bool


class PodcastAnalytics(Schema):
    total_plays: int
    total_follows: int
    episode_count: int
