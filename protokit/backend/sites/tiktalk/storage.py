"""Storage interface for TikTalk.

Joined shapes (podcast with creator and counts, episode with podcast) are
assembled here from the flat collections.
"""

from __future__ import annotations

import logging
from typing import Any

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.schemas import utcnow
from protokit.backend.sites.tiktalk.schemas import (
    Episode,
    EpisodeIn,
    EpisodePatch,
    EpisodeWithPodcast,
    Follow,
    PlayHistory,
    PlayIn,
    Podcast,
    PodcastAnalytics,
    PodcastCounts,
    PodcastIn,
    PodcastOwner,
    PodcastPatch,
    PodcastWithCreator,
    PodcastWithEpisodes,
    User,
    UserIn,
)

logger = logging.getLogger(__name__)


class TikTalkStorage(SiteStorage):
    collections = {
        "users": User,
        "podcasts": Podcast,
        "episodes": Episode,
        "follows": Follow,
        "play_history": PlayHistory,
    }

    users: Collection[User]
    podcasts: Collection[Podcast]
    episodes: Collection[Episode]
    follows: Collection[Follow]
    play_history: Collection[PlayHistory]

    # ── Users ──────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def upsert_user(self, user_id: int, profile: UserIn | dict[str, Any]) -> User:
        existing = self.users.get(user_id)
        if existing is None:
            values = profile.model_dump() if isinstance(profile, UserIn) else dict(profile)
            return self.users.insert({**values, "id": user_id})
        changes = profile.model_dump(exclude_unset=True) if isinstance(profile, UserIn) else dict(profile)
        return self.users.update(user_id, {**changes, "updated_at": utcnow()})

    # ── Podcasts ───────────────────────────────────────────────────────────

    def create_podcast(self, creator_id: int, podcast: PodcastIn | dict[str, Any]) -> Podcast:
        values = podcast.model_dump() if isinstance(podcast, PodcastIn) else dict(podcast)
        return self.podcasts.insert({**values, "creator_id": creator_id})

    def get_podcast_record(self, podcast_id: int) -> Podcast | None:
        return self.podcasts.get(podcast_id)

    def get_podcast(self, podcast_id: int, viewer_id: int | None = None) -> PodcastWithEpisodes | None:
        """Podcast with its creator, published episodes (newest number first) and follow count."""
        podcast = self.podcasts.get(podcast_id)
        if podcast is None:
            return None
        episodes = self.get_episodes_by_podcast(podcast_id)
        return PodcastWithEpisodes(
            **podcast.model_dump(),
            creator=self.users.get(podcast.creator_id),
            episodes=episodes,
            counts=self._counts(podcast_id),
            is_followed=self.is_following(viewer_id, podcast_id) if viewer_id is not None else None,
        )

    def get_podcasts_by_creator(self, creator_id: int) -> list[PodcastWithCreator]:
        return [self._with_creator(p) for p in self.podcasts.where(creator_id=creator_id)]

    def get_featured_podcasts(self, limit: int = 6) -> list[PodcastWithCreator]:
        return self._ranked(self.podcasts.where(is_published=True))[:limit]

    def search_podcasts(self, query: str) -> list[PodcastWithCreator]:
        needle = query.lower()

        def matches(p: Podcast) -> bool:
            return p.is_published and (
                needle in p.title.lower() or needle in (p.description or "").lower()
            )

        return self._ranked(self.podcasts.filter(matches))

    def get_podcasts_by_category(self, category: str) -> list[PodcastWithCreator]:
        return self._ranked(self.podcasts.where(is_published=True, category=category))

    def update_podcast(self, podcast_id: int, updates: PodcastPatch | dict[str, Any]) -> Podcast | None:
        changes = updates.model_dump(exclude_unset=True) if isinstance(updates, PodcastPatch) else dict(updates)
        return self.podcasts.update(podcast_id, {**changes, "updated_at": utcnow()})

    # ── Episodes ───────────────────────────────────────────────────────────

    def create_episode(self, episode: EpisodeIn | dict[str, Any]) -> Episode:
        return self.episodes.insert(episode)

    def get_episode_record(self, episode_id: int) -> Episode | None:
        return self.episodes.get(episode_id)

    def get_episode(self, episode_id: int) -> EpisodeWithPodcast | None:
        episode = self.episodes.get(episode_id)
        return self._with_podcast(episode) if episode is not None else None

    def get_episodes_by_podcast(self, podcast_id: int) -> list[Episode]:
        published = self.episodes.where(podcast_id=podcast_id, is_published=True)
        return sorted(published, key=lambda e: e.episode_number or 0, reverse=True)

    def update_episode(self, episode_id: int, updates: EpisodePatch | dict[str, Any]) -> Episode | None:
        changes = updates.model_dump(exclude_unset=True) if isinstance(updates, EpisodePatch) else dict(updates)
        return self.episodes.update(episode_id, {**changes, "updated_at": utcnow()})

    def increment_play_count(self, episode_id: int) -> Episode | None:
        return self.episodes.increment(episode_id, "play_count")

    # ── Follows ────────────────────────────────────────────────────────────

    def follow_podcast(self, follower_id: int, podcast_id: int) -> Follow:
        """Follow a podcast; following twice returns the existing follow."""
        follow, _ = self.follows.get_or_insert({"follower_id": follower_id, "podcast_id": podcast_id})
        return follow

    def unfollow_podcast(self, follower_id: int, podcast_id: int) -> bool:
        removed = False
        for follow in self.follows.where(follower_id=follower_id, podcast_id=podcast_id):
            removed = self.follows.delete(follow.id) or removed
        return removed

    def is_following(self, follower_id: int, podcast_id: int) -> bool:
        return self.follows.count(follower_id=follower_id, podcast_id=podcast_id) > 0

    def get_followed_podcasts(self, user_id: int) -> list[PodcastWithCreator]:
        recent_first = sorted(
            self.follows.where(follower_id=user_id),
            key=lambda f: (f.created_at, f.id),
            reverse=True,
        )
        followed = []
        for follow in recent_first:
            podcast = self.podcasts.get(follow.podcast_id)
            if podcast is not None:
                followed.append(self._with_creator(podcast))
        return followed

    # ── Play history ───────────────────────────────────────────────────────

    def record_play(self, user_id: int, play: PlayIn | dict[str, Any]) -> PlayHistory:
        """Insert or refresh the (user, episode) play record."""
        values = play.model_dump() if isinstance(play, PlayIn) else dict(play)
        return self.play_history.upsert(
            {"user_id": user_id, "episode_id": values["episode_id"]},
            {"progress": values.get("progress", 0), "completed": values.get("completed", False),
             "played_at": utcnow()},
        )

    def get_play_history(self, user_id: int, limit: int = 20) -> list[EpisodeWithPodcast]:
        plays = sorted(
            self.play_history.where(user_id=user_id),
            key=lambda p: (p.played_at, p.id),
            reverse=True,
        )
        history = []
        for play in plays[:limit]:
            episode = self.episodes.get(play.episode_id)
            if episode is not None:
                history.append(self._with_podcast(episode))
        return history

    # ── Analytics ──────────────────────────────────────────────────────────

    def get_podcast_analytics(self, podcast_id: int) -> PodcastAnalytics:
        episodes = self.episodes.where(podcast_id=podcast_id)
        return PodcastAnalytics(
            total_plays=sum(e.play_count for e in episodes),
            total_follows=self.follows.count(podcast_id=podcast_id),
            episode_count=len(episodes),
        )

    # ── Helpers ────────────────────────────────────────────────────────────

    def _counts(self, podcast_id: int) -> PodcastCounts:
        return PodcastCounts(
            episodes=self.episodes.count(podcast_id=podcast_id),
            follows=self.follows.count(podcast_id=podcast_id),
        )

    def _with_creator(self, podcast: Podcast) -> PodcastWithCreator:
        return PodcastWithCreator(
            **podcast.model_dump(),
            creator=self.users.get(podcast.creator_id),
            counts=self._counts(podcast.id),
        )

    def _ranked(self, podcasts: list[Podcast]) -> list[PodcastWithCreator]:
        """Most-followed first; ties keep id order."""
        enriched = [self._with_creator(p) for p in podcasts]
        return sorted(enriched, key=lambda p: p.counts.follows, reverse=True)

    def _with_podcast(self, episode: Episode) -> EpisodeWithPodcast:
        podcast = self.podcasts.get(episode.podcast_id)
        owner = None
        if podcast is not None:
            owner = PodcastOwner(**podcast.model_dump(), creator=self.users.get(podcast.creator_id))
        return EpisodeWithPodcast(**episode.model_dump(), podcast=owner)
