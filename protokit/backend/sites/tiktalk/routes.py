"""TikTalk API route handlers.

The caller is identified by the ``X-User-Id`` header; routes that need a
caller answer 401 without it.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response

from protokit.backend.api.deps import current_user_id, optional_user_id, site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.schemas import MessageOut
from protokit.backend.sites.tiktalk.feed import render_rss
from protokit.backend.sites.tiktalk.schemas import (
    Episode,
    EpisodeIn,
    EpisodePatch,
    EpisodeWithPodcast,
    Follow,
    FollowIn,
    FollowStatus,
    PlayIn,
    Podcast,
    PodcastAnalytics,
    PodcastIn,
    PodcastPatch,
    PodcastWithCreator,
    PodcastWithEpisodes,
    User,
    UserIn,
)
from protokit.backend.sites.tiktalk.storage import TikTalkStorage

logger = logging.getLogger(__name__)

router = APIRouter()


def _forbidden() -> HTTPException:
    return HTTPException(status_code=403, detail="Forbidden")


def _owned_podcast(storage: TikTalkStorage, podcast_id: int, user_id: int) -> Podcast:
    podcast = storage.get_podcast_record(podcast_id)
    if podcast is None or podcast.creator_id != user_id:
        raise _forbidden()
    return podcast


# ── Auth ───────────────────────────────────────────────────────────────────


@router.get("/auth/user", response_model=User)
def get_current_user(
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> User:
    with failure_message("Failed to fetch user"):
        user = storage.get_user(user_id)
        if user is None:
            raise not_found("User")
        return user


@router.put("/auth/user", response_model=User)
def upsert_current_user(
    profile: UserIn,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> User:
    with failure_message("Failed to update user"):
        return storage.upsert_user(user_id, profile)


# ── Podcasts ───────────────────────────────────────────────────────────────


@router.get("/podcasts/featured", response_model=list[PodcastWithCreator])
def featured_podcasts(
    limit: int = Query(default=6, ge=1, le=100),
    storage: TikTalkStorage = Depends(site_storage),
) -> list[PodcastWithCreator]:
    with failure_message("Failed to fetch featured podcasts"):
        return storage.get_featured_podcasts(limit)


@router.get("/podcasts/search", response_model=list[PodcastWithCreator])
def search_podcasts(
    q: str | None = None,
    storage: TikTalkStorage = Depends(site_storage),
) -> list[PodcastWithCreator]:
    if not q:
        raise HTTPException(status_code=400, detail="Search query is required")
    with failure_message("Failed to search podcasts"):
        return storage.search_podcasts(q)


@router.get("/podcasts/category/{category}", response_model=list[PodcastWithCreator])
def podcasts_by_category(category: str, storage: TikTalkStorage = Depends(site_storage)) -> list[PodcastWithCreator]:
    with failure_message("Failed to fetch podcasts by category"):
        return storage.get_podcasts_by_category(category)


@router.get("/podcasts/creator/{creator_id}", response_model=list[PodcastWithCreator])
def creator_podcasts(
    creator_id: int,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> list[PodcastWithCreator]:
    """Only creators may list their own podcasts (unpublished included)."""
    if creator_id != user_id:
        raise _forbidden()
    with failure_message("Failed to fetch creator podcasts"):
        return storage.get_podcasts_by_creator(creator_id)


@router.get("/podcasts/{podcast_id}", response_model=PodcastWithEpisodes)
def get_podcast(
    podcast_id: int,
    viewer_id: int | None = Depends(optional_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> PodcastWithEpisodes:
    with failure_message("Failed to fetch podcast"):
        podcast = storage.get_podcast(podcast_id, viewer_id)
        if podcast is None:
            raise not_found("Podcast")
        return podcast


@router.post("/podcasts", response_model=Podcast, status_code=201)
def create_podcast(
    podcast: PodcastIn,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> Podcast:
    with failure_message("Failed to create podcast"):
        return storage.create_podcast(user_id, podcast)


@router.put("/podcasts/{podcast_id}", response_model=Podcast)
def update_podcast(
    podcast_id: int,
    updates: PodcastPatch,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> Podcast:
    with failure_message("Failed to update podcast"):
        _owned_podcast(storage, podcast_id, user_id)
        return storage.update_podcast(podcast_id, updates)


@router.get("/podcasts/{podcast_id}/analytics", response_model=PodcastAnalytics)
def podcast_analytics(
    podcast_id: int,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> PodcastAnalytics:
    with failure_message("Failed to fetch analytics"):
        _owned_podcast(storage, podcast_id, user_id)
        return storage.get_podcast_analytics(podcast_id)


@router.get("/podcasts/{podcast_id}/rss", response_class=Response)
def podcast_rss(podcast_id: int, request: Request, storage: TikTalkStorage = Depends(site_storage)) -> Response:
    with failure_message("Failed to generate RSS feed"):
        podcast = storage.get_podcast(podcast_id)
        if podcast is None:
            raise not_found("Podcast")
        base_url = str(request.base_url).rstrip("/")
        return Response(content=render_rss(podcast, base_url), media_type="application/rss+xml")


# ── Episodes ───────────────────────────────────────────────────────────────


@router.get("/episodes/{episode_id}", response_model=EpisodeWithPodcast)
def get_episode(episode_id: int, storage: TikTalkStorage = Depends(site_storage)) -> EpisodeWithPodcast:
    with failure_message("Failed to fetch episode"):
        episode = storage.get_episode(episode_id)
        if episode is None:
            raise not_found("Episode")
        return episode


@router.post("/episodes", response_model=Episode, status_code=201)
def create_episode(
    episode: EpisodeIn,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> Episode:
    with failure_message("Failed to create episode"):
        _owned_podcast(storage, episode.podcast_id, user_id)
        return storage.create_episode(episode)


@router.put("/episodes/{episode_id}", response_model=Episode)
def update_episode(
    episode_id: int,
    updates: EpisodePatch,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> Episode:
    with failure_message("Failed to update episode"):
        episode = storage.get_episode_record(episode_id)
        if episode is None:
            raise _forbidden()
        _owned_podcast(storage, episode.podcast_id, user_id)
        return storage.update_episode(episode_id, updates)


@router.post("/episodes/{episode_id}/play", response_model=MessageOut)
def play_episode(episode_id: int, storage: TikTalkStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to increment play count"):
        if storage.increment_play_count(episode_id) is None:
            raise not_found("Episode")
        return MessageOut(message="Play count incremented")


# ── Follows ────────────────────────────────────────────────────────────────


@router.post("/follows", response_model=Follow, status_code=201)
def follow_podcast(
    follow: FollowIn,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> Follow:
    with failure_message("Failed to follow podcast"):
        if storage.get_podcast_record(follow.podcast_id) is None:
            raise not_found("Podcast")
        return storage.follow_podcast(user_id, follow.podcast_id)


@router.delete("/follows/{podcast_id}", response_model=MessageOut)
def unfollow_podcast(
    podcast_id: int,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> MessageOut:
    with failure_message("Failed to unfollow podcast"):
        storage.unfollow_podcast(user_id, podcast_id)
        return MessageOut(message="Unfollowed successfully")


@router.get("/follows", response_model=list[PodcastWithCreator])
def followed_podcasts(
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> list[PodcastWithCreator]:
    with failure_message("Failed to fetch followed podcasts"):
        return storage.get_followed_podcasts(user_id)


@router.get("/follows/{podcast_id}/status", response_model=FollowStatus)
def follow_status(
    podcast_id: int,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> FollowStatus:
    with failure_message("Failed to check follow status"):
        return FollowStatus(is_following=storage.is_following(user_id, podcast_id))


# ── Play history ───────────────────────────────────────────────────────────


@router.post("/play-history", response_model=MessageOut)
def record_play(
    play: PlayIn,
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> MessageOut:
    with failure_message("Failed to record play"):
        if storage.get_episode_record(play.episode_id) is None:
            raise not_found("Episode")
        storage.record_play(user_id, play)
        return MessageOut(message="Play recorded")


@router.get("/play-history", response_model=list[EpisodeWithPodcast])
def play_history(
    limit: int = Query(default=20, ge=1, le=200),
    user_id: int = Depends(current_user_id),
    storage: TikTalkStorage = Depends(site_storage),
) -> list[EpisodeWithPodcast]:
    with failure_message("Failed to fetch play history"):
        return storage.get_play_history(user_id, limit)
