"""TikTalk – podcast publishing and listening dashboard."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.tiktalk.routes import router
from protokit.backend.sites.tiktalk.seed import seed
from protokit.backend.sites.tiktalk.storage import TikTalkStorage

site = Site(
    name="tiktalk",
    title="TikTalk",
    description="Podcasts, episodes, follows, play history and RSS feeds",
    storage_class=TikTalkStorage,
    router=router,
    seed=seed,
)

__all__ = ["TikTalkStorage", "site"]
