"""iMusic – AI music mentors, creative journeys and artist catalogue syncs."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.imusic.routes import router
from protokit.backend.sites.imusic.seed import seed
from protokit.backend.sites.imusic.storage import IMusicStorage

site = Site(
    name="imusic",
    title="iMusic",
    description="Mentors, accounts, creative journeys and artist syncs",
    storage_class=IMusicStorage,
    router=router,
    seed=seed,
)

__all__ = ["IMusicStorage", "site"]
