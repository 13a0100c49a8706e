"""Afriquisine – African restaurants, menus, reviews, reservations and food stories."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.afriquisine.routes import router
from protokit.backend.sites.afriquisine.seed import seed
from protokit.backend.sites.afriquisine.storage import AfriquisineStorage

site = Site(
    name="afriquisine",
    title="Afriquisine",
    description="Restaurants, menus, reviews, reservations, cultural insights and food origin stories",
    storage_class=AfriquisineStorage,
    router=router,
    seed=seed,
)

__all__ = ["AfriquisineStorage", "site"]
