"""HomePros Africa – directory of vetted home-service professionals."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.homepros.routes import router
from protokit.backend.sites.homepros.seed import seed
from protokit.backend.sites.homepros.storage import HomeProsStorage

site = Site(
    name="homepros",
    title="HomePros Africa",
    description="Home services, verified professionals, testimonials and contact requests",
    storage_class=HomeProsStorage,
    router=router,
    seed=seed,
)

__all__ = ["HomeProsStorage", "site"]
