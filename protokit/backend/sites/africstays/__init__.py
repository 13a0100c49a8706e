"""AfricStays – travel listings for unique stays across Africa."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.africstays.routes import router
from protokit.backend.sites.africstays.seed import seed
from protokit.backend.sites.africstays.storage import AfricStaysStorage

site = Site(
    name="africstays",
    title="AfricStays",
    description="Property listings, destinations, search and bookings",
    storage_class=AfricStaysStorage,
    router=router,
    seed=seed,
)

__all__ = ["AfricStaysStorage", "site"]
