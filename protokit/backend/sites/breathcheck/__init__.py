"""BreathCheck – breath alcohol screening with history and parent alerts."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.breathcheck.routes import router
from protokit.backend.sites.breathcheck.seed import seed
from protokit.backend.sites.breathcheck.storage import BreathCheckStorage

site = Site(
    name="breathcheck",
    title="BreathCheck",
    description="Accounts, simulated breath scans, test history and parent alerts",
    storage_class=BreathCheckStorage,
    router=router,
    seed=seed,
)

__all__ = ["BreathCheckStorage", "site"]
