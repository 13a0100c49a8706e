"""Nexus project tracker – projects, tasks, reminders and AI work logs."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.projecttracker.routes import router
from protokit.backend.sites.projecttracker.seed import seed
from protokit.backend.sites.projecttracker.storage import ProjectTrackerStorage

site = Site(
    name="projecttracker",
    title="Nexus Tracker",
    description="Projects, tasks, reminders and AI assistant logs",
    storage_class=ProjectTrackerStorage,
    router=router,
    seed=seed,
)

__all__ = ["ProjectTrackerStorage", "site"]
