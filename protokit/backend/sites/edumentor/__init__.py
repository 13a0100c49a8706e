"""EduMentor – courses, lessons, AI instructors and learner progress."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.edumentor.routes import router
from protokit.backend.sites.edumentor.seed import seed
from protokit.backend.sites.edumentor.storage import EduMentorStorage

site = Site(
    name="edumentor",
    title="EduMentor",
    description="Subjects, courses, lessons, instructors and learner progress",
    storage_class=EduMentorStorage,
    router=router,
    seed=seed,
)

__all__ = ["EduMentorStorage", "site"]
