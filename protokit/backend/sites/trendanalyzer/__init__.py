"""TrendAnalyzer – search trends by category and region, submissions and insights."""

from __future__ import annotations

from protokit.backend.sites import Site
from protokit.backend.sites.trendanalyzer.routes import router
from protokit.backend.sites.trendanalyzer.seed import seed
from protokit.backend.sites.trendanalyzer.storage import TrendAnalyzerStorage

site = Site(
    name="trendanalyzer",
    title="TrendAnalyzer",
    description="Trends by category and region, user submissions, refreshes and insights",
    storage_class=TrendAnalyzerStorage,
    router=router,
    seed=seed,
)

__all__ = ["TrendAnalyzerStorage", "site"]
