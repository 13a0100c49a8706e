"""Storage interface for TrendAnalyzer."""

from __future__ import annotations

import logging
import random

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.sites.trendanalyzer.schemas import (
    Insight,
    InsightsOut,
    MetricsOut,
    Trend,
    TrendSubmission,
    TrendSubmissionIn,
)

logger = logging.getLogger(__name__)

# Values given to a trend created from a user submission.
SUBMITTED_SEARCHES = 50_000
SUBMITTED_GROWTH = "+50%"
SUBMITTED_COUNTRIES = 5

MIN_GROWTH, MAX_GROWTH = -50, 500
MIN_SEARCHES = 10_000
TRENDING_GROWTH = 50


def parse_growth(growth: str) -> int:
    """``"+342%"`` -> 342, ``"-23%"`` -> -23."""
    return int(growth.strip().rstrip("%"))


def format_growth(value: float) -> str:
    return f"{value:+.0f}%"


class TrendAnalyzerStorage(SiteStorage):
    collections = {
        "trends": Trend,
        "trend_submissions": TrendSubmission,
        "ai_insights": Insight,
    }

    trends: Collection[Trend]
    trend_submissions: Collection[TrendSubmission]
    ai_insights: Collection[Insight]

    # ── Trends ─────────────────────────────────────────────────────────────

    def get_trend(self, trend_id: int) -> Trend | None:
        return self.trends.get(trend_id)

    def get_trends(self, category: str | None = None, region: str | None = None) -> list[Trend]:
        """
        Active trends, filtered by category or else by region.

        ``category="all"`` and ``region="global"`` mean no filter, and a
        category filter wins over a region filter.
        """
        if category and category != "all":
            return self.trends.where(is_active=True, category=category)
        if region and region != "global":
            return self.trends.where(is_active=True, region=region)
        return self.trends.where(is_active=True)

    def submit_trend(self, submission: TrendSubmissionIn) -> TrendSubmission:
        """Store a submission and publish it straight away as an active trend."""
        stored = self.trend_submissions.insert(submission.model_dump())
        self.trends.insert({
            "title": submission.topic,
            "category": submission.category,
            "region": submission.region,
            "searches": SUBMITTED_SEARCHES,
            "growth": SUBMITTED_GROWTH,
            "countries": SUBMITTED_COUNTRIES,
            "ai_summary": submission.description or f"Community-submitted trend about {submission.topic}.",
        })
        logger.info("Trend submitted: %s (%s, %s)", submission.topic, submission.category, submission.region)
        return stored

    def refresh_trends(self, rng: random.Random | None = None) -> list[Trend]:
        """
        Nudge every active trend's growth by up to ±10 points and its searches
        by up to ±50,000, within the usual bounds.
        """
        rng = rng or random.Random()
        refreshed = []
        for trend in self.get_trends():
            growth = parse_growth(trend.growth) + (rng.random() - 0.5) * 20
            growth = max(MIN_GROWTH, min(MAX_GROWTH, growth))
            searches = max(MIN_SEARCHES, trend.searches + int((rng.random() - 0.5) * 100_000))
            refreshed.append(self.trends.update(trend.id, {"searches": searches, "growth": format_growth(growth)}))
        logger.info("Refreshed %d trends", len(refreshed))
        return refreshed

    def get_metrics(self) -> MetricsOut:
        active = self.get_trends()
        return MetricsOut(
            total_searches=sum(t.searches for t in active),
            trending_now=sum(1 for t in active if abs(parse_growth(t.growth)) > TRENDING_GROWTH),
            active_trends=len(active),
        )

    # ── Insights ───────────────────────────────────────────────────────────

    def get_insights(self) -> InsightsOut:
        return InsightsOut(
            predictions=self.ai_insights.where(type="prediction"),
            opportunities=self.ai_insights.where(type="content_opportunity"),
        )
