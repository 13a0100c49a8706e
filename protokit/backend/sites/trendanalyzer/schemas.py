"""Pydantic schemas for TrendAnalyzer, the search-trend dashboard."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from protokit.backend.schemas import Record, Schema, utcnow

Category = Literal["viral", "news", "sports", "finance", "culture"]
Region = Literal["global", "us", "uk", "jp", "de", "fr", "es"]
Outlook = Literal["will_grow", "will_stabilize", "will_fade"]

# ── Request models ──────────────────────────────────────────────────────────


class TrendSubmissionIn(Schema):
    topic: str = Field(min_length=1)
    category: Category
    region: Region
    description: str | None = None


# ── Stored records ──────────────────────────────────────────────────────────


class Trend(Record):
    title: str
    category: str
    searches: int
    # Signed percentage such as "+342%" or "-23%".
    growth: str
    countries: int
    ai_summary: str
    prediction: Outlook | None = None
    region: str = "global"
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)


class TrendSubmission(TrendSubmissionIn, Record):
    created_at: datetime = Field(default_factory=utcnow)


class Insight(Record):
    type: Literal["prediction", "content_opportunity"]
    title: str
    description: str
    status: Outlook
    created_at: datetime = Field(default_factory=utcnow)


# ── Response models ─────────────────────────────────────────────────────────


class InsightsOut(Schema):
    predictions: list[Insight]
    opportunities: list[Insight]


class SubmissionOut(Schema):
    message: str
    submission_id: int


class CountryTrend(Schema):
    name: str
    flag: str
    top_trend: str
    searches: str
    growth: str
    code: str


class MetricsOut(Schema):
    total_searches: int
    trending_now: int
    active_trends: int
