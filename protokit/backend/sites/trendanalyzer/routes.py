"""TrendAnalyzer API route handlers.

The fixed ``/trends/...`` paths are declared before anything that takes a
trend id.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from protokit.backend.api.deps import site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.schemas import MessageOut
from protokit.backend.sites.trendanalyzer.schemas import (
    CountryTrend,
    InsightsOut,
    MetricsOut,
    SubmissionOut,
    Trend,
    TrendSubmissionIn,
)
from protokit.backend.sites.trendanalyzer.storage import TrendAnalyzerStorage

logger = logging.getLogger(__name__)

COUNTRIES = [
    CountryTrend(name="United States", flag="🇺🇸", top_trend="AI coding assistant",
                 searches="2.1M", growth="+342%", code="us"),
    CountryTrend(name="United Kingdom", flag="🇬🇧", top_trend="Climate summit 2024",
                 searches="1.8M", growth="+189%", code="uk"),
    CountryTrend(name="Japan", flag="🇯🇵", top_trend="New Marvel movie trailer",
                 searches="1.5M", growth="+156%", code="jp"),
    CountryTrend(name="Germany", flag="🇩🇪", top_trend="World Cup qualifiers",
                 searches="1.2M", growth="+278%", code="de"),
]

router = APIRouter()


@router.get("/trends", response_model=list[Trend])
def list_trends(
    category: str | None = Query(default=None),
    region: str | None = Query(default=None),
    storage: TrendAnalyzerStorage = Depends(site_storage),
) -> list[Trend]:
    with failure_message("Failed to fetch trends"):
        return storage.get_trends(category, region)


@router.get("/trends/enhanced", response_model=list[Trend])
def list_enhanced_trends(
    category: str | None = Query(default=None),
    region: str | None = Query(default=None),
    storage: TrendAnalyzerStorage = Depends(site_storage),
) -> list[Trend]:
    """Same listing as ``/trends``; summaries are already stored on each trend."""
    with failure_message("Failed to fetch enhanced trends"):
        return storage.get_trends(category, region)


@router.get("/trends/countries", response_model=list[CountryTrend])
def country_trends() -> list[CountryTrend]:
    return COUNTRIES


@router.get("/trends/metrics", response_model=MetricsOut)
def trend_metrics(storage: TrendAnalyzerStorage = Depends(site_storage)) -> MetricsOut:
    with failure_message("Failed to fetch metrics"):
        return storage.get_metrics()


@router.post("/trends/submit", response_model=SubmissionOut)
def submit_trend(
    submission: TrendSubmissionIn,
    storage: TrendAnalyzerStorage = Depends(site_storage),
) -> SubmissionOut:
    with failure_message("Failed to submit trend"):
        stored = storage.submit_trend(submission)
        return SubmissionOut(message="Trend submitted successfully", submission_id=stored.id)


@router.post("/trends/refresh", response_model=MessageOut)
def refresh_trends(storage: TrendAnalyzerStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to refresh trends"):
        storage.refresh_trends()
        return MessageOut(message="Trends refreshed successfully")


@router.get("/trends/{trend_id}", response_model=Trend)
def get_trend(trend_id: int, storage: TrendAnalyzerStorage = Depends(site_storage)) -> Trend:
    with failure_message("Failed to fetch trend"):
        trend = storage.get_trend(trend_id)
        if trend is None:
            raise not_found("Trend")
        return trend


@router.get("/insights", response_model=InsightsOut)
def insights(storage: TrendAnalyzerStorage = Depends(site_storage)) -> InsightsOut:
    with failure_message("Failed to fetch insights"):
        return storage.get_insights()
