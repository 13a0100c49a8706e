"""
API tests for TrendAnalyzer.
"""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from protokit.backend.sites.trendanalyzer.storage import format_growth, parse_growth


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client("trendanalyzer")


class TestGrowth:
    @pytest.mark.parametrize(("text", "value"), [("+342%", 342), ("-23%", -23), ("0%", 0)])
    def test_parse(self, text: str, value: int) -> None:
        assert parse_growth(text) == value

    def test_format_keeps_sign(self) -> None:
        assert format_growth(341.6) == "+342%"
        assert format_growth(-12.2) == "-12%"


class TestTrends:
    def test_all_active_trends(self, client: TestClient) -> None:
        trends = client.get("/api/trends").json()
        assert len(trends) == 5
        assert trends[0]["title"] == "AI coding assistant"
        assert trends[0]["aiSummary"].startswith("Trending due to")

    def test_category_filter(self, client: TestClient) -> None:
        finance = client.get("/api/trends", params={"category": "finance"}).json()
        assert [t["title"] for t in finance] == ["Bitcoin ETF approval"]
        assert len(client.get("/api/trends", params={"category": "all"}).json()) == 5

    def test_region_filter(self, client: TestClient) -> None:
        assert client.get("/api/trends", params={"region": "us"}).json() == []
        assert len(client.get("/api/trends", params={"region": "global"}).json()) == 5

    def test_category_wins_over_region(self, client: TestClient) -> None:
        sports = client.get("/api/trends", params={"category": "sports", "region": "us"}).json()
        assert [t["title"] for t in sports] == ["World Cup qualifiers"]

    def test_enhanced_listing_matches(self, client: TestClient) -> None:
        assert client.get("/api/trends/enhanced").json() == client.get("/api/trends").json()

    def test_get_trend(self, client: TestClient) -> None:
        assert client.get("/api/trends/4").json()["growth"] == "-23%"
        assert client.get("/api/trends/99").json() == {"message": "Trend not found"}

    def test_countries(self, client: TestClient) -> None:
        countries = client.get("/api/trends/countries").json()
        assert [c["code"] for c in countries] == ["us", "uk", "jp", "de"]
        assert countries[0]["topTrend"] == "AI coding assistant"


class TestSubmissions:
    def test_submission_becomes_trend(self, client: TestClient) -> None:
        response = client.post(
            "/api/trends/submit", json={"topic": "Solar bikes", "category": "news", "region": "fr"}
        )
        assert response.json() == {"message": "Trend submitted successfully", "submissionId": 1}

        [trend] = client.get("/api/trends", params={"region": "fr"}).json()
        assert trend["title"] == "Solar bikes"
        assert (trend["searches"], trend["growth"], trend["countries"]) == (50000, "+50%", 5)
        assert trend["aiSummary"] == "Community-submitted trend about Solar bikes."

    def test_description_is_used_as_summary(self, client: TestClient) -> None:
        client.post(
            "/api/trends/submit",
            json={"topic": "Tiny homes", "category": "culture", "region": "de", "description": "Small living."},
        )
        [trend] = client.get("/api/trends", params={"region": "de"}).json()
        assert trend["aiSummary"] == "Small living."

    def test_unknown_category_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/trends/submit", json={"topic": "Anything", "category": "weather", "region": "us"}
        )
        assert response.status_code == 400
        assert client.app.state.storage.trend_submissions.count() == 0


class TestMetricsAndRefresh:
    def test_metrics(self, client: TestClient) -> None:
        assert client.get("/api/trends/metrics").json() == {
            "totalSearches": 6_746_000,
            "trendingNow": 4,
            "activeTrends": 5,
        }

    def test_refresh_endpoint(self, client: TestClient) -> None:
        response = client.post("/api/trends/refresh")
        assert response.json() == {"message": "Trends refreshed successfully"}
        assert len(client.get("/api/trends").json()) == 5

    def test_refresh_stays_near_previous_values(self, client: TestClient) -> None:
        storage = client.app.state.storage
        before = {t.id: t for t in storage.get_trends()}

        for trend in storage.refresh_trends(random.Random(0)):
            old = before[trend.id]
            assert abs(parse_growth(trend.growth) - parse_growth(old.growth)) <= 10
            assert abs(trend.searches - old.searches) <= 50_000
            assert trend.growth[0] in "+-"

    def test_refresh_clamps(self, client: TestClient) -> None:
        storage = client.app.state.storage
        storage.trends.update(1, {"growth": "+500%", "searches": 10_000})
        storage.trends.update(4, {"growth": "-50%"})

        for seed in range(20):
            storage.refresh_trends(random.Random(seed))
        trends = {t.id: t for t in storage.get_trends()}
        assert all(-50 <= parse_growth(t.growth) <= 500 for t in trends.values())
        assert trends[1].searches >= 10_000

    def test_insights_grouped(self, client: TestClient) -> None:
        insights = client.get("/api/insights").json()
        assert [i["title"] for i in insights["predictions"]] == ["AI coding tools", "Climate summit"]
        assert len(insights["opportunities"]) == 2
