"""
Tests for the application factory and site registry.
"""

from __future__ import annotations

import logging

import pytest

from protokit.backend.api.app import _QuietPollFilter, create_app
from protokit.backend.core.storage import MemoryBackend, StorageBackend
from protokit.backend.core.utils.config import ProtokitSettings
from protokit.backend.sites import all_sites, get_site

SITE_NAMES = [
    "africstays", "tiktalk", "projecttracker", "imusic", "homepros",
    "edumentor", "afriquisine", "breathcheck", "trendanalyzer",
]


class TestSiteRegistry:
    def test_all_sites_registered(self) -> None:
        assert list(all_sites()) == SITE_NAMES

    def test_unknown_site(self) -> None:
        with pytest.raises(KeyError, match="available"):
            get_site("nowhere")

    def test_create_app_unknown_site(self) -> None:
        with pytest.raises(KeyError):
            create_app("nowhere", settings=ProtokitSettings())

    @pytest.mark.parametrize("name", SITE_NAMES)
    def test_seed_fills_every_site(self, name: str, backend: StorageBackend) -> None:
        site = get_site(name)
        storage = site.storage_class(backend)
        site.seed(storage)
        assert not storage.is_empty()


class TestLifespan:
    def test_seeds_only_empty_storage(self, make_client) -> None:
        backend = MemoryBackend()
        make_client("homepros", backend=backend)
        second = make_client("homepros", backend=backend)
        assert len(second.get("/api/services").json()) == 8

    def test_app_title_and_cors(self, make_client) -> None:
        client = make_client("tiktalk")
        assert client.app.title == "TikTalk API"
        response = client.options(
            "/api/health",
            headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
        )
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class TestQuietPollFilter:
    def _record(self, message: str) -> logging.LogRecord:
        return logging.LogRecord("uvicorn.access", logging.INFO, __file__, 1, message, None, None)

    def test_drops_health_polls(self) -> None:
        assert not _QuietPollFilter().filter(self._record('"GET /api/health HTTP/1.1" 200'))
        assert _QuietPollFilter().filter(self._record('"GET /api/podcasts HTTP/1.1" 200'))
