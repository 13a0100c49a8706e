"""FastAPI application factory.

Instantiate with:
    uvicorn protokit.backend.api.app:app --reload --port 5000

The module-level ``app`` serves the site named by ``PROTOKIT_SITE``
(``africstays`` by default); ``protokit serve SITE`` picks one explicitly.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from protokit import __version__
from protokit.backend.api.errors import install_error_handlers
from protokit.backend.api.router import router
from protokit.backend.core.storage import StorageBackend, create_backend
from protokit.backend.core.utils.config import ProtokitSettings, get_settings
from protokit.backend.sites import Site, get_site

logger = logging.getLogger(__name__)


def _lifespan_for(site: Site, settings: ProtokitSettings, backend: StorageBackend | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the storage backend, build the site storage and seed it once."""
        owned = backend is None
        active = backend or create_backend(settings.storage.backend, settings.storage.url)
        storage = site.storage_class(active)
        if settings.storage.seed and storage.is_empty():
            site.seed(storage)
            logger.info("Seeded %s: %s", site.name, storage.counts())
        app.state.site = site
        app.state.backend = active
        app.state.storage = storage
        logger.info("%s backend ready on %s storage", site.title, active.kind)
        try:
            yield
        finally:
            if owned:
                active.close()

    return lifespan


def create_app(
    site_name: str | None = None,
    settings: ProtokitSettings | None = None,
    backend: StorageBackend | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application for one site.

    Args:
        site_name: Registered site name; defaults to ``settings.site``
        settings: Runtime settings; defaults to :func:`get_settings`
        backend: Pre-built storage backend (the app will not close it)

    Raises:
        KeyError: If the site is not registered
    """
    settings = settings or get_settings()
    site = get_site(site_name or settings.site)

    application = FastAPI(
        title=f"{site.title} API",
        version=__version__,
        description=site.description,
        lifespan=_lifespan_for(site, settings, backend),
    )

    # ── CORS ───────────────────────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(application)

    # ── Register all API routes under /api ─────────────────────────────────
    application.include_router(router, prefix="/api")
    application.include_router(site.router, prefix="/api")

    # ── Suppress noisy access-log lines for health polls ───────────────────
    _install_access_log_filter()

    return application


class _QuietPollFilter(logging.Filter):
    """Drop uvicorn access-log records for /api/health."""

    _NOISY = ("/api/health",)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in self._NOISY)


def _install_access_log_filter() -> None:
    """Attach the filter to uvicorn's access logger (if it exists)."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, _QuietPollFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(_QuietPollFilter())


# Module-level instance used by uvicorn.
app = create_app()
