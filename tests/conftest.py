"""Shared pytest fixtures for the test suite.

Import any of these in a test file by simply declaring the fixture name as a
parameter — pytest discovers them automatically from this conftest.py.

Fixture overview
----------------
backend       — a fresh storage backend, parametrized over memory and
                in-memory SQLite so every test using it runs on both
storage_kind  — ``"memory"`` or ``"sql"``; every API test runs once per kind
make_client   — factory returning a started ``TestClient`` for a site,
                seeded by default, on a private backend of ``storage_kind``
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from protokit.backend.api.app import create_app
from protokit.backend.core.storage import MemoryBackend, SqlBackend, StorageBackend
from protokit.backend.core.utils.config import ProtokitSettings, StorageSettings


def _new_backend(kind: str) -> StorageBackend:
    """Empty backend; the SQL variant uses a private in-memory SQLite database."""
    return MemoryBackend() if kind == "memory" else SqlBackend("sqlite://")


# ── Storage ──────────────────────────────────────────────────────────────────


@pytest.fixture(params=["memory", "sql"])
def backend(request: pytest.FixtureRequest) -> Iterator[StorageBackend]:
    created = _new_backend(request.param)
    yield created
    created.close()


@pytest.fixture(params=["memory", "sql"])
def storage_kind(request: pytest.FixtureRequest) -> str:
    return request.param


# ── API clients ──────────────────────────────────────────────────────────────


@pytest.fixture
def make_client(storage_kind: str) -> Iterator[Callable[..., TestClient]]:
    """
    Build clients for any site.

    ``make_client("tiktalk", seed=False, backend=SqlBackend("sqlite://"))``
    runs the application lifespan, so the storage is ready on return.  Without
    ``backend`` each client gets its own backend of the current ``storage_kind``.
    """
    started: list[TestClient] = []
    owned: list[StorageBackend] = []

    def _make(site: str, *, seed: bool = True, backend: StorageBackend | None = None) -> TestClient:
        if backend is None:
            backend = _new_backend(storage_kind)
            owned.append(backend)
        settings = ProtokitSettings(site=site, storage=StorageSettings(seed=seed))
        client = TestClient(create_app(site, settings=settings, backend=backend))
        client.__enter__()
        started.append(client)
        return client

    yield _make

    for client in started:
        client.__exit__(None, None, None)
    for created in owned:
        created.close()
