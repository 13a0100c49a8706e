"""Routes every site shares.

Site specific endpoints live in ``protokit.backend.sites.<site>.routes`` and
are included next to this router in ``app.py``.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from protokit.backend.schemas import HealthOut

router = APIRouter()

# ── Routes ─────────────────────────────────────────────────────────────────


@router.get("/health", response_model=HealthOut, include_in_schema=False)
async def health_check(request: Request) -> HealthOut:
    """Liveness check (suppressed from access log via log filter)."""
    return HealthOut(site=request.app.state.site.name, storage=request.app.state.backend.kind)
