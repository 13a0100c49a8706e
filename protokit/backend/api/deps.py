"""Request dependencies shared by the site routers."""

from __future__ import annotations

from fastapi import Header, HTTPException, Request

from protokit.backend.core.storage import SiteStorage


def site_storage(request: Request) -> SiteStorage:
    """The storage interface created by the application lifespan."""
    return request.app.state.storage


def optional_user_id(x_user_id: int | None = Header(default=None)) -> int | None:
    """Caller id from the ``X-User-Id`` header, if any."""
    return x_user_id


def current_user_id(x_user_id: int | None = Header(default=None)) -> int:
    """Caller id from the ``X-User-Id`` header; 401 when it is absent."""
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return x_user_id
