"""Password reset tokens, plus the shared password helpers."""

from __future__ import annotations

import secrets
from datetime import datetime, timedelta

from protokit.backend.core.utils.passwords import hash_password, verify_password
from protokit.backend.schemas import utcnow

RESET_TOKEN_TTL = timedelta(hours=1)


def new_reset_token() -> tuple[str, datetime]:
    """A random token and the moment it stops being valid."""
    return secrets.token_hex(32), utcnow() + RESET_TOKEN_TTL


__all__ = ["RESET_TOKEN_TTL", "hash_password", "new_reset_token", "verify_password"]
