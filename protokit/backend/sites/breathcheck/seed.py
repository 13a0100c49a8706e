"""Demo account and parent contact for an empty BreathCheck store."""

from __future__ import annotations

from protokit.backend.sites.breathcheck.schemas import RegisterIn
from protokit.backend.sites.breathcheck.storage import BreathCheckStorage

DEMO_USER = RegisterIn(
    username="demo",
    password="password123",
    confirm_password="password123",
    email="demo@example.com",
    display_name="Demo User",
)

PARENTS = [{"teen_id": "teen123", "email": "parent@example.com", "phone": "+1234567890"}]


def seed(storage: BreathCheckStorage) -> None:
    storage.register_user(DEMO_USER)
    storage.parents.insert_many(PARENTS)
