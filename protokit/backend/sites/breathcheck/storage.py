"""Storage interface for BreathCheck."""

from __future__ import annotations

import logging

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.core.utils.passwords import hash_password, verify_password
from protokit.backend.sites.breathcheck.schemas import (
    BreathResult,
    BreathTest,
    ParentContact,
    ParentNotification,
    RegisterIn,
    User,
)

logger = logging.getLogger(__name__)


class BreathCheckStorage(SiteStorage):
    collections = {
        "users": User,
        "breath_tests": BreathTest,
        "parents": ParentContact,
        "parent_notifications": ParentNotification,
    }

    users: Collection[User]
    breath_tests: Collection[BreathTest]
    parents: Collection[ParentContact]
    parent_notifications: Collection[ParentNotification]

    # ── Users ──────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.first(username=username)

    def get_user_by_email(self, email: str) -> User | None:
        return self.users.first(email=email)

    def register_user(self, account: RegisterIn) -> User:
        """
        Store a new account with a hashed password.

        Raises:
            ValueError: If the username or the email is already in use
        """
        if self.get_user_by_username(account.username) is not None:
            raise ValueError("Username already taken")
        if self.get_user_by_email(account.email) is not None:
            raise ValueError("Email already registered")
        values = account.model_dump(exclude={"confirm_password"})
        values["password"] = hash_password(account.password)
        user = self.users.insert(values)
        logger.info("Registered %s (%s tier)", user.username, user.subscription_tier)
        return user

    def authenticate(self, username: str, password: str) -> User | None:
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            return None
        return user

    # ── Breath tests ───────────────────────────────────────────────────────

    def get_breath_test(self, test_id: int) -> BreathTest | None:
        return self.breath_tests.get(test_id)

    def get_user_breath_tests(self, user_id: int) -> list[BreathTest]:
        """Oldest first."""
        return sorted(self.breath_tests.where(user_id=user_id), key=lambda t: (t.created_at, t.id))

    def record_breath_test(
        self, user_id: int, result: BreathResult, audio_sample: str, location: str | None = None
    ) -> BreathTest:
        return self.breath_tests.insert({
            "user_id": user_id,
            "bac": float(result.bac),
            "level": result.level,
            "message": result.message,
            "location": location,
            "audio_sample": audio_sample,
        })

    # ── Parents ────────────────────────────────────────────────────────────

    def get_parent(self, teen_id: str) -> ParentContact | None:
        return self.parents.first(teen_id=teen_id)

    def log_notification(self, parent: ParentContact, message: str) -> ParentNotification:
        contact = parent.email or parent.phone or ""
        logger.info("Notifying %s: %s", contact, message)
        return self.parent_notifications.insert({"teen_id": parent.teen_id, "contact": contact, "message": message})
