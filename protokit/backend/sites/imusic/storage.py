"""Storage interface for iMusic."""

from __future__ import annotations

import logging
from typing import Any

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.schemas import utcnow
from protokit.backend.sites.imusic.schemas import (
    ArtistSync,
    ArtistSyncIn,
    Challenge,
    Collaboration,
    InspirationItem,
    JourneyStep,
    Mentor,
    RegisterIn,
    User,
    UserJourneyStep,
    UserJourneyStepOut,
    UserMentor,
    UserMentorOut,
)
from protokit.backend.sites.imusic.security import hash_password, new_reset_token, verify_password

logger = logging.getLogger(__name__)

DEFAULT_SYNC_PRIORITY = 5

WELCOME_MESSAGE = (
    "Your flow is getting tighter. Let's work on making those metaphors more layered. "
    "Great writers create worlds within worlds. For your next verse, try connecting your "
    "personal story to something bigger."
)


class IMusicStorage(SiteStorage):
    collections = {
        "users": User,
        "mentors": Mentor,
        "user_mentors": UserMentor,
        "journey_steps": JourneyStep,
        "user_journey_steps": UserJourneyStep,
        "inspiration_items": InspirationItem,
        "collaborations": Collaboration,
        "challenges": Challenge,
        "artist_syncs": ArtistSync,
    }

    users: Collection[User]
    mentors: Collection[Mentor]
    user_mentors: Collection[UserMentor]
    journey_steps: Collection[JourneyStep]
    user_journey_steps: Collection[UserJourneyStep]
    inspiration_items: Collection[InspirationItem]
    collaborations: Collection[Collaboration]
    challenges: Collection[Challenge]
    artist_syncs: Collection[ArtistSync]

    # ── Users & accounts ───────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.first(username=username)

    def get_user_by_email(self, email: str) -> User | None:
        """Match on the email, or on the username for accounts registered with one."""
        return self.users.first(email=email) or self.users.first(username=email)

    def register_user(self, account: RegisterIn) -> User:
        """
        Create an account with a hashed password and its journey steps.

        The first journey step starts in progress, later ones locked.

        Raises:
            ValueError: If the username is taken
        """
        if self.get_user_by_username(account.username) is not None:
            raise ValueError("Username already exists")
        values = account.model_dump()
        values["password"] = hash_password(account.password)
        user = self.users.insert(values)
        for step in self.get_journey_steps():
            self.user_journey_steps.insert({
                "user_id": user.id,
                "step_id": step.id,
                "status": "in-progress" if step.order == 1 else "locked",
                "progress": 0,
            })
        logger.info("Registered user %s", user.username)
        return user

    def authenticate(self, username: str, password: str) -> User | None:
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            return None
        return user

    def start_password_reset(self, email: str) -> str | None:
        """Store a fresh reset token for the account; ``None`` if there is no such account."""
        user = self.get_user_by_email(email)
        if user is None:
            return None
        token, expires_at = new_reset_token()
        self.users.update(user.id, {"reset_token": token, "reset_token_expires_at": expires_at})
        logger.info("Password reset requested for user #%d", user.id)
        return token

    def reset_password(self, token: str, password: str) -> User:
        """
        Replace the password of the account holding ``token``.

        Raises:
            ValueError: If the token is unknown or expired
        """
        user = self.users.first(reset_token=token)
        if user is None or user.reset_token_expires_at is None:
            raise ValueError("Invalid or expired reset token")
        if utcnow() > user.reset_token_expires_at:
            raise ValueError("Reset token has expired")
        return self.users.update(user.id, {
            "password": hash_password(password),
            "reset_token": None,
            "reset_token_expires_at": None,
        })

    # ── Mentors ────────────────────────────────────────────────────────────

    def get_mentor(self, mentor_id: int) -> Mentor | None:
        return self.mentors.get(mentor_id)

    def get_mentors(self) -> list[Mentor]:
        return self.mentors.all()

    def get_user_mentor(self, user_id: int) -> UserMentorOut | None:
        assignment = self.user_mentors.first(user_id=user_id)
        if assignment is None:
            return None
        mentor = self.mentors.get(assignment.mentor_id)
        if mentor is None:
            return None
        return UserMentorOut(**assignment.model_dump(), mentor=mentor)

    def assign_mentor(self, user_id: int, mentor_id: int) -> UserMentorOut:
        assignment = self.user_mentors.insert({
            "user_id": user_id,
            "mentor_id": mentor_id,
            "progress": 0,
            "current_message": WELCOME_MESSAGE,
        })
        return UserMentorOut(**assignment.model_dump(), mentor=self.mentors.get(mentor_id))

    # ── Journey ────────────────────────────────────────────────────────────

    def get_journey_steps(self) -> list[JourneyStep]:
        return sorted(self.journey_steps.all(), key=lambda s: s.order)

    def get_user_journey_steps(self, user_id: int) -> list[UserJourneyStepOut]:
        joined = []
        for user_step in self.user_journey_steps.where(user_id=user_id):
            step = self.journey_steps.get(user_step.step_id)
            if step is not None:
                joined.append(UserJourneyStepOut(**user_step.model_dump(), step=step))
        return sorted(joined, key=lambda s: s.step.order)

    # ── Feeds ──────────────────────────────────────────────────────────────

    def get_inspiration_items(self) -> list[InspirationItem]:
        return self.inspiration_items.all()

    def get_collaborations(self) -> list[Collaboration]:
        return self.collaborations.all()

    def get_challenges(self) -> list[Challenge]:
        return self.challenges.all()

    # ── Artist syncs ───────────────────────────────────────────────────────

    def get_artist_sync(self, sync_id: int) -> ArtistSync | None:
        return self.artist_syncs.get(sync_id)

    def get_artist_sync_by_source_id(self, source: str, source_id: str) -> ArtistSync | None:
        return self.artist_syncs.first(source=source, source_id=source_id)

    def get_pending_syncs(self, limit: int | None = None) -> list[ArtistSync]:
        """Pending syncs, highest priority first."""
        pending = sorted(
            self.artist_syncs.where(sync_status="pending"),
            key=lambda s: s.priority if s.priority is not None else DEFAULT_SYNC_PRIORITY,
            reverse=True,
        )
        return pending[:limit] if limit else pending

    def get_artist_syncs(self, status: str | None = None, limit: int | None = None) -> list[ArtistSync]:
        if status == "pending":
            return self.get_pending_syncs(limit)
        syncs = self.artist_syncs.where(sync_status=status) if status else self.artist_syncs.all()
        return syncs[:limit] if limit else syncs

    def create_artist_sync(self, sync: ArtistSyncIn | dict[str, Any]) -> ArtistSync:
        values = sync.model_dump() if isinstance(sync, ArtistSyncIn) else dict(sync)
        return self.artist_syncs.insert({**values, "sync_status": "pending"})

    def update_artist_sync_status(self, sync_id: int, status: str, error: str | None = None) -> ArtistSync | None:
        return self.artist_syncs.update(sync_id, {
            "sync_status": status,
            "sync_error": error,
            "last_synced": utcnow(),
        })

    def link_artist_sync_to_mentor(self, sync_id: int, mentor_id: int) -> ArtistSync | None:
        return self.artist_syncs.update(sync_id, {"mentor_id": mentor_id})
