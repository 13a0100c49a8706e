"""iMusic API route handlers.

The signed-in user is identified by the ``X-User-Id`` header.  Read-only
prototype routes fall back to user 1 when it is missing.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from protokit.backend.api.deps import current_user_id, optional_user_id, site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.schemas import MessageOut
from protokit.backend.sites.imusic.schemas import (
    ArtistSync,
    ArtistSyncIn,
    AssignMentorIn,
    Challenge,
    Collaboration,
    ForgotPasswordIn,
    InspirationItem,
    JourneyStep,
    LoginIn,
    Mentor,
    PublicUser,
    RegisterIn,
    ResetPasswordIn,
    User,
    UserJourneyStepOut,
    UserMentorOut,
)
from protokit.backend.sites.imusic.storage import IMusicStorage

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = 1

RESET_SENT = "If an account with that email exists, a password reset link has been sent."

router = APIRouter()


def _public(user: User) -> PublicUser:
    return PublicUser.model_validate(user.model_dump(exclude={"password", "reset_token", "reset_token_expires_at"}))


# ── Accounts ───────────────────────────────────────────────────────────────


@router.post("/register", response_model=PublicUser, status_code=201)
def register(account: RegisterIn, storage: IMusicStorage = Depends(site_storage)) -> PublicUser:
    with failure_message("Failed to register"):
        try:
            user = storage.register_user(account)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _public(user)


@router.post("/login", response_model=PublicUser)
def login(credentials: LoginIn, storage: IMusicStorage = Depends(site_storage)) -> PublicUser:
    with failure_message("Failed to log in"):
        user = storage.authenticate(credentials.username, credentials.password)
        if user is None:
            raise HTTPException(status_code=401, detail="Invalid username or password")
        return _public(user)


@router.get("/user", response_model=PublicUser)
def current_user(
    user_id: int = Depends(current_user_id),
    storage: IMusicStorage = Depends(site_storage),
) -> PublicUser:
    with failure_message("Failed to fetch user"):
        user = storage.get_user(user_id)
        if user is None:
            raise HTTPException(status_code=401, detail="Unauthorized")
        return _public(user)


@router.post("/forgot-password", response_model=MessageOut)
def forgot_password(body: ForgotPasswordIn, storage: IMusicStorage = Depends(site_storage)) -> MessageOut:
    """Always answers the same way so account existence is not revealed."""
    with failure_message("Failed to start password reset"):
        storage.start_password_reset(body.email)
        return MessageOut(message=RESET_SENT)


@router.post("/reset-password", response_model=MessageOut)
def reset_password(body: ResetPasswordIn, storage: IMusicStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to reset password"):
        try:
            storage.reset_password(body.token, body.password)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return MessageOut(message="Password has been reset successfully")


# ── Mentors ────────────────────────────────────────────────────────────────


@router.get("/mentors", response_model=list[Mentor])
def list_mentors(storage: IMusicStorage = Depends(site_storage)) -> list[Mentor]:
    with failure_message("Failed to fetch mentors"):
        return storage.get_mentors()


@router.get("/mentors/{mentor_id}", response_model=Mentor)
def get_mentor(mentor_id: int, storage: IMusicStorage = Depends(site_storage)) -> Mentor:
    with failure_message("Failed to fetch mentor"):
        mentor = storage.get_mentor(mentor_id)
        if mentor is None:
            raise not_found("Mentor")
        return mentor


@router.get("/user/mentor", response_model=UserMentorOut | None)
def user_mentor(
    user_id: int | None = Depends(optional_user_id),
    storage: IMusicStorage = Depends(site_storage),
) -> UserMentorOut | None:
    """The caller's mentor, or ``null`` when none is assigned."""
    with failure_message("Failed to fetch user's mentor"):
        return storage.get_user_mentor(user_id or DEFAULT_USER_ID)


@router.post("/user/mentor", response_model=UserMentorOut, status_code=201)
def assign_mentor(
    body: AssignMentorIn,
    user_id: int = Depends(current_user_id),
    storage: IMusicStorage = Depends(site_storage),
) -> UserMentorOut:
    with failure_message("Failed to assign mentor"):
        if body.mentor_id is None:
            raise HTTPException(status_code=400, detail="Mentor ID is required")
        if storage.get_mentor(body.mentor_id) is None:
            raise not_found("Mentor")
        if storage.get_user_mentor(user_id) is not None:
            raise HTTPException(status_code=400, detail="User already has a mentor assigned")
        return storage.assign_mentor(user_id, body.mentor_id)


# ── Journey & feeds ────────────────────────────────────────────────────────


@router.get("/journey", response_model=list[JourneyStep])
def journey(storage: IMusicStorage = Depends(site_storage)) -> list[JourneyStep]:
    with failure_message("Failed to fetch journey steps"):
        return storage.get_journey_steps()


@router.get("/user/journey", response_model=list[UserJourneyStepOut])
def user_journey(
    user_id: int | None = Depends(optional_user_id),
    storage: IMusicStorage = Depends(site_storage),
) -> list[UserJourneyStepOut]:
    with failure_message("Failed to fetch user journey steps"):
        return storage.get_user_journey_steps(user_id or DEFAULT_USER_ID)


@router.get("/inspiration", response_model=list[InspirationItem])
def inspiration(storage: IMusicStorage = Depends(site_storage)) -> list[InspirationItem]:
    with failure_message("Failed to fetch inspiration items"):
        return storage.get_inspiration_items()


@router.get("/collaborations", response_model=list[Collaboration])
def collaborations(storage: IMusicStorage = Depends(site_storage)) -> list[Collaboration]:
    with failure_message("Failed to fetch collaborations"):
        return storage.get_collaborations()


@router.get("/challenges", response_model=list[Challenge])
def challenges(storage: IMusicStorage = Depends(site_storage)) -> list[Challenge]:
    with failure_message("Failed to fetch challenges"):
        return storage.get_challenges()


# ── Artist syncs ───────────────────────────────────────────────────────────


@router.get("/artist-syncs", response_model=list[ArtistSync])
def list_artist_syncs(
    status: str | None = None,
    limit: int | None = Query(default=None, ge=1),
    storage: IMusicStorage = Depends(site_storage),
) -> list[ArtistSync]:
    with failure_message("Failed to fetch artist syncs"):
        return storage.get_artist_syncs(status, limit)


@router.get("/artist-syncs/{sync_id}", response_model=ArtistSync)
def get_artist_sync(sync_id: int, storage: IMusicStorage = Depends(site_storage)) -> ArtistSync:
    with failure_message("Failed to fetch artist sync"):
        sync = storage.get_artist_sync(sync_id)
        if sync is None:
            raise not_found("Artist sync")
        return sync


@router.post("/artist-syncs", response_model=ArtistSync, status_code=201)
def create_artist_sync(body: ArtistSyncIn, storage: IMusicStorage = Depends(site_storage)) -> ArtistSync:
    with failure_message("Failed to create artist sync"):
        existing = storage.get_artist_sync_by_source_id(body.source, body.source_id)
        if existing is not None:
            raise HTTPException(
                status_code=409,
                detail={
                    "message": "This artist is already being synced",
                    "existingSync": existing.model_dump(mode="json", by_alias=True),
                },
            )
        return storage.create_artist_sync(body)


@router.post("/artist-syncs/{sync_id}/refresh", response_model=ArtistSync)
def refresh_artist_sync(sync_id: int, storage: IMusicStorage = Depends(site_storage)) -> ArtistSync:
    with failure_message("Failed to refresh artist sync"):
        sync = storage.update_artist_sync_status(sync_id, "pending")
        if sync is None:
            raise not_found("Artist sync")
        return sync


@router.post("/artist-syncs/{sync_id}/link/{mentor_id}", response_model=ArtistSync)
def link_artist_sync(sync_id: int, mentor_id: int, storage: IMusicStorage = Depends(site_storage)) -> ArtistSync:
    with failure_message("Failed to link artist sync"):
        if storage.get_artist_sync(sync_id) is None:
            raise not_found("Artist sync")
        if storage.get_mentor(mentor_id) is None:
            raise not_found("Mentor")
        return storage.link_artist_sync_to_mentor(sync_id, mentor_id)
