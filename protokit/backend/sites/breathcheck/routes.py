"""BreathCheck API route handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from protokit.backend.api.deps import site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.sites.breathcheck.analysis import evaluate_sample
from protokit.backend.sites.breathcheck.schemas import (
    BreathResult,
    BreathSampleIn,
    BreathTest,
    DeliveryOut,
    LoginIn,
    NotifyParentIn,
    NotifyParentOut,
    Promotion,
    PublicUser,
    RegisterIn,
    User,
)
from protokit.backend.sites.breathcheck.storage import BreathCheckStorage

logger = logging.getLogger(__name__)

PROMOTIONS = [
    Promotion(id=1, title="25% Off Ride with Uber", url="https://uber.com/referral/breathecheck"),
    Promotion(id=2, title="Top Rated Breathalyzer on Amazon", url="https://amzn.to/example-link"),
    Promotion(id=3, title="Legal Help for DUI Defense", url="https://legalpartners.com/dui-support"),
]

FAIL_MESSAGE = "ALERT: Your teen attempted to drive with a BAC of {bac}. This is above the legal limit and unsafe."
PASS_MESSAGE = "Good News: Your teen passed the BAC check with {bac}. They are being safe and responsible."

router = APIRouter()


def _public(user: User) -> PublicUser:
    return PublicUser.model_validate(user.model_dump(exclude={"password"}))


@router.get("/promotions", response_model=list[Promotion])
def promotions() -> list[Promotion]:
    return PROMOTIONS


# ── Users ──────────────────────────────────────────────────────────────────


@router.post("/users/register", response_model=PublicUser, status_code=201)
def register(account: RegisterIn, storage: BreathCheckStorage = Depends(site_storage)) -> PublicUser:
    with failure_message("Registration failed"):
        try:
            user = storage.register_user(account)
        except ValueError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _public(user)


@router.post("/users/login", response_model=PublicUser)
def login(credentials: LoginIn, storage: BreathCheckStorage = Depends(site_storage)) -> PublicUser:
    with failure_message("Login failed"):
        user = storage.authenticate(credentials.username, credentials.password)
        if user is None:
            raise HTTPException(status_code=401, detail="Invalid username or password")
        return _public(user)


@router.get("/users/{user_id}", response_model=PublicUser)
def get_user(user_id: int, storage: BreathCheckStorage = Depends(site_storage)) -> PublicUser:
    with failure_message("Failed to retrieve user"):
        user = storage.get_user(user_id)
        if user is None:
            raise not_found("User")
        return _public(user)


@router.get("/users/{user_id}/breath-tests", response_model=list[BreathTest])
def user_breath_tests(user_id: int, storage: BreathCheckStorage = Depends(site_storage)) -> list[BreathTest]:
    with failure_message("Failed to retrieve breath test history"):
        return storage.get_user_breath_tests(user_id)


# ── Breath tests ───────────────────────────────────────────────────────────


@router.post("/breath/scan", response_model=BreathResult)
def scan(sample: BreathSampleIn, storage: BreathCheckStorage = Depends(site_storage)) -> BreathResult:
    """Analyse a sample; the result is kept in the history of a known user."""
    with failure_message("Breath analysis failed"):
        result = evaluate_sample(sample.audio_sample)
        if sample.user_id is not None and storage.get_user(sample.user_id) is not None:
            storage.record_breath_test(sample.user_id, result, sample.audio_sample, sample.location)
        return result


@router.get("/breath/{test_id}", response_model=BreathTest)
def get_breath_test(test_id: int, storage: BreathCheckStorage = Depends(site_storage)) -> BreathTest:
    with failure_message("Failed to retrieve breath test"):
        test = storage.get_breath_test(test_id)
        if test is None:
            raise not_found("Breath test")
        return test


# ── Parent alerts ──────────────────────────────────────────────────────────


@router.post("/notify-parent", response_model=NotifyParentOut)
def notify_parent(body: NotifyParentIn, storage: BreathCheckStorage = Depends(site_storage)) -> NotifyParentOut:
    """
    Tell a teen's parent how a check went.

    Messages are logged and kept in ``parent_notifications``; no SMS or email
    provider is wired up, so both delivery flags stay false.
    """
    with failure_message("Failed to notify parent"):
        parent = storage.get_parent(body.teen_id)
        if parent is None:
            raise HTTPException(status_code=400, detail="Invalid teen ID")
        template = FAIL_MESSAGE if body.status == "fail" else PASS_MESSAGE
        storage.log_notification(parent, template.format(bac=body.bac))
        return NotifyParentOut(message="Parent notified", details=DeliveryOut(sms=False, email=False))
