"""HomePros Africa API route handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from protokit.backend.api.deps import site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.schemas import MessageOut
from protokit.backend.sites.homepros.schemas import ContactFormIn, Professional, Service, Testimonial
from protokit.backend.sites.homepros.storage import HomeProsStorage

logger = logging.getLogger(__name__)

CONTACT_RECEIVED = "Your message has been sent successfully. We'll get back to you soon."

router = APIRouter()

# ── Services ───────────────────────────────────────────────────────────────


@router.get("/services", response_model=list[Service])
def list_services(storage: HomeProsStorage = Depends(site_storage)) -> list[Service]:
    with failure_message("Failed to fetch services"):
        return storage.get_services()


@router.get("/services/slug/{slug}", response_model=Service)
def service_by_slug(slug: str, storage: HomeProsStorage = Depends(site_storage)) -> Service:
    with failure_message("Failed to fetch service"):
        service = storage.get_service_by_slug(slug)
        if service is None:
            raise not_found("Service")
        return service


@router.get("/services/{service_id}", response_model=Service)
def get_service(service_id: int, storage: HomeProsStorage = Depends(site_storage)) -> Service:
    with failure_message("Failed to fetch service"):
        service = storage.get_service(service_id)
        if service is None:
            raise not_found("Service")
        return service


# ── Professionals ──────────────────────────────────────────────────────────


@router.get("/professionals", response_model=list[Professional])
def list_professionals(
    profession: str | None = None,
    storage: HomeProsStorage = Depends(site_storage),
) -> list[Professional]:
    with failure_message("Failed to fetch professionals"):
        return storage.get_professionals(profession)


@router.get("/professionals/{professional_id}", response_model=Professional)
def get_professional(professional_id: int, storage: HomeProsStorage = Depends(site_storage)) -> Professional:
    with failure_message("Failed to fetch professional"):
        professional = storage.get_professional(professional_id)
        if professional is None:
            raise not_found("Professional")
        return professional


# ── Testimonials & contact ─────────────────────────────────────────────────


@router.get("/testimonials", response_model=list[Testimonial])
def list_testimonials(storage: HomeProsStorage = Depends(site_storage)) -> list[Testimonial]:
    with failure_message("Failed to fetch testimonials"):
        return storage.get_testimonials()


@router.post("/contact", response_model=MessageOut, status_code=201)
def submit_contact(form: ContactFormIn, storage: HomeProsStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to submit contact form"):
        storage.save_contact_form(form)
        return MessageOut(message=CONTACT_RECEIVED)
