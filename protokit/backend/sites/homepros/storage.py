"""Storage interface for HomePros Africa."""

from __future__ import annotations

import logging
from typing import Any

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.sites.homepros.schemas import (
    ContactForm,
    ContactFormIn,
    Professional,
    ProfessionalIn,
    Service,
    ServiceIn,
    Testimonial,
    TestimonialIn,
    User,
    UserIn,
)

logger = logging.getLogger(__name__)


class HomeProsStorage(SiteStorage):
    collections = {
        "users": User,
        "services": Service,
        "professionals": Professional,
        "testimonials": Testimonial,
        "contact_forms": ContactForm,
    }

    users: Collection[User]
    services: Collection[Service]
    professionals: Collection[Professional]
    testimonials: Collection[Testimonial]
    contact_forms: Collection[ContactForm]

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.first(username=username)

    def create_user(self, user: UserIn | dict[str, Any]) -> User:
        return self.users.insert(user)

    # ── Services ───────────────────────────────────────────────────────────

    def get_services(self) -> list[Service]:
        return self.services.all()

    def get_service(self, service_id: int) -> Service | None:
        return self.services.get(service_id)

    def get_service_by_slug(self, slug: str) -> Service | None:
        return self.services.first(slug=slug)

    def create_service(self, service: ServiceIn | dict[str, Any]) -> Service:
        return self.services.insert(service)

    # ── Professionals ──────────────────────────────────────────────────────

    def get_professionals(self, profession: str | None = None) -> list[Professional]:
        """All professionals, or those whose profession mentions ``profession``."""
        if not profession:
            return self.professionals.all()
        needle = profession.lower()
        return self.professionals.filter(lambda p: needle in p.profession.lower())

    def get_professional(self, professional_id: int) -> Professional | None:
        return self.professionals.get(professional_id)

    def create_professional(self, professional: ProfessionalIn | dict[str, Any]) -> Professional:
        return self.professionals.insert(professional)

    # ── Testimonials & contact ─────────────────────────────────────────────

    def get_testimonials(self) -> list[Testimonial]:
        return self.testimonials.all()

    def get_testimonial(self, testimonial_id: int) -> Testimonial | None:
        return self.testimonials.get(testimonial_id)

    def create_testimonial(self, testimonial: TestimonialIn | dict[str, Any]) -> Testimonial:
        return self.testimonials.insert(testimonial)

    def save_contact_form(self, form: ContactFormIn) -> ContactForm:
        saved = self.contact_forms.insert(form)
        logger.info("Contact form #%d received: %s", saved.id, saved.subject)
        return saved
