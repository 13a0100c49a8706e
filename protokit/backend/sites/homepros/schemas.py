"""Pydantic schemas for the HomePros Africa directory."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from protokit.backend.schemas import Record, Schema, utcnow

# ── Request models ──────────────────────────────────────────────────────────


class UserIn(Schema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ServiceIn(Schema):
    name: str
    slug: str = Field(min_length=1)
    description: str
    image_url: str


class ProfessionalIn(Schema):
    name: str
    profession: str
    bio: str
    image_url: str
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    verifications: list[str] = Field(default_factory=list)


class TestimonialIn(Schema):
    name: str
    location: str
    rating: int = Field(ge=1, le=5)
    comment: str
    service: str
    image_url: str


class ContactFormIn(Schema):
    name: str = Field(min_length=2)
    email: EmailStr
    subject: str = Field(min_length=2)
    message: str = Field(min_length=10)


# ── Stored records ──────────────────────────────────────────────────────────


class User(UserIn, Record):
    pass


class Service(ServiceIn, Record):
    pass


class Professional(ProfessionalIn, Record):
    pass


class Testimonial(TestimonialIn, Record):
    pass


class ContactForm(ContactFormIn, Record):
    created_at: datetime = Field(default_factory=utcnow)
