"""Pydantic schemas for the AfricStays travel-listing site."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, model_validator

from protokit.backend.schemas import Record, Schema

# ── Request models ──────────────────────────────────────────────────────────


class UserIn(Schema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    email: str
    full_name: str
    country: str | None = None
    profile_image: str | None = None
    is_host: bool = False


class PropertyIn(Schema):
    title: str
    description: str
    location: str
    city: str
    country: str
    price: float = Field(ge=0)
    image_url: str
    host_id: int
    rating: float | None = None
    review_count: int = 0
    property_type: str
    is_featured: bool = False
    is_unique_stay: bool = False
    unique_stay_type: str | None = None
    available_start: datetime | None = None
    available_end: datetime | None = None
    bedrooms: int
    bathrooms: int
    max_guests: int


class DestinationIn(Schema):
    name: str
    country: str
    image_url: str
    description: str | None = None
    featured: bool = False


class TestimonialIn(Schema):
    user_id: int
    rating: int = Field(ge=1, le=5)
    comment: str
    user_country: str | None = None
    user_name: str
    user_image: str | None = None
    property_id: int | None = None


class BookingIn(Schema):
    user_id: int
    property_id: int
    check_in: datetime
    check_out: datetime
    guests: int = Field(ge=1)
    total_price: float = Field(ge=0)
    status: str = "pending"

    @model_validator(mode="after")
    def _check_dates(self) -> BookingIn:
        if self.check_out <= self.check_in:
            raise ValueError("checkOut must be after checkIn")
        return self


# ── Stored records ──────────────────────────────────────────────────────────


class User(UserIn, Record):
    pass


class Property(PropertyIn, Record):
    pass


class Destination(DestinationIn, Record):
    pass


class Testimonial(TestimonialIn, Record):
    pass


class Booking(BookingIn, Record):
    pass
