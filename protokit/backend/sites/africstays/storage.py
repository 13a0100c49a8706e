"""Storage interface for AfricStays."""

from __future__ import annotations

from datetime import date
from typing import Any

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.sites.africstays.schemas import (
    Booking,
    BookingIn,
    Destination,
    DestinationIn,
    Property,
    PropertyIn,
    Testimonial,
    TestimonialIn,
    User,
    UserIn,
)

_SEARCH_FIELDS = ("title", "description", "location", "city", "country")


class AfricStaysStorage(SiteStorage):
    collections = {
        "users": User,
        "properties": Property,
        "destinations": Destination,
        "testimonials": Testimonial,
        "bookings": Booking,
    }

    users: Collection[User]
    properties: Collection[Property]
    destinations: Collection[Destination]
    testimonials: Collection[Testimonial]
    bookings: Collection[Booking]

    # ── Users ──────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.first(username=username)

    def create_user(self, user: UserIn | dict[str, Any]) -> User:
        return self.users.insert(user)

    # ── Properties ─────────────────────────────────────────────────────────

    def get_property(self, property_id: int) -> Property | None:
        return self.properties.get(property_id)

    def get_properties(self) -> list[Property]:
        return self.properties.all()

    def get_featured_properties(self) -> list[Property]:
        return self.properties.where(is_featured=True)

    def get_unique_stays(self) -> list[Property]:
        return self.properties.where(is_unique_stay=True)

    def create_property(self, prop: PropertyIn | dict[str, Any]) -> Property:
        return self.properties.insert(prop)

    def search_properties(
        self,
        query: str = "",
        check_in: date | None = None,
        check_out: date | None = None,
        guests: int | None = None,
    ) -> list[Property]:
        """
        Case-insensitive substring search over the descriptive fields.

        ``guests`` keeps properties that sleep at least that many people.
        When both dates are given, a property with an availability window
        must cover the whole stay; properties without a window always match.
        """
        needle = query.lower()

        def matches(prop: Property) -> bool:
            if needle and not any(needle in getattr(prop, f).lower() for f in _SEARCH_FIELDS):
                return False
            if guests and prop.max_guests < guests:
                return False
            if check_in and check_out:
                if prop.available_start and prop.available_start.date() > check_in:
                    return False
                if prop.available_end and prop.available_end.date() < check_out:
                    return False
            return True

        return self.properties.filter(matches)

    # ── Destinations ───────────────────────────────────────────────────────

    def get_destination(self, destination_id: int) -> Destination | None:
        return self.destinations.get(destination_id)

    def get_destinations(self) -> list[Destination]:
        return self.destinations.all()

    def create_destination(self, destination: DestinationIn | dict[str, Any]) -> Destination:
        return self.destinations.insert(destination)

    # ── Testimonials ───────────────────────────────────────────────────────

    def get_testimonial(self, testimonial_id: int) -> Testimonial | None:
        return self.testimonials.get(testimonial_id)

    def get_testimonials(self) -> list[Testimonial]:
        return self.testimonials.all()

    def create_testimonial(self, testimonial: TestimonialIn | dict[str, Any]) -> Testimonial:
        return self.testimonials.insert(testimonial)

    # ── Bookings ───────────────────────────────────────────────────────────

    def get_booking(self, booking_id: int) -> Booking | None:
        return self.bookings.get(booking_id)

    def get_user_bookings(self, user_id: int) -> list[Booking]:
        return self.bookings.where(user_id=user_id)

    def create_booking(self, booking: BookingIn | dict[str, Any]) -> Booking:
        return self.bookings.insert(booking)
