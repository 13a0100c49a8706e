"""AfricStays API route handlers."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query

from protokit.backend.api.deps import site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.sites.africstays.schemas import Booking, BookingIn, Destination, Property, Testimonial
from protokit.backend.sites.africstays.storage import AfricStaysStorage

logger = logging.getLogger(__name__)

router = APIRouter()

# ── Properties ─────────────────────────────────────────────────────────────


@router.get("/properties", response_model=list[Property])
def list_properties(storage: AfricStaysStorage = Depends(site_storage)) -> list[Property]:
    with failure_message("Failed to fetch properties"):
        return storage.get_properties()


@router.get("/properties/featured", response_model=list[Property])
def featured_properties(storage: AfricStaysStorage = Depends(site_storage)) -> list[Property]:
    with failure_message("Failed to fetch featured properties"):
        return storage.get_featured_properties()


@router.get("/properties/unique-stays", response_model=list[Property])
def unique_stays(storage: AfricStaysStorage = Depends(site_storage)) -> list[Property]:
    with failure_message("Failed to fetch unique stays"):
        return storage.get_unique_stays()


@router.get("/properties/{property_id}", response_model=Property)
def get_property(property_id: int, storage: AfricStaysStorage = Depends(site_storage)) -> Property:
    with failure_message("Failed to fetch property"):
        prop = storage.get_property(property_id)
        if prop is None:
            raise not_found("Property")
        return prop


# ── Destinations & testimonials ────────────────────────────────────────────


@router.get("/destinations", response_model=list[Destination])
def list_destinations(storage: AfricStaysStorage = Depends(site_storage)) -> list[Destination]:
    with failure_message("Failed to fetch destinations"):
        return storage.get_destinations()


@router.get("/destinations/{destination_id}", response_model=Destination)
def get_destination(destination_id: int, storage: AfricStaysStorage = Depends(site_storage)) -> Destination:
    with failure_message("Failed to fetch destination"):
        destination = storage.get_destination(destination_id)
        if destination is None:
            raise not_found("Destination")
        return destination


@router.get("/testimonials", response_model=list[Testimonial])
def list_testimonials(storage: AfricStaysStorage = Depends(site_storage)) -> list[Testimonial]:
    with failure_message("Failed to fetch testimonials"):
        return storage.get_testimonials()


# ── Search ─────────────────────────────────────────────────────────────────


@router.get("/search", response_model=list[Property])
def search(
    q: str = "",
    guests: int | None = Query(default=None, ge=1),
    check_in: date | None = Query(default=None, alias="checkIn"),
    check_out: date | None = Query(default=None, alias="checkOut"),
    storage: AfricStaysStorage = Depends(site_storage),
) -> list[Property]:
    """Free-text property search with optional guest count and stay dates."""
    with failure_message("Failed to search properties"):
        return storage.search_properties(q, check_in, check_out, guests)


# ── Bookings ───────────────────────────────────────────────────────────────


@router.post("/bookings", response_model=Booking, status_code=201)
def create_booking(booking: BookingIn, storage: AfricStaysStorage = Depends(site_storage)) -> Booking:
    with failure_message("Failed to create booking"):
        if storage.get_property(booking.property_id) is None:
            raise not_found("Property")
        created = storage.create_booking(booking)
        logger.info("Booking #%d created for property #%d", created.id, created.property_id)
        return created


@router.get("/users/{user_id}/bookings", response_model=list[Booking])
def user_bookings(user_id: int, storage: AfricStaysStorage = Depends(site_storage)) -> list[Booking]:
    with failure_message("Failed to fetch user bookings"):
        return storage.get_user_bookings(user_id)
