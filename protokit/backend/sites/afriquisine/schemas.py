"""Pydantic schemas for Afriquisine, the African restaurant directory."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from protokit.backend.schemas import Record, Schema, utcnow

ReservationStatus = Literal["pending", "confirmed", "cancelled", "completed"]

# ── Request models ──────────────────────────────────────────────────────────


class UserIn(Schema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone_number: str | None = None
    is_guest: bool = False


class LoginIn(Schema):
    username: str
    password: str


class ProfilePatch(Schema):
    full_name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    phone_number: str | None = None


class ReviewIn(Schema):
    restaurant_id: int
    user_id: int
    rating: float = Field(ge=1, le=5)
    comment: str | None = None


class ReservationIn(Schema):
    restaurant_id: int
    user_id: int
    date: datetime
    party_size: int = Field(gt=0)
    status: ReservationStatus = "pending"
    special_requests: str | None = None


class ReservationStatusIn(Schema):
    status: Literal["confirmed", "cancelled", "completed"]


class FavoriteIn(Schema):
    restaurant_id: int


class FoodOriginStoryIn(Schema):
    dish_name: str
    cuisine_type: str
    country: str
    story_content: str
    historical_period: str | None = None
    cultural_significance: str | None = None
    ingredients: str | None = None
    image_url: str | None = None


# ── Stored records ──────────────────────────────────────────────────────────


class PublicUser(Record):
    username: str
    full_name: str
    email: str
    phone_number: str | None = None
    is_guest: bool = False
    created_at: datetime = Field(default_factory=utcnow)


class User(PublicUser):
    password: str


class Restaurant(Record):
    name: str
    description: str
    cuisine_type: str
    country: str
    address: str
    city: str
    phone_number: str | None = None
    website: str | None = None
    opening_hours: str
    price_range: str
    image_url: str
    rating: float = 0
    review_count: int = 0


class MenuItem(Record):
    restaurant_id: int
    name: str
    description: str
    price: float
    image_url: str | None = None
    featured: bool = False


class Review(Record):
    restaurant_id: int
    user_id: int
    rating: float
    comment: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class Reservation(Record):
    restaurant_id: int
    user_id: int
    date: datetime
    party_size: int
    status: ReservationStatus = "pending"
    special_requests: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class Favorite(Record):
    user_id: int
    restaurant_id: int
    added_at: datetime = Field(default_factory=utcnow)


class CulturalInsight(Record):
    title: str
    content: str
    cuisine_type: str
    region: str
    image_url: str


class FoodOriginStory(FoodOriginStoryIn, Record):
    pass


# ── Response models ─────────────────────────────────────────────────────────


class Preferences(Schema):
    favorite_regions: list[str]
    dietary_restrictions: list[str]
    spice_level: str
    notifications: bool


class ProfileOut(PublicUser):
    preferences: Preferences


class RestaurantSummary(Schema):
    name: str
    cuisine_type: str
    image_url: str


class UserReviewOut(Review):
    restaurant: RestaurantSummary | None = None


class FavoriteRestaurant(Schema):
    id: int
    name: str
    cuisine_type: str
    address: str
    image_url: str
    rating: float


class FavoriteOut(Schema):
    id: int
    restaurant: FavoriteRestaurant
    added_at: datetime


class UserOut(Schema):
    user: PublicUser


class RestaurantsOut(Schema):
    restaurants: list[Restaurant]


class RestaurantOut(Schema):
    restaurant: Restaurant


class MenuOut(Schema):
    menu_items: list[MenuItem]


class FeaturedMenuOut(Schema):
    featured_items: list[MenuItem]


class ReviewsOut(Schema):
    reviews: list[Review]


class UserReviewsOut(Schema):
    reviews: list[UserReviewOut]


class ReviewOut(Schema):
    review: Review


class FavoritesOut(Schema):
    favorites: list[FavoriteOut]


class ReservationsOut(Schema):
    reservations: list[Reservation]


class ReservationOut(Schema):
    reservation: Reservation


class InsightsOut(Schema):
    insights: list[CulturalInsight]


class InsightOut(Schema):
    insight: CulturalInsight


class StoriesOut(Schema):
    stories: list[FoodOriginStory]


class StoryOut(Schema):
    story: FoodOriginStory
