"""Afriquisine API route handlers.

Every successful response wraps its payload in a named key
(``{"restaurants": [...]}``, ``{"review": {...}}``) except the user profile
routes, which return the user itself.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from protokit.backend.api.deps import site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.sites.afriquisine.schemas import (
    FavoriteIn,
    FavoritesOut,
    FeaturedMenuOut,
    FoodOriginStoryIn,
    InsightOut,
    InsightsOut,
    LoginIn,
    MenuOut,
    Preferences,
    ProfileOut,
    ProfilePatch,
    PublicUser,
    ReservationIn,
    ReservationOut,
    ReservationsOut,
    ReservationStatusIn,
    RestaurantOut,
    RestaurantsOut,
    ReviewIn,
    ReviewOut,
    ReviewsOut,
    StoriesOut,
    StoryOut,
    User,
    UserIn,
    UserOut,
    UserReviewsOut,
)
from protokit.backend.sites.afriquisine.storage import AfriquisineStorage

logger = logging.getLogger(__name__)

# Shown on every profile until preferences are stored per user.
DEFAULT_PREFERENCES = Preferences(
    favorite_regions=["West African", "North African"],
    dietary_restrictions=["Vegetarian options"],
    spice_level="Medium",
    notifications=True,
)

router = APIRouter()


def _public(user: User) -> PublicUser:
    return PublicUser.model_validate(user.model_dump(exclude={"password"}))


def _existing_user(storage: AfriquisineStorage, user_id: int) -> User:
    user = storage.get_user(user_id)
    if user is None:
        raise not_found("User")
    return user


def _existing_restaurant(storage: AfriquisineStorage, restaurant_id: int) -> None:
    if storage.get_restaurant(restaurant_id) is None:
        raise not_found("Restaurant")


# ── Restaurants ────────────────────────────────────────────────────────────


@router.get("/restaurants", response_model=RestaurantsOut)
def list_restaurants(storage: AfriquisineStorage = Depends(site_storage)) -> RestaurantsOut:
    with failure_message("Failed to fetch restaurants"):
        return RestaurantsOut(restaurants=storage.get_restaurants())


@router.get("/restaurants/cuisine/{cuisine_type}", response_model=RestaurantsOut)
def restaurants_by_cuisine(cuisine_type: str, storage: AfriquisineStorage = Depends(site_storage)) -> RestaurantsOut:
    with failure_message("Failed to fetch restaurants by cuisine"):
        return RestaurantsOut(restaurants=storage.get_restaurants_by_cuisine(cuisine_type))


@router.get("/restaurants/city/{city}", response_model=RestaurantsOut)
def restaurants_by_city(city: str, storage: AfriquisineStorage = Depends(site_storage)) -> RestaurantsOut:
    with failure_message("Failed to fetch restaurants by city"):
        return RestaurantsOut(restaurants=storage.get_restaurants_by_city(city))


@router.get("/restaurants/{restaurant_id}", response_model=RestaurantOut)
def get_restaurant(restaurant_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> RestaurantOut:
    with failure_message("Failed to fetch restaurant"):
        restaurant = storage.get_restaurant(restaurant_id)
        if restaurant is None:
            raise not_found("Restaurant")
        return RestaurantOut(restaurant=restaurant)


@router.get("/restaurants/{restaurant_id}/menu", response_model=MenuOut)
def restaurant_menu(restaurant_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> MenuOut:
    with failure_message("Failed to fetch menu items"):
        return MenuOut(menu_items=storage.get_menu(restaurant_id))


@router.get("/restaurants/{restaurant_id}/menu/featured", response_model=FeaturedMenuOut)
def featured_menu(restaurant_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> FeaturedMenuOut:
    with failure_message("Failed to fetch featured menu items"):
        return FeaturedMenuOut(featured_items=storage.get_featured_menu(restaurant_id))


@router.get("/restaurants/{restaurant_id}/reviews", response_model=ReviewsOut)
def restaurant_reviews(restaurant_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> ReviewsOut:
    with failure_message("Failed to fetch reviews"):
        return ReviewsOut(reviews=storage.get_restaurant_reviews(restaurant_id))


# ── Accounts & profiles ────────────────────────────────────────────────────


@router.post("/users", response_model=UserOut, status_code=201)
def create_user(account: UserIn, storage: AfriquisineStorage = Depends(site_storage)) -> UserOut:
    with failure_message("Failed to create user"):
        try:
            user = storage.create_user(account)
        except ValueError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return UserOut(user=_public(user))


@router.post("/login", response_model=UserOut)
def login(credentials: LoginIn, storage: AfriquisineStorage = Depends(site_storage)) -> UserOut:
    with failure_message("Failed to login"):
        user = storage.authenticate(credentials.username, credentials.password)
        if user is None:
            raise HTTPException(status_code=401, detail="Invalid username or password")
        return UserOut(user=_public(user))


@router.get("/users/{user_id}", response_model=ProfileOut)
def get_profile(user_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> ProfileOut:
    with failure_message("Failed to fetch user"):
        user = _existing_user(storage, user_id)
        return ProfileOut(**_public(user).model_dump(), preferences=DEFAULT_PREFERENCES)


@router.patch("/users/{user_id}", response_model=PublicUser)
def update_profile(
    user_id: int,
    patch: ProfilePatch,
    storage: AfriquisineStorage = Depends(site_storage),
) -> PublicUser:
    """Change the contact details; fields left out of the body are kept."""
    with failure_message("Failed to update user"):
        _existing_user(storage, user_id)
        user = storage.update_user(user_id, patch.model_dump(exclude_unset=True))
        return _public(user)


@router.get("/users/{user_id}/reviews", response_model=UserReviewsOut)
def user_reviews(user_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> UserReviewsOut:
    with failure_message("Failed to fetch reviews"):
        return UserReviewsOut(reviews=storage.get_user_reviews(user_id))


@router.get("/users/{user_id}/favorites", response_model=FavoritesOut)
def user_favorites(user_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> FavoritesOut:
    with failure_message("Failed to fetch favorites"):
        return FavoritesOut(favorites=storage.get_favorites(user_id))


@router.post("/users/{user_id}/favorites", response_model=FavoritesOut, status_code=201)
def add_favorite(
    user_id: int,
    body: FavoriteIn,
    storage: AfriquisineStorage = Depends(site_storage),
) -> FavoritesOut:
    """Add a favourite restaurant (adding it twice changes nothing) and return the list."""
    with failure_message("Failed to add favorite"):
        _existing_user(storage, user_id)
        _existing_restaurant(storage, body.restaurant_id)
        storage.add_favorite(user_id, body.restaurant_id)
        return FavoritesOut(favorites=storage.get_favorites(user_id))


@router.get("/users/{user_id}/reservations", response_model=ReservationsOut)
def user_reservations(user_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> ReservationsOut:
    with failure_message("Failed to fetch reservations"):
        return ReservationsOut(reservations=storage.get_user_reservations(user_id))


# ── Reviews & reservations ─────────────────────────────────────────────────


@router.post("/reviews", response_model=ReviewOut, status_code=201)
def create_review(review: ReviewIn, storage: AfriquisineStorage = Depends(site_storage)) -> ReviewOut:
    with failure_message("Failed to create review"):
        _existing_restaurant(storage, review.restaurant_id)
        return ReviewOut(review=storage.create_review(review))


@router.post("/reservations", response_model=ReservationOut, status_code=201)
def create_reservation(
    reservation: ReservationIn,
    storage: AfriquisineStorage = Depends(site_storage),
) -> ReservationOut:
    with failure_message("Failed to create reservation"):
        _existing_restaurant(storage, reservation.restaurant_id)
        return ReservationOut(reservation=storage.create_reservation(reservation))


@router.patch("/reservations/{reservation_id}/status", response_model=ReservationOut)
def update_reservation_status(
    reservation_id: int,
    body: ReservationStatusIn,
    storage: AfriquisineStorage = Depends(site_storage),
) -> ReservationOut:
    with failure_message("Failed to update reservation status"):
        reservation = storage.update_reservation_status(reservation_id, body.status)
        if reservation is None:
            raise not_found("Reservation")
        logger.info("Reservation #%d is now %s", reservation_id, body.status)
        return ReservationOut(reservation=reservation)


# ── Cultural insights ──────────────────────────────────────────────────────


@router.get("/cultural-insights", response_model=InsightsOut)
def list_insights(storage: AfriquisineStorage = Depends(site_storage)) -> InsightsOut:
    with failure_message("Failed to fetch cultural insights"):
        return InsightsOut(insights=storage.get_insights())


@router.get("/cultural-insights/cuisine/{cuisine_type}", response_model=InsightsOut)
def insights_by_cuisine(cuisine_type: str, storage: AfriquisineStorage = Depends(site_storage)) -> InsightsOut:
    with failure_message("Failed to fetch cultural insights by cuisine"):
        return InsightsOut(insights=storage.get_insights_by_cuisine(cuisine_type))


@router.get("/cultural-insights/{insight_id}", response_model=InsightOut)
def get_insight(insight_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> InsightOut:
    with failure_message("Failed to fetch cultural insight"):
        insight = storage.get_insight(insight_id)
        if insight is None:
            raise not_found("Cultural insight")
        return InsightOut(insight=insight)


# ── Food origin stories ────────────────────────────────────────────────────


@router.get("/food-origin-stories", response_model=StoriesOut)
def list_stories(storage: AfriquisineStorage = Depends(site_storage)) -> StoriesOut:
    with failure_message("Failed to fetch food origin stories"):
        return StoriesOut(stories=storage.get_stories())


@router.get("/food-origin-stories/dish/{dish_name}", response_model=StoriesOut)
def stories_by_dish(dish_name: str, storage: AfriquisineStorage = Depends(site_storage)) -> StoriesOut:
    with failure_message("Failed to fetch food origin stories by dish"):
        return StoriesOut(stories=storage.get_stories_by_dish(dish_name))


@router.get("/food-origin-stories/cuisine/{cuisine_type}", response_model=StoriesOut)
def stories_by_cuisine(cuisine_type: str, storage: AfriquisineStorage = Depends(site_storage)) -> StoriesOut:
    with failure_message("Failed to fetch food origin stories by cuisine"):
        return StoriesOut(stories=storage.get_stories_by_cuisine(cuisine_type))


@router.get("/food-origin-stories/{story_id}", response_model=StoryOut)
def get_story(story_id: int, storage: AfriquisineStorage = Depends(site_storage)) -> StoryOut:
    with failure_message("Failed to fetch food origin story"):
        story = storage.get_story(story_id)
        if story is None:
            raise not_found("Food origin story")
        return StoryOut(story=story)


@router.post("/food-origin-stories", response_model=StoryOut, status_code=201)
def create_story(story: FoodOriginStoryIn, storage: AfriquisineStorage = Depends(site_storage)) -> StoryOut:
    with failure_message("Failed to create food origin story"):
        return StoryOut(story=storage.create_story(story))
