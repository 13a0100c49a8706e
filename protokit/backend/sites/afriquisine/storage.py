"""Storage interface for Afriquisine."""

from __future__ import annotations

import logging
from typing import Any

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.core.utils.passwords import hash_password, verify_password
from protokit.backend.sites.afriquisine.schemas import (
    CulturalInsight,
    Favorite,
    FavoriteOut,
    FavoriteRestaurant,
    FoodOriginStory,
    FoodOriginStoryIn,
    MenuItem,
    Reservation,
    ReservationIn,
    Restaurant,
    RestaurantSummary,
    Review,
    ReviewIn,
    User,
    UserIn,
    UserReviewOut,
)

logger = logging.getLogger(__name__)


class AfriquisineStorage(SiteStorage):
    collections = {
        "users": User,
        "restaurants": Restaurant,
        "menu_items": MenuItem,
        "reviews": Review,
        "reservations": Reservation,
        "favorites": Favorite,
        "cultural_insights": CulturalInsight,
        "food_origin_stories": FoodOriginStory,
    }

    users: Collection[User]
    restaurants: Collection[Restaurant]
    menu_items: Collection[MenuItem]
    reviews: Collection[Review]
    reservations: Collection[Reservation]
    favorites: Collection[Favorite]
    cultural_insights: Collection[CulturalInsight]
    food_origin_stories: Collection[FoodOriginStory]

    # ── Users ──────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.first(username=username)

    def create_user(self, account: UserIn) -> User:
        """
        Store a new account with a hashed password.

        Raises:
            ValueError: If the username is taken
        """
        if self.get_user_by_username(account.username) is not None:
            raise ValueError("Username already exists")
        user = self.users.insert({**account.model_dump(), "password": hash_password(account.password)})
        logger.info("Created diner account %s", user.username)
        return user

    def authenticate(self, username: str, password: str) -> User | None:
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            return None
        return user

    def update_user(self, user_id: int, changes: dict[str, Any]) -> User | None:
        return self.users.update(user_id, changes)

    # ── Restaurants & menus ────────────────────────────────────────────────

    def get_restaurants(self) -> list[Restaurant]:
        return self.restaurants.all()

    def get_restaurant(self, restaurant_id: int) -> Restaurant | None:
        return self.restaurants.get(restaurant_id)

    def get_restaurants_by_cuisine(self, cuisine_type: str) -> list[Restaurant]:
        return self.restaurants.where(cuisine_type=cuisine_type)

    def get_restaurants_by_city(self, city: str) -> list[Restaurant]:
        """Restaurants whose city contains ``city``, ignoring case."""
        needle = city.lower()
        return self.restaurants.filter(lambda r: needle in r.city.lower())

    def get_menu(self, restaurant_id: int) -> list[MenuItem]:
        return self.menu_items.where(restaurant_id=restaurant_id)

    def get_featured_menu(self, restaurant_id: int) -> list[MenuItem]:
        return self.menu_items.where(restaurant_id=restaurant_id, featured=True)

    # ── Reviews ────────────────────────────────────────────────────────────

    def get_restaurant_reviews(self, restaurant_id: int) -> list[Review]:
        return self.reviews.where(restaurant_id=restaurant_id)

    def get_user_reviews(self, user_id: int) -> list[UserReviewOut]:
        """The user's reviews, each with a short summary of the restaurant."""
        enriched = []
        for review in self.reviews.where(user_id=user_id):
            restaurant = self.restaurants.get(review.restaurant_id)
            summary = RestaurantSummary.model_validate(restaurant) if restaurant is not None else None
            enriched.append(UserReviewOut(**review.model_dump(), restaurant=summary))
        return enriched

    def create_review(self, review: ReviewIn) -> Review:
        """Store a review and refresh the restaurant's average rating and count."""
        created = self.reviews.insert(review.model_dump())
        ratings = [r.rating for r in self.get_restaurant_reviews(review.restaurant_id)]
        self.restaurants.update(review.restaurant_id, {
            "rating": round(sum(ratings) / len(ratings), 1),
            "review_count": len(ratings),
        })
        return created

    # ── Reservations ───────────────────────────────────────────────────────

    def get_user_reservations(self, user_id: int) -> list[Reservation]:
        return self.reservations.where(user_id=user_id)

    def create_reservation(self, reservation: ReservationIn) -> Reservation:
        return self.reservations.insert(reservation.model_dump())

    def update_reservation_status(self, reservation_id: int, status: str) -> Reservation | None:
        return self.reservations.update(reservation_id, {"status": status})

    # ── Favourites ─────────────────────────────────────────────────────────

    def get_favorites(self, user_id: int) -> list[FavoriteOut]:
        favorites = []
        for favorite in self.favorites.where(user_id=user_id):
            restaurant = self.restaurants.get(favorite.restaurant_id)
            if restaurant is None:
                continue
            favorites.append(FavoriteOut(
                id=favorite.id,
                restaurant=FavoriteRestaurant.model_validate(restaurant),
                added_at=favorite.added_at,
            ))
        return favorites

    def add_favorite(self, user_id: int, restaurant_id: int) -> tuple[Favorite, bool]:
        """Mark a restaurant as a favourite once; the flag says whether it is new."""
        return self.favorites.get_or_insert({"user_id": user_id, "restaurant_id": restaurant_id})

    # ── Cultural insights & origin stories ─────────────────────────────────

    def get_insights(self) -> list[CulturalInsight]:
        return self.cultural_insights.all()

    def get_insight(self, insight_id: int) -> CulturalInsight | None:
        return self.cultural_insights.get(insight_id)

    def get_insights_by_cuisine(self, cuisine_type: str) -> list[CulturalInsight]:
        return self.cultural_insights.where(cuisine_type=cuisine_type)

    def get_stories(self) -> list[FoodOriginStory]:
        return self.food_origin_stories.all()

    def get_story(self, story_id: int) -> FoodOriginStory | None:
        return self.food_origin_stories.get(story_id)

    def get_stories_by_dish(self, dish_name: str) -> list[FoodOriginStory]:
        """Stories whose dish name contains ``dish_name``, ignoring case."""
        needle = dish_name.lower()
        return self.food_origin_stories.filter(lambda s: needle in s.dish_name.lower())

    def get_stories_by_cuisine(self, cuisine_type: str) -> list[FoodOriginStory]:
        return self.food_origin_stories.where(cuisine_type=cuisine_type)

    def create_story(self, story: FoodOriginStoryIn) -> FoodOriginStory:
        return self.food_origin_stories.insert(story.model_dump())
