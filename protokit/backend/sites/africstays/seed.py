"""Demo listings inserted into an empty AfricStays store."""

from __future__ import annotations

import logging
from datetime import datetime

from protokit.backend.sites.africstays.storage import AfricStaysStorage

logger = logging.getLogger(__name__)

_IMG = "https://images.unsplash.com/"

HOSTS = [
    {"username": "kwame_host", "email": "kwame@example.com", "full_name": "Kwame",
     "country": "South Africa", "profile_image": _IMG + "photo-1506794778202-cad84cf45f1d"},
    {"username": "amara_host", "email": "amara@example.com", "full_name": "Amara",
     "country": "Morocco", "profile_image": _IMG + "photo-1531123897727-8f129e1688ce"},
    {"username": "samuel_host", "email": "samuel@example.com", "full_name": "Samuel",
     "country": "Kenya", "profile_image": _IMG + "photo-1507003211169-0a1dd7228f2d"},
]

# Guests who wrote the testimonials; they take ids 4 to 6 after the hosts.
GUESTS = [
    {"username": "sarah_travels", "email": "sarah@example.com", "full_name": "Sarah",
     "country": "United States", "profile_image": _IMG + "photo-1494790108377-be9c29b29330"},
    {"username": "james_maria", "email": "james.maria@example.com", "full_name": "James & Maria",
     "country": "Brazil", "profile_image": _IMG + "photo-1507003211169-0a1dd7228f2d"},
    {"username": "yuki_abroad", "email": "yuki@example.com", "full_name": "Yuki",
     "country": "Japan", "profile_image": _IMG + "photo-1506794778202-cad84cf45f1d"},
]

# (title, description, location, city, country, price, image, host, rating, reviews,
#  type, featured, unique stay type, available start, available end, bedrooms, bathrooms, guests)
PROPERTIES = [
    ("Luxury Safari Lodge",
     "Experience the wild in luxury with this amazing safari lodge overlooking the Serengeti plains.",
     "Serengeti", "Serengeti", "Tanzania", 275, "photo-1523805009345-7448845a9e53", 1, 4.9, 48,
     "Lodge", True, None, (2023, 11, 12), (2023, 11, 18), 2, 2, 4),
    ("Coastal Villa",
     "Beautiful beachfront villa with private access to the pristine beaches of Zanzibar.",
     "Zanzibar", "Zanzibar", "Tanzania", 195, "photo-1520250497591-112f2f40a3f4", 1, 4.8, 36,
     "Villa", True, "Beachside Villas", (2023, 12, 5), (2023, 12, 12), 3, 2, 6),
    ("Desert Retreat",
     "Authentic Moroccan riad with modern amenities in the heart of Marrakech.",
     "Marrakech", "Marrakech", "Morocco", 150, "photo-1496497243327-9dccd845c35f", 2, 4.7, 29,
     "Riad", True, None, (2023, 10, 20), (2023, 10, 27), 2, 1, 4),
    ("Mountain Cabin",
     "Cozy cabin with stunning views of Table Mountain and the city below.",
     "Cape Town", "Cape Town", "South Africa", 130, "photo-1489493512598-d08130f49bea", 1, 4.6, 24,
     "Cabin", True, None, (2024, 1, 5), (2024, 1, 12), 1, 1, 2),
    ("Treehouse Hideaway",
     "Sleep among the treetops in this eco-friendly, luxurious treehouse retreat.",
     "Nairobi", "Nairobi", "Kenya", 220, "photo-1604014838575-c9320c8acf7a", 3, 4.9, 41,
     "Treehouse", False, "Treehouse Retreats", (2023, 11, 1), (2023, 11, 30), 1, 1, 2),
    ("Traditional Maasai Hut",
     "Experience authentic African living with modern comforts in this traditional Maasai dwelling.",
     "Masai Mara", "Narok", "Kenya", 95, "photo-1551918120-9739cb430c6d", 3, 4.7, 32,
     "Hut", False, "Traditional Huts", (2023, 10, 15), (2023, 12, 15), 1, 1, 3),
    ("Desert Camp Luxury",
     "Luxury camping in the Sahara Desert with incredible stargazing opportunities.",
     "Sahara Desert", "Merzouga", "Morocco", 180, "photo-1573843981267-be1999ff37cd", 2, 4.8, 38,
     "Desert Camp", False, "Desert Camps", (2023, 9, 1), (2023, 10, 31), 1, 1, 2),
    ("Waterfront Bungalow",
     "Charming bungalow right on the water with panoramic lake views.",
     "Lake Victoria", "Entebbe", "Uganda", 160, "photo-1520250497591-112f2f40a3f4", 3, 4.6, 27,
     "Bungalow", False, None, (2023, 11, 10), (2023, 12, 10), 2, 1, 4),
]

DESTINATIONS = [
    ("Serengeti National Park", "Tanzania", "photo-1516026672322-bc52d61a55d5",
     "Home to the great migration, one of the most impressive wildlife events worldwide."),
    ("Cape Town", "South Africa", "photo-1489493512598-d08130f49bea",
     "Stunning coastal city with Table Mountain as its backdrop."),
    ("Marrakech", "Morocco", "photo-1496497243327-9dccd845c35f",
     "A bustling city known for its markets, gardens, palaces, and mosques."),
    ("Zanzibar", "Tanzania", "photo-1523805009345-7448845a9e53",
     "Archipelago known for its beautiful beaches and historical Stone Town."),
    ("Victoria Falls", "Zimbabwe/Zambia", "photo-1516026672322-bc52d61a55d5",
     "One of the world's most impressive waterfalls, located on the Zambezi River."),
    ("Cairo", "Egypt", "photo-1504432842672-1a79f78e4084",
     "Home to the Giza pyramids and the iconic Sphinx."),
]

TESTIMONIALS = [
    {"user_id": 4, "rating": 5, "user_country": "United States", "user_name": "Sarah",
     "user_image": _IMG + "photo-1494790108377-be9c29b29330", "property_id": 5,
     "comment": "Our stay at the treehouse in Kenya was magical! Waking up to the sounds of nature "
                "and seeing wildlife from our balcony was an unforgettable experience."},
    {"user_id": 5, "rating": 5, "user_country": "Brazil", "user_name": "James & Maria",
     "user_image": _IMG + "photo-1507003211169-0a1dd7228f2d", "property_id": 2,
     "comment": "The coastal villa in Zanzibar exceeded all our expectations. The host was incredibly "
                "welcoming and the private beach access made our honeymoon perfect."},
    {"user_id": 6, "rating": 5, "user_country": "Japan", "user_name": "Yuki",
     "user_image": _IMG + "photo-1506794778202-cad84cf45f1d", "property_id": 3,
     "comment": "Staying in a traditional Moroccan riad was the highlight of our trip. The architecture, "
                "the food, and the warm hospitality made us feel like we were part of the family."},
]


def seed(storage: AfricStaysStorage) -> None:
    """Insert hosts, guests, properties, destinations and testimonials."""
    for host in HOSTS:
        storage.create_user({**host, "password": "password123", "is_host": True})
    for guest in GUESTS:
        storage.create_user({**guest, "password": "password123"})

    for (title, description, location, city, country, price, image, host_id, rating, reviews,
         property_type, featured, unique_type, start, end, bedrooms, bathrooms, guests) in PROPERTIES:
        storage.create_property({
            "title": title,
            "description": description,
            "location": location,
            "city": city,
            "country": country,
            "price": price,
            "image_url": _IMG + image,
            "host_id": host_id,
            "rating": rating,
            "review_count": reviews,
            "property_type": property_type,
            "is_featured": featured,
            "is_unique_stay": unique_type is not None,
            "unique_stay_type": unique_type,
            "available_start": datetime(*start),
            "available_end": datetime(*end),
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "max_guests": guests,
        })

    for name, country, image, description in DESTINATIONS:
        storage.create_destination({
            "name": name,
            "country": country,
            "image_url": _IMG + image,
            "description": description,
            "featured": True,
        })

    for testimonial in TESTIMONIALS:
        storage.create_testimonial(testimonial)

    logger.debug("AfricStays seed data inserted")
