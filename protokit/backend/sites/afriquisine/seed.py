"""Demo restaurants, menus, stories and one diner for an empty Afriquisine store."""

from __future__ import annotations

import logging
from datetime import timedelta

from protokit.backend.schemas import utcnow
from protokit.backend.sites.afriquisine.schemas import ReservationIn, ReviewIn, UserIn
from protokit.backend.sites.afriquisine.storage import AfriquisineStorage

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com/"

DINER = UserIn(
    username="afrofoodie",
    password="password123",
    full_name="Amara Johnson",
    email="amara.johnson@example.com",
    phone_number="+1 (555) 123-4567",
)

RESTAURANTS = [
    {
        "name": "Abyssinia Ethiopian",
        "description": "Authentic Ethiopian cuisine featuring traditional injera and diverse stews.",
        "cuisine_type": "Ethiopian", "country": "Ethiopia",
        "address": "123 Kimathi Street", "city": "Nairobi",
        "phone_number": "+254 123 456 789", "website": "https://ikescafe.com",
        "opening_hours": "Mon-Fri: 11:00 AM - 10:00 PM, Sat-Sun: 12:00 PM - 11:00 PM",
        "price_range": "$$", "image_url": UNSPLASH + "photo-1414235077428-338989a2e8c0",
    },
    {
        "name": "Tagine House",
        "description": "Traditional tagines and couscous in an immersive Moroccan setting.",
        "cuisine_type": "Moroccan", "country": "Morocco",
        "address": "45 Jemaa el-Fnaa", "city": "Marrakesh",
        "phone_number": "+212 524 555 7890", "website": "https://immysafricancuisine.com",
        "opening_hours": "Daily: 12:00 PM - 11:00 PM",
        "price_range": "$$$", "image_url": "/images/cuisines/tagine-house.png",
    },
    {
        "name": "Lagos Kitchen",
        "description": "Famous for jollof rice, pounded yam, and egusi soup with live music.",
        "cuisine_type": "Nigerian", "country": "Nigeria",
        "address": "78 Balogun Street", "city": "Lagos",
        "phone_number": "+234 80 277 8901", "website": "www.lagoskitchen.com",
        "opening_hours": "Mon-Sat: 11:00 AM - 10:00 PM, Sun: 12:00 PM - 8:00 PM",
        "price_range": "$$", "image_url": UNSPLASH + "photo-1544025162-d76694265947",
    },
    {
        "name": "Accra Flavors",
        "description": "Authentic Ghanaian cuisine featuring banku, waakye, and red-red beans.",
        "cuisine_type": "Ghanaian", "country": "Ghana",
        "address": "25 Liberation Road", "city": "Accra",
        "phone_number": "+233 24 455 6789", "website": "www.accraflavors.com",
        "opening_hours": "Daily: 10:00 AM - 9:00 PM",
        "price_range": "$$", "image_url": UNSPLASH + "photo-1583588354531-9c0fd9fef6e1",
    },
]

# (restaurant id, name, description, price, image); all featured
MENU_ITEMS = [
    (1, "Doro Wat", "Spicy chicken stew with berbere spice blend", 18.99,
     UNSPLASH + "photo-1568600891621-50f697b9a1c7"),
    (1, "Injera Platter", "Sourdough flatbread with 6 different stews", 24.99,
     UNSPLASH + "photo-1511690656952-34342bb7c2f2"),
    (1, "Kitfo", "Minced beef seasoned with mitmita and niter kibbeh", 16.99,
     UNSPLASH + "photo-1606755957235-41eb44ce5ff6"),
    (2, "Lamb Tagine", "Slow-cooked lamb with apricots, prunes and aromatic spices", 22.99,
     UNSPLASH + "photo-1541518763669-27fef04b14ea"),
    (3, "Waakye", "Traditional Ghanaian dish of rice and beans cooked with millet leaves, "
     "served with various accompaniments", 13.99, "/assets/waakye-ghana.png"),
    (3, "Jollof Rice", "Nigerian-style fragrant rice cooked in a rich tomato and pepper sauce", 15.99,
     "/assets/jollof-rice.png"),
    (3, "Red-Red", "Black-eyed bean stew cooked with palm oil, served with fried plantains", 12.99,
     UNSPLASH + "photo-1591241900019-33dc10b3f5e3"),
    (4, "Jollof Rice", "Ghanaian-style aromatic rice cooked with tomatoes, peppers and spices", 14.99,
     UNSPLASH + "photo-1574653853027-5382a3d23a15"),
    (4, "Egusi Soup", "Melon seed-based soup with leafy vegetables and choice of protein", 16.99,
     UNSPLASH + "photo-1548352318-4ff2a7a233fe"),
    (4, "Pounded Yam with Afang Soup", "Smooth pounded yam served with traditional Afang leaf soup", 17.99,
     UNSPLASH + "photo-1604329760661-e71dc83f8f26"),
]

# (title, content, cuisine, region, image)
INSIGHTS = [
    ("The Art of Injera Making",
     "Discover the ancient fermentation techniques behind Ethiopia's famous sourdough flatbread "
     "and its cultural significance.",
     "Ethiopian", "East Africa", "/assets/injera-making.png"),
    ("The Jollof Rice Debate",
     "Explore the friendly rivalry between Ghana, Nigeria, and Senegal over who makes the best "
     "version of this beloved rice dish.",
     "West African", "West Africa", "/assets/jollof-rice.png"),
    ("Spices of Morocco",
     "Learn about the essential spice blends that give Moroccan cuisine its distinctive flavors and aromas.",
     "North African", "North Africa", UNSPLASH + "photo-1541518763669-27fef04b14ea"),
]

STORIES = [
    {
        "dish_name": "Jollof Rice", "cuisine_type": "Nigerian", "country": "Nigeria",
        "story_content": "Jollof rice is believed to have originated in the Senegambia region among the "
                         "Wolof people. As trade routes expanded in the 14th century it spread across West "
                         "Africa, and each region added its own twist to the one-pot tomato rice.",
        "historical_period": "14th century",
        "cultural_significance": "Present at virtually every celebration, from weddings to funerals, and a "
                                 "symbol of shared West African identity.",
        "ingredients": "Rice, tomatoes, tomato paste, onions, red bell peppers, scotch bonnet peppers, "
                       "vegetable oil, thyme, bay leaves, stock",
        "image_url": "/assets/jollof-rice.png",
    },
    {
        "dish_name": "Waakye", "cuisine_type": "Ghanaian", "country": "Ghana",
        "story_content": "Waakye began in northern Ghana among the Hausa people. Rice and beans are cooked "
                         "with dried millet or sorghum leaves, which give the dish its reddish-brown colour. "
                         "Trade carried it to Accra, where it became a beloved street food.",
        "historical_period": "17th century",
        "cultural_significance": "Eaten by everyone from labourers to executives, waakye connects "
                                 "neighbourhoods and diaspora communities alike.",
        "ingredients": "Rice, black-eyed peas, dried millet leaves, baking soda, salt, water",
        "image_url": "/assets/waakye-ghana.png",
    },
    {
        "dish_name": "Doro Wat", "cuisine_type": "Ethiopian", "country": "Ethiopia",
        "story_content": "Often called Ethiopia's national dish, this spicy chicken stew was prepared in royal "
                         "kitchens for feasts. Its berbere spice blend reflects Ethiopia's place along "
                         "ancient spice trade routes.",
        "historical_period": "13th century",
        "cultural_significance": "Served on injera and shared from a common plate, it marks the breaking of "
                                 "fasts in the Ethiopian Orthodox Church.",
        "ingredients": "Chicken, onions, berbere, niter kibbeh, garlic, ginger, hard-boiled eggs",
        "image_url": UNSPLASH + "photo-1568600891621-50f697b9a1c7",
    },
    {
        "dish_name": "Tagine", "cuisine_type": "Moroccan", "country": "Morocco",
        "story_content": "The tagine is both a dish and the conical earthenware pot it is cooked in. The shape "
                         "returns condensed steam to the base, so Berber nomads could cook with little water "
                         "or fuel. Written records of tagine cooking date back to the 9th century.",
        "historical_period": "9th century",
        "cultural_significance": "A centrepiece of Moroccan hospitality whose sweet and savoury flavours draw "
                                 "on Arab, Berber and Mediterranean traditions.",
        "ingredients": "Lamb or chicken, dried apricots, prunes, honey, nuts, vegetables, olive oil, "
                       "cinnamon, saffron, cumin, ginger",
        "image_url": UNSPLASH + "photo-1541518763669-27fef04b14ea",
    },
]

# (restaurant id, rating, comment)
REVIEWS = [
    (1, 4.5, "Incredible injera with amazing wat selection. The Doro Wat was particularly flavorful!"),
    (3, 5, "The jollof rice was perfectly spiced and the plantains were deliciously sweet. Can't wait to return!"),
]

# (restaurant id, days from now, party size, status, special requests)
RESERVATIONS = [
    (2, 5, 2, "confirmed", "Window table if possible"),
    (4, -10, 4, "completed", None),
    (1, -30, 2, "cancelled", "Vegetarian options needed"),
]

FAVORITE_RESTAURANTS = [1, 3, 4]


def seed(storage: AfriquisineStorage) -> None:
    diner = storage.create_user(DINER)

    storage.restaurants.insert_many(RESTAURANTS)
    for restaurant_id, name, description, price, image in MENU_ITEMS:
        storage.menu_items.insert({
            "restaurant_id": restaurant_id, "name": name, "description": description,
            "price": price, "image_url": image, "featured": True,
        })
    for title, content, cuisine, region, image in INSIGHTS:
        storage.cultural_insights.insert({
            "title": title, "content": content, "cuisine_type": cuisine,
            "region": region, "image_url": image,
        })
    storage.food_origin_stories.insert_many(STORIES)

    for restaurant_id, rating, comment in REVIEWS:
        storage.create_review(ReviewIn(
            restaurant_id=restaurant_id, user_id=diner.id, rating=rating, comment=comment,
        ))
    now = utcnow()
    for restaurant_id, days, party_size, status, requests in RESERVATIONS:
        storage.create_reservation(ReservationIn(
            restaurant_id=restaurant_id, user_id=diner.id, date=now + timedelta(days=days),
            party_size=party_size, status=status, special_requests=requests,
        ))
    for restaurant_id in FAVORITE_RESTAURANTS:
        storage.add_favorite(diner.id, restaurant_id)

    logger.info("Seeded Afriquisine: %d restaurants", storage.restaurants.count())
