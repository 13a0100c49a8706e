"""Directory listings inserted into an empty HomePros Africa store."""

from __future__ import annotations

import logging

from protokit.backend.sites.homepros.storage import HomeProsStorage

logger = logging.getLogger(__name__)

_IMG = "https://images.unsplash.com/"
_WIDE = "?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=60"
_AVATAR = "?ixlib=rb-1.2.1&auto=format&fit=crop&w=100&h=100&q=80"

# (name, slug, description, image)
SERVICES = [
    ("Plumbing", "plumbing",
     "Professional plumbing services for repairs, installations, and maintenance.",
     "photo-1558618666-fcd25c85cd64"),
    ("Electrical Work", "electrical",
     "Expert electrical services for your home, from repairs to new installations.",
     "photo-1621905252507-b35492cc74b4"),
    ("Cleaning", "cleaning",
     "Thorough cleaning services to keep your home spotless and healthy.",
     "photo-1581578731548-c64695cc6952"),
    ("Landscaping", "landscaping",
     "Transform your outdoor space with our professional landscaping services.",
     "photo-1589923188900-85dae523342b"),
    ("Carpentry", "carpentry",
     "Quality carpentry services for all your woodworking needs and repairs.",
     "photo-1601564921647-b446262bbc14"),
    ("Painting", "painting",
     "Professional painting services to refresh and beautify your home.",
     "photo-1562184552-997c461abbe6"),
    ("Home Renovation", "renovation",
     "Complete renovation services to transform your living space.",
     "photo-1534126875314-a33c5aae3b3a"),
    ("Moving Services", "moving",
     "Reliable moving services to help you relocate with minimal stress.",
     "photo-1600518464441-9154a4dea21b"),
]

# (name, profession, bio, image, rating, reviews, verifications)
PROFESSIONALS = [
    ("David Okafor", "Master Electrician",
     "Specializing in electrical installations and repairs with over 15 years of experience across Lagos.",
     "photo-1506794778202-cad84cf45f1d", 5.0, 124,
     ["Background checked", "Licensed & insured", "5+ years on platform"]),
    ("Amina Diallo", "Interior Designer",
     "Award-winning designer transforming homes across Africa with creative, culturally inspired designs.",
     "photo-1573497019940-1c28c88b4f3e", 4.8, 97,
     ["Background checked", "Certified professional", "3+ years on platform"]),
    ("Ibrahim Mensah", "Master Plumber",
     "Expert in all plumbing needs from repairs to installations. Known for reliability and quality work.",
     "photo-1566753323558-f4e0952af115", 4.9, 156,
     ["Background checked", "Licensed & insured", "4+ years on platform"]),
    ("Emmanuel Adeyemi", "Carpenter",
     "Skilled craftsman with expertise in custom furniture, home repairs, and wooden installations.",
     "photo-1542142430-59f45f5d9344", 4.7, 89,
     ["Background checked", "Certified professional", "2+ years on platform"]),
    ("Grace Nkosi", "Professional Cleaner",
     "Thorough, detail-oriented cleaner specializing in deep cleaning services and organization.",
     "photo-1567532939604-b6b5b0db2604", 4.9, 112,
     ["Background checked", "Insured", "3+ years on platform"]),
    ("Samuel Kamau", "Landscape Architect",
     "Creative landscape designer with expertise in indigenous plants and sustainable garden design.",
     "photo-1568602471122-7832951cc4c5", 4.6, 78,
     ["Background checked", "Certified professional", "2+ years on platform"]),
]

TESTIMONIALS = [
    {"name": "Grace Ademola", "location": "Lagos, Nigeria", "rating": 5,
     "comment": "I was skeptical at first, but HomeProsAfrica connected me with an incredible "
                "electrician who fixed issues other professionals couldn't solve. The service was "
                "prompt, professional, and reasonably priced. I'll definitely use this platform again!",
     "service": "Electrical Repair", "image_url": _IMG + "photo-1531123897727-8f129e1688ce" + _AVATAR},
    {"name": "Samuel Okeke", "location": "Nairobi, Kenya", "rating": 5,
     "comment": "Finding reliable plumbers was always a challenge until I discovered HomeProsAfrica. "
                "The platform connected me with a skilled professional who arrived on time and solved "
                "our bathroom issues completely. Very impressed!",
     "service": "Plumbing Service", "image_url": _IMG + "photo-1522529599102-193c0d76b5b6" + _AVATAR},
    {"name": "Fatima Mensah", "location": "Accra, Ghana", "rating": 4,
     "comment": "The landscaper I hired through HomeProsAfrica transformed my garden completely. "
                "I appreciated the transparent pricing and the ability to view previous work before "
                "making my decision. Would recommend to anyone needing quality home services.",
     "service": "Landscaping", "image_url": _IMG + "photo-1567532939604-b6b5b0db2604" + _AVATAR},
]


def seed(storage: HomeProsStorage) -> None:
    for name, slug, description, image in SERVICES:
        storage.create_service({
            "name": name,
            "slug": slug,
            "description": description,
            "image_url": _IMG + image + _WIDE,
        })

    for name, profession, bio, image, rating, reviews, verifications in PROFESSIONALS:
        storage.create_professional({
            "name": name,
            "profession": profession,
            "bio": bio,
            "image_url": _IMG + image + _AVATAR,
            "rating": rating,
            "review_count": reviews,
            "verifications": verifications,
        })

    for testimonial in TESTIMONIALS:
        storage.create_testimonial(testimonial)

    logger.debug("HomePros seed data inserted")
