"""Demo mentors, journey and community content for an empty iMusic store."""

from __future__ import annotations

import json
import logging
from datetime import timedelta

from protokit.backend.schemas import utcnow
from protokit.backend.sites.imusic.storage import IMusicStorage

logger = logging.getLogger(__name__)

# (name, inspired by, image, genre, genres, region, country, bio, description,
#  personality, specialties, years active, catalogue key, sample prompt)
MENTORS = [
    ("Kendrick Flow", "Kendrick Lamar", "kendrick-mentor", "Hip-Hop",
     ["Hip-Hop", "Conscious Rap", "West Coast"], "West Coast", "USA",
     "Kendrick Flow channels the introspective storytelling of Kendrick Lamar, offering "
     "guidance on complex lyricism and social commentary.",
     "A mentor inspired by Kendrick Lamar's lyrical complexity and storytelling.",
     {"introspective": 9, "socially_conscious": 10, "storytelling": 9, "technical": 8},
     ["Storytelling", "Social Commentary", "Complex Rhyme Schemes"], "2010-present", "kendrick",
     "Tell me a story about your neighborhood that reveals something deeper about society."),
    ("Nova Rae", "SZA", "nova-rae", "R&B",
     ["R&B", "Neo-Soul", "Alternative R&B"], "Midwest", "USA",
     "Nova Rae embodies SZA's emotional vulnerability and unique vocal stylings, helping "
     "artists find their authentic voice.",
     "A mentor inspired by SZA's vocal style and emotional songwriting.",
     {"emotional": 9, "vulnerable": 8, "authentic": 10, "melodic": 9},
     ["Vocal Styling", "Emotional Songwriting", "Alternative R&B"], "2013-present", "sza",
     "Write about your most vulnerable moment, but make it something others can relate to."),
    ("MetroDeep", "Drake", "metro-deep", "Hip-Hop",
     ["Hip-Hop", "R&B", "Pop Rap"], "Toronto", "Canada",
     "MetroDeep channels Drake's versatility between rapping and singing, with expertise in "
     "creating catchy hooks and mainstream appeal.",
     "A mentor inspired by Drake's melodic rap style and hit-making ability.",
     {"versatile": 10, "emotional": 8, "commercial": 9, "melodic": 9},
     ["Hooks", "Mainstream Appeal", "Melodic Rap"], "2009-present", "drake",
     "Create a hook that blends singing and rapping about succeeding despite doubters."),
    ("Blaze420", "J. Cole", "blaze420", "Hip-Hop",
     ["Hip-Hop", "Conscious Rap", "East Coast"], "East Coast", "USA",
     "Blaze420 embodies J. Cole's thoughtful, introspective approach to hip-hop with a focus "
     "on authentic storytelling and relatable themes.",
     "A mentor inspired by J. Cole's storytelling and conscious rap approach.",
     {"authentic": 10, "thoughtful": 9, "relatable": 9, "storytelling": 8},
     ["Introspection", "Relatable Storytelling", "Conscious Hip-Hop"], "2007-present", "jcole",
     "Write about a personal struggle that taught you something important."),
    ("IvyMuse", "Lauryn Hill", "ivy-muse", "Hip-Hop/Soul",
     ["Hip-Hop", "Neo-Soul", "R&B"], "East Coast", "USA",
     "IvyMuse channels Lauryn Hill's powerful blend of hip-hop and soul, emphasizing lyrical "
     "depth and musical versatility.",
     "A mentor inspired by Lauryn Hill's fusion of soul, R&B, and conscious hip-hop.",
     {"soulful": 10, "conscious": 9, "versatile": 8, "poetic": 9},
     ["Soul-Rap Fusion", "Vocal Versatility", "Conscious Lyrics"], "1993-present", "lauryn",
     "Create a verse that fuses singing and rapping while delivering a deep message."),
    ("Yemi Sound", "Burna Boy", "yemi-sound", "Afrobeats",
     ["Afrobeats", "Dancehall", "Afro-fusion"], "Lagos", "Nigeria",
     "Yemi Sound brings Burna Boy's global Afro-fusion approach, blending African rhythms "
     "with contemporary sounds and meaningful lyrics.",
     "A mentor inspired by Burna Boy's Afrobeats style and global music perspective.",
     {"global": 9, "rhythmic": 10, "cultural": 9, "innovative": 8},
     ["Afro-Fusion", "Global Sounds", "Cultural Storytelling"], "2012-present", "burna",
     "Create a verse that blends your heritage with modern global sounds."),
]

JOURNEY_STEPS = [
    {"title": "Find Your Voice", "description": "Exploring vocal techniques and lyrical styles",
     "status": "completed", "order": 1, "icon": "fa-check"},
    {"title": "Beat Selection & Composition",
     "description": "Crafting unique beats that complement your style",
     "status": "in-progress", "order": 2, "icon": "fa-music"},
    {"title": "Advanced Lyricism", "description": "Developing complex metaphors and storytelling",
     "status": "locked", "order": 3, "icon": "fa-pen-fancy"},
]

# (mentor id, type, title, content, image, audio, hours ago)
INSPIRATION = [
    (4, "text", "Finding Your Narrative Voice",
     "The best stories come from truth. Write from your experiences but find the universal in them.",
     "blaze420", None, 2),
    (2, "audio", "Emotional R&B Beat", "A smooth R&B beat with emotional chord progressions",
     "nova-rae", "beat-sample.mp3", 5),
    (3, "prompt", "Writing Prompt",
     "Write a hook about the moment you realized your dreams were starting to come true. "
     "Focus on the contrast between expectation and reality.",
     "metro-deep", None, 24),
    (5, "text", "Soul Searching in Your Lyrics",
     "Connect your personal journey to a larger message. The most powerful songs balance "
     "vulnerability with universal truth.",
     "ivy-muse", None, 2),
    (6, "audio", "Afrobeats Fusion Sample",
     "A rhythmic Afrobeats-inspired instrumental that blends traditional and modern elements.",
     "yemi-sound", "afrobeats-sample.mp3", 5),
]

COLLABORATIONS = [
    {"title": "Lo-Fi Beat Collection", "description": "Looking for vocalists & writers",
     "created_by": 1, "looking_for": "vocalists, writers", "genre": "Lo-Fi", "tags": "Lo-Fi,Chill"},
    {"title": "Trap EP Project", "description": "Need producers & engineers",
     "created_by": 2, "looking_for": "producers, engineers", "genre": "Trap", "tags": "Trap,Hip-Hop"},
]

CHALLENGES = [
    {"title": "MetroDeep Hook Challenge",
     "description": "Create a melodic hook in the style of Drake using the provided beat. "
                    "Top entries get featured on the platform.",
     "entries": 247, "days_left": 2, "prize": "Featured + Pro Plan", "is_featured": True,
     "audio_url": "drake-challenge.mp3"},
]

# (source, source id, mentor index, status, interval, priority, error)
ARTIST_SYNCS = [
    ("spotify", "spotify:artist:mock-kendrick", 0, "success", "daily", 1, None),
    ("genius", "genius:artist:mock-kendrick", 0, "success", "weekly", 2, None),
    ("spotify", "spotify:artist:mock-drake", 2, "pending", "daily", 3, None),
    ("spotify", "spotify:artist:mock-newcomer", None, "pending", "daily", 5, None),
    ("spotify", "spotify:artist:mock-error-example", None, "failed", "daily", 10,
     "API rate limit exceeded, retry after 3600 seconds"),
]

SPOTIFY_SAMPLE = {
    "id": "spotify:artist:mock-kendrick",
    "name": "Kendrick Lamar",
    "genres": ["conscious hip hop", "hip hop", "rap", "west coast rap"],
    "popularity": 89,
    "followers": {"total": 19876543},
}

GENIUS_SAMPLE = {
    "id": 1234567,
    "name": "Kendrick Lamar",
    "alternate_names": ["K-Dot", "Kung Fu Kenny"],
    "is_verified": True,
}


def _asset(name: str) -> str:
    return f"/assets/{name}.png"


def seed(storage: IMusicStorage) -> None:
    now = utcnow()

    mentors = storage.mentors.insert_many(
        {
            "name": name,
            "inspired_by": inspired_by,
            "profile_image": _asset(image),
            "genre": genre,
            "genres": genres,
            "region": region,
            "country": country,
            "bio": bio,
            "description": description,
            "artist_type": "Solo",
            "personality_profile": profile,
            "specialties": specialties,
            "years_active": years,
            "spotify_id": f"spotify:artist:mock-{key}",
            "genius_id": f"genius:artist:mock-{key}",
            "media_url": f"/samples/{image}-sample.mp3",
            "sample_prompt": prompt,
            "last_updated": now,
        }
        for (name, inspired_by, image, genre, genres, region, country, bio, description,
             profile, specialties, years, key, prompt) in MENTORS
    )

    storage.journey_steps.insert_many(JOURNEY_STEPS)

    storage.inspiration_items.insert_many(
        {
            "mentor_id": mentor_id,
            "type": kind,
            "title": title,
            "content": content,
            "image_url": _asset(image),
            "audio_url": audio,
            "created_at": now - timedelta(hours=hours),
        }
        for mentor_id, kind, title, content, image, audio, hours in INSPIRATION
    )

    storage.collaborations.insert_many(COLLABORATIONS)
    storage.challenges.insert_many(CHALLENGES)

    raw = {"spotify:artist:mock-kendrick": SPOTIFY_SAMPLE, "genius:artist:mock-kendrick": GENIUS_SAMPLE}
    storage.artist_syncs.insert_many(
        {
            "source": source,
            "source_id": source_id,
            "mentor_id": mentors[index].id if index is not None else None,
            "sync_status": status,
            "sync_interval": interval,
            "priority": priority,
            "sync_error": error,
            "raw_data": json.dumps(raw[source_id]) if source_id in raw else None,
            "last_synced": now,
        }
        for source, source_id, index, status, interval, priority, error in ARTIST_SYNCS
    )
    logger.info("Seeded %d mentors and %d journey steps", len(mentors), len(JOURNEY_STEPS))
