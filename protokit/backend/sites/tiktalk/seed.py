"""Demo creators, shows and episodes for an empty TikTalk store."""

from __future__ import annotations

from datetime import datetime

from protokit.backend.sites.tiktalk.storage import TikTalkStorage

USERS = [
    {"id": 1, "email": "ama@tiktalk.example", "first_name": "Ama", "last_name": "Owusu"},
    {"id": 2, "email": "tendai@tiktalk.example", "first_name": "Tendai", "last_name": "Moyo"},
]

PODCASTS = [
    (1, {"title": "Tech Talk Africa", "category": "Technology", "is_published": True,
         "description": "Founders and engineers building the continent's software."}),
    (2, {"title": "Afrobeats Weekly", "category": "Music", "is_published": True,
         "description": "New releases, studio stories and interviews."}),
    (1, {"title": "Founder Notes", "category": "Business", "is_published": False,
         "description": "Unreleased draft series."}),
]

EPISODES = [
    {"podcast_id": 1, "episode_number": 1, "title": "Mobile Money, Ten Years On",
     "audio_url": "/uploads/tech-talk-001.mp3", "duration": 1860, "is_published": True,
     "published_at": datetime(2024, 3, 4, 8, 0)},
    {"podcast_id": 1, "episode_number": 2, "title": "Shipping Offline-First Apps",
     "audio_url": "/uploads/tech-talk-002.mp3", "duration": 2240, "is_published": True,
     "published_at": datetime(2024, 3, 11, 8, 0)},
    {"podcast_id": 1, "episode_number": 3, "title": "Draft: Hiring Remote Teams",
     "audio_url": "/uploads/tech-talk-003.mp3", "duration": 1500, "is_published": False},
    {"podcast_id": 2, "episode_number": 1, "title": "The Producers Behind the Sound",
     "audio_url": "/uploads/afrobeats-001.mp3", "duration": 2710, "is_published": True,
     "published_at": datetime(2024, 2, 20, 18, 0)},
]


def seed(storage: TikTalkStorage) -> None:
    for user in USERS:
        storage.users.insert(user)
    for creator_id, podcast in PODCASTS:
        storage.create_podcast(creator_id, podcast)
    for episode in EPISODES:
        storage.create_episode(episode)
    storage.follow_podcast(2, 1)
