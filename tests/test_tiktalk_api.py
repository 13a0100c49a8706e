"""
API tests for the TikTalk podcast site.

Seed data: users 1 (Ama) and 2 (Tendai); podcasts 1 "Tech Talk Africa"
(Ama, three episodes, one unpublished), 2 "Afrobeats Weekly" (Tendai) and 3
"Founder Notes" (Ama, unpublished); Tendai follows podcast 1.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from protokit.backend.core.storage import MemoryBackend
from protokit.backend.sites.tiktalk.seed import seed
from protokit.backend.sites.tiktalk.storage import TikTalkStorage

AMA = {"X-User-Id": "1"}
TENDAI = {"X-User-Id": "2"}


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client("tiktalk")


class TestAuthUser:
    def test_requires_header(self, client: TestClient) -> None:
        response = client.get("/api/auth/user")
        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    def test_returns_caller(self, client: TestClient) -> None:
        assert client.get("/api/auth/user", headers=AMA).json()["firstName"] == "Ama"

    def test_unknown_caller_is_404(self, client: TestClient) -> None:
        assert client.get("/api/auth/user", headers={"X-User-Id": "9"}).status_code == 404

    def test_upsert_creates_then_updates(self, client: TestClient) -> None:
        headers = {"X-User-Id": "9"}
        created = client.put("/api/auth/user", json={"email": "k@x.test", "firstName": "Kofi"}, headers=headers)
        assert created.json()["id"] == 9

        updated = client.put("/api/auth/user", json={"lastName": "Boateng"}, headers=headers).json()
        assert updated["firstName"] == "Kofi"
        assert updated["lastName"] == "Boateng"
        assert updated["email"] == "k@x.test"


class TestPodcastListings:
    def test_featured_orders_by_follows(self, client: TestClient) -> None:
        featured = client.get("/api/podcasts/featured").json()
        assert [p["id"] for p in featured] == [1, 2]
        assert featured[0]["_count"] == {"episodes": 3, "follows": 1}
        assert featured[0]["creator"]["firstName"] == "Ama"

    def test_featured_limit(self, client: TestClient) -> None:
        assert len(client.get("/api/podcasts/featured", params={"limit": 1}).json()) == 1

    def test_search(self, client: TestClient) -> None:
        assert [p["id"] for p in client.get("/api/podcasts/search", params={"q": "AFRO"}).json()] == [2]
        # "Notes" only appears in the unpublished "Founder Notes".
        assert client.get("/api/podcasts/search", params={"q": "notes"}).json() == []
        assert [p["id"] for p in client.get("/api/podcasts/search", params={"q": "founder"}).json()] == [1]

    def test_search_requires_query(self, client: TestClient) -> None:
        response = client.get("/api/podcasts/search")
        assert response.status_code == 400
        assert response.json() == {"message": "Search query is required"}

    def test_category(self, client: TestClient) -> None:
        assert [p["id"] for p in client.get("/api/podcasts/category/Music").json()] == [2]
        assert client.get("/api/podcasts/category/Business").json() == []

    def test_creator_sees_own_podcasts(self, client: TestClient) -> None:
        own = client.get("/api/podcasts/creator/1", headers=AMA).json()
        assert [p["id"] for p in own] == [1, 3]

    def test_creator_listing_is_private(self, client: TestClient) -> None:
        assert client.get("/api/podcasts/creator/2", headers=AMA).status_code == 403
        assert client.get("/api/podcasts/creator/1").status_code == 401


class TestPodcastDetail:
    def test_published_episodes_newest_first(self, client: TestClient) -> None:
        podcast = client.get("/api/podcasts/1").json()
        assert [e["episodeNumber"] for e in podcast["episodes"]] == [2, 1]
        assert podcast["isFollowed"] is None

    def test_is_followed_for_caller(self, client: TestClient) -> None:
        assert client.get("/api/podcasts/1", headers=TENDAI).json()["isFollowed"] is True
        assert client.get("/api/podcasts/1", headers=AMA).json()["isFollowed"] is False

    def test_missing_podcast(self, client: TestClient) -> None:
        assert client.get("/api/podcasts/99").status_code == 404

    def test_rss_feed(self, client: TestClient) -> None:
        response = client.get("/api/podcasts/1/rss")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/rss+xml")

        channel = ET.fromstring(response.content).find("channel")
        assert channel.findtext("title") == "Tech Talk Africa"
        items = channel.findall("item")
        assert [i.findtext("title") for i in items] == [
            "Shipping Offline-First Apps", "Mobile Money, Ten Years On",
        ]
        assert items[0].find("enclosure").get("url") == "http://testserver/uploads/tech-talk-002.mp3"


class TestPodcastWrites:
    def test_create_sets_creator(self, client: TestClient) -> None:
        response = client.post("/api/podcasts", json={"title": "Fresh Show"}, headers=TENDAI)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["creatorId"] == 2
        assert body["isPublished"] is False

    def test_create_validates(self, client: TestClient) -> None:
        assert client.post("/api/podcasts", json={"title": ""}, headers=AMA).status_code == 400
        assert client.post("/api/podcasts", json={"title": "x" * 256}, headers=AMA).status_code == 400
        assert client.post("/api/podcasts", json={"title": "No caller"}).status_code == 401

    def test_only_owner_updates(self, client: TestClient) -> None:
        assert client.put("/api/podcasts/2", json={"title": "Hijack"}, headers=AMA).status_code == 403

        updated = client.put("/api/podcasts/2", json={"title": "Afrobeats Daily"}, headers=TENDAI).json()
        assert updated["title"] == "Afrobeats Daily"
        assert updated["category"] == "Music"

    def test_update_missing_podcast_is_forbidden(self, client: TestClient) -> None:
        assert client.put("/api/podcasts/99", json={"title": "x"}, headers=AMA).status_code == 403


class TestEpisodes:
    def test_get_episode_with_podcast(self, client: TestClient) -> None:
        episode = client.get("/api/episodes/1").json()
        assert episode["podcast"]["title"] == "Tech Talk Africa"
        assert episode["podcast"]["creator"]["firstName"] == "Ama"
        assert client.get("/api/episodes/99").status_code == 404

    def test_create_requires_owned_podcast(self, client: TestClient) -> None:
        body = {"title": "Guest Mix", "audioUrl": "/uploads/mix.mp3", "podcastId": 2}
        assert client.post("/api/episodes", json=body, headers=AMA).status_code == 403

        response = client.post("/api/episodes", json=body, headers=TENDAI)
        assert response.status_code == 201
        assert response.json()["playCount"] == 0

    def test_create_requires_audio(self, client: TestClient) -> None:
        body = {"title": "Silent", "podcastId": 1}
        assert client.post("/api/episodes", json=body, headers=AMA).status_code == 400

    def test_update_episode(self, client: TestClient) -> None:
        assert client.put("/api/episodes/4", json={"title": "x"}, headers=AMA).status_code == 403
        assert client.put("/api/episodes/99", json={"title": "x"}, headers=AMA).status_code == 403

        published = client.put("/api/episodes/3", json={"isPublished": True}, headers=AMA).json()
        assert published["isPublished"] is True
        assert [e["id"] for e in client.get("/api/podcasts/1").json()["episodes"]] == [3, 2, 1]

    def test_play_count_and_analytics(self, client: TestClient) -> None:
        assert client.post("/api/episodes/1/play").json() == {"message": "Play count incremented"}
        client.post("/api/episodes/2/play")
        client.post("/api/episodes/2/play")
        assert client.post("/api/episodes/99/play").status_code == 404

        analytics = client.get("/api/podcasts/1/analytics", headers=AMA).json()
        assert analytics == {"totalPlays": 3, "totalFollows": 1, "episodeCount": 3}
        assert client.get("/api/podcasts/1/analytics", headers=TENDAI).status_code == 403


class TestFollows:
    def test_follow_is_idempotent(self, client: TestClient) -> None:
        first = client.post("/api/follows", json={"podcastId": 2}, headers=AMA)
        second = client.post("/api/follows", json={"podcastId": 2}, headers=AMA)
        assert first.status_code == second.status_code == 201
        assert first.json()["id"] == second.json()["id"]
        assert client.get("/api/podcasts/2").json()["_count"]["follows"] == 1

    def test_follow_unknown_podcast(self, client: TestClient) -> None:
        assert client.post("/api/follows", json={"podcastId": 99}, headers=AMA).status_code == 404

    def test_follow_status_and_unfollow(self, client: TestClient) -> None:
        client.post("/api/follows", json={"podcastId": 2}, headers=AMA)
        assert [p["id"] for p in client.get("/api/follows", headers=AMA).json()] == [2]
        assert client.get("/api/follows/2/status", headers=AMA).json() == {"isFollowing": True}

        assert client.delete("/api/follows/2", headers=AMA).json() == {"message": "Unfollowed successfully"}
        assert client.get("/api/follows/2/status", headers=AMA).json() == {"isFollowing": False}
        assert client.get("/api/follows", headers=AMA).json() == []

    def test_follows_require_caller(self, client: TestClient) -> None:
        assert client.get("/api/follows").status_code == 401


class TestPlayHistory:
    def test_upsert_and_most_recent_first(self, client: TestClient) -> None:
        client.post("/api/play-history", json={"episodeId": 1, "progress": 30}, headers=AMA)
        client.post("/api/play-history", json={"episodeId": 1, "progress": 60}, headers=AMA)
        client.post("/api/play-history", json={"episodeId": 4, "completed": True}, headers=AMA)

        history = client.get("/api/play-history", headers=AMA).json()
        assert [e["id"] for e in history] == [4, 1]
        assert history[0]["podcast"]["title"] == "Afrobeats Weekly"
        assert len(client.get("/api/play-history", params={"limit": 1}, headers=AMA).json()) == 1
        assert client.get("/api/play-history", headers=TENDAI).json() == []

    def test_unknown_episode(self, client: TestClient) -> None:
        response = client.post("/api/play-history", json={"episodeId": 99}, headers=AMA)
        assert response.status_code == 404


class TestConcurrentWrites:
    @pytest.fixture
    def storage(self) -> TikTalkStorage:
        storage = TikTalkStorage(MemoryBackend())
        seed(storage)
        return storage

    def test_play_count_survives_parallel_plays(self, storage: TikTalkStorage) -> None:
        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(lambda _: storage.increment_play_count(1), range(2000)))
        assert storage.get_episode_record(1).play_count == 2000

    def test_parallel_follows_store_one_row(self, storage: TikTalkStorage) -> None:
        with ThreadPoolExecutor(max_workers=16) as pool:
            follows = list(pool.map(lambda _: storage.follow_podcast(1, 2), range(200)))
        assert {f.id for f in follows} == {follows[0].id}
        assert storage.follows.count(follower_id=1, podcast_id=2) == 1

    def test_parallel_plays_keep_one_history_row(self, storage: TikTalkStorage) -> None:
        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(lambda n: storage.record_play(1, {"episode_id": 1, "progress": n}), range(200)))
        assert storage.play_history.count(user_id=1, episode_id=1) == 1
