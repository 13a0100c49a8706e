"""
API tests for the AfricStays site (seeded demo data).
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from protokit.backend.core.storage import SqlBackend


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client("africstays")


def _booking(**overrides) -> dict:
    body = {
        "userId": 4,
        "propertyId": 1,
        "checkIn": "2023-11-12T14:00:00",
        "checkOut": "2023-11-15T10:00:00",
        "guests": 2,
        "totalPrice": 825,
    }
    body.update(overrides)
    return body


class TestHealth:
    def test_health_reports_site_and_storage(self, client: TestClient, storage_kind: str) -> None:
        body = client.get("/api/health").json()
        assert body["status"] == "ok"
        assert body["site"] == "africstays"
        assert body["storage"] == storage_kind


class TestProperties:
    def test_list_uses_camel_case(self, client: TestClient) -> None:
        properties = client.get("/api/properties").json()
        assert len(properties) == 8
        first = properties[0]
        assert first["id"] == 1
        assert first["title"] == "Luxury Safari Lodge"
        assert first["maxGuests"] == 4
        assert "max_guests" not in first

    def test_featured(self, client: TestClient) -> None:
        featured = client.get("/api/properties/featured").json()
        assert [p["id"] for p in featured] == [1, 2, 3, 4]
        assert all(p["isFeatured"] for p in featured)

    def test_unique_stays(self, client: TestClient) -> None:
        stays = client.get("/api/properties/unique-stays").json()
        assert {p["uniqueStayType"] for p in stays} == {
            "Beachside Villas", "Treehouse Retreats", "Traditional Huts", "Desert Camps",
        }

    def test_get_by_id(self, client: TestClient) -> None:
        assert client.get("/api/properties/5").json()["title"] == "Treehouse Hideaway"

    def test_missing_property_is_404(self, client: TestClient) -> None:
        response = client.get("/api/properties/999")
        assert response.status_code == 404
        assert response.json() == {"message": "Property not found"}

    def test_non_numeric_id_is_400(self, client: TestClient) -> None:
        assert client.get("/api/properties/abc").status_code == 400


class TestDestinationsAndTestimonials:
    def test_destinations(self, client: TestClient) -> None:
        destinations = client.get("/api/destinations").json()
        assert len(destinations) == 6
        assert client.get("/api/destinations/6").json()["name"] == "Cairo"
        assert client.get("/api/destinations/60").status_code == 404

    def test_testimonials(self, client: TestClient) -> None:
        testimonials = client.get("/api/testimonials").json()
        assert [t["userName"] for t in testimonials] == ["Sarah", "James & Maria", "Yuki"]

    def test_testimonial_authors_are_users(self, client: TestClient) -> None:
        storage = client.app.state.storage
        for testimonial in client.get("/api/testimonials").json():
            author = storage.get_user(testimonial["userId"])
            assert author is not None
            assert author.full_name == testimonial["userName"]


class TestSearch:
    def test_text_is_case_insensitive(self, client: TestClient) -> None:
        results = client.get("/api/search", params={"q": "LODGE"}).json()
        assert [p["title"] for p in results] == ["Luxury Safari Lodge"]

    def test_matches_country(self, client: TestClient) -> None:
        results = client.get("/api/search", params={"q": "kenya"}).json()
        assert {p["id"] for p in results} == {5, 6}

    def test_guest_count(self, client: TestClient) -> None:
        results = client.get("/api/search", params={"guests": 5}).json()
        assert [p["title"] for p in results] == ["Coastal Villa"]

    def test_dates_must_fit_availability(self, client: TestClient) -> None:
        results = client.get(
            "/api/search", params={"checkIn": "2023-11-12", "checkOut": "2023-11-18"}
        ).json()
        assert [p["id"] for p in results] == [1, 5, 6, 8]

    def test_empty_query_returns_everything(self, client: TestClient) -> None:
        assert len(client.get("/api/search").json()) == 8

    def test_invalid_guests_is_400(self, client: TestClient) -> None:
        assert client.get("/api/search", params={"guests": 0}).status_code == 400


class TestBookings:
    def test_create_booking(self, client: TestClient) -> None:
        response = client.post("/api/bookings", json=_booking())
        assert response.status_code == 201
        booking = response.json()
        assert booking["id"] == 1
        assert booking["status"] == "pending"
        assert booking["propertyId"] == 1

        mine = client.get("/api/users/4/bookings").json()
        assert [b["id"] for b in mine] == [1]
        assert client.get("/api/users/5/bookings").json() == []

    def test_check_out_must_follow_check_in(self, client: TestClient) -> None:
        response = client.post(
            "/api/bookings", json=_booking(checkOut="2023-11-12T14:00:00")
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"

    def test_guests_must_be_positive(self, client: TestClient) -> None:
        assert client.post("/api/bookings", json=_booking(guests=0)).status_code == 400

    def test_unknown_property_is_404(self, client: TestClient) -> None:
        response = client.post("/api/bookings", json=_booking(propertyId=999))
        assert response.status_code == 404


class TestSqlStorage:
    def test_same_results_on_sqlite(self, make_client) -> None:
        backend = SqlBackend("sqlite://")
        client = make_client("africstays", backend=backend)

        assert client.get("/api/health").json()["storage"] == "sql"
        assert [p["id"] for p in client.get("/api/properties/featured").json()] == [1, 2, 3, 4]
        assert client.post("/api/bookings", json=_booking()).status_code == 201
        assert len(client.get("/api/users/4/bookings").json()) == 1
        backend.close()

    def test_unseeded_site_is_empty(self, make_client) -> None:
        client = make_client("africstays", seed=False)
        assert client.get("/api/properties").json() == []
