"""
API tests for the HomePros Africa directory.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

CONTACT = {
    "name": "Ngozi",
    "email": "ngozi@example.com",
    "subject": "Kitchen leak",
    "message": "Water under the sink since Monday.",
}


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client("homepros")


class TestServices:
    def test_list(self, client: TestClient) -> None:
        services = client.get("/api/services").json()
        assert len(services) == 8
        assert services[0]["slug"] == "plumbing"
        assert services[0]["imageUrl"].startswith("https://images.unsplash.com/")

    def test_by_id_and_slug(self, client: TestClient) -> None:
        assert client.get("/api/services/2").json()["name"] == "Electrical Work"
        assert client.get("/api/services/slug/renovation").json()["name"] == "Home Renovation"

    def test_missing(self, client: TestClient) -> None:
        assert client.get("/api/services/99").json() == {"message": "Service not found"}
        assert client.get("/api/services/slug/roofing").status_code == 404


class TestProfessionals:
    def test_list(self, client: TestClient) -> None:
        professionals = client.get("/api/professionals").json()
        assert len(professionals) == 6
        assert professionals[0]["reviewCount"] == 124
        assert "Licensed & insured" in professionals[0]["verifications"]

    def test_profession_filter(self, client: TestClient) -> None:
        masters = client.get("/api/professionals", params={"profession": "master"}).json()
        assert [p["name"] for p in masters] == ["David Okafor", "Ibrahim Mensah"]

    def test_detail(self, client: TestClient) -> None:
        assert client.get("/api/professionals/5").json()["name"] == "Grace Nkosi"
        assert client.get("/api/professionals/50").status_code == 404


class TestTestimonialsAndContact:
    def test_testimonials(self, client: TestClient) -> None:
        testimonials = client.get("/api/testimonials").json()
        assert [t["rating"] for t in testimonials] == [5, 5, 4]

    def test_contact_is_stored(self, client: TestClient) -> None:
        response = client.post("/api/contact", json=CONTACT)
        assert response.status_code == 201
        assert "message" in response.json()

        saved = client.app.state.storage.contact_forms.all()
        assert [form.subject for form in saved] == ["Kitchen leak"]

    def test_contact_accepts_sub_addressed_email(self, client: TestClient) -> None:
        response = client.post("/api/contact", json={**CONTACT, "email": "ada+quotes@example.com"})
        assert response.status_code == 201
        assert client.app.state.storage.contact_forms.first().email == "ada+quotes@example.com"

    @pytest.mark.parametrize(
        "field, value",
        [("name", "N"), ("email", "not-an-email"), ("subject", "x"), ("message", "too short")],
    )
    def test_contact_validation(self, client: TestClient, field: str, value: str) -> None:
        response = client.post("/api/contact", json={**CONTACT, field: value})
        assert response.status_code == 400
        assert response.json()["errors"][0]["loc"] == ["body", field]
        assert client.app.state.storage.contact_forms.count() == 0
