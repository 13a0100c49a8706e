"""
API tests for BreathCheck.

The readings below follow from the sample hash: ``"P"`` hashes to 80
(0.00, safe), ``"A"`` to 65 (0.05, warning) and ``"F"`` to 70 (0.10, danger).
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from protokit.backend.sites.breathcheck.analysis import MESSAGES, evaluate_sample, sample_hash

ACCOUNT = {
    "username": "newdriver",
    "password": "learner-plate",
    "confirmPassword": "learner-plate",
    "email": "newdriver@example.com",
    "displayName": "New Driver",
}


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client("breathcheck")


class TestAnalysis:
    @pytest.mark.parametrize(
        ("sample", "bac", "level"),
        [("P", "0.00", "safe"), ("Q", "0.01", "safe"), ("A", "0.05", "warning"), ("F", "0.10", "danger")],
    )
    def test_levels(self, sample: str, bac: str, level: str) -> None:
        result = evaluate_sample(sample)
        assert (result.bac, result.level) == (bac, level)
        assert result.message == MESSAGES[level]

    def test_hash_wraps_to_32_bits(self) -> None:
        assert sample_hash("ab") == 97 * 31 + 98
        assert sample_hash("hello world") == 1794106052
        assert sample_hash("Hello World") == 862545276

    def test_only_prefix_is_hashed(self) -> None:
        prefix = "UklGRiQAAABXQVZF" * 7
        assert sample_hash(prefix + "tail-one") == sample_hash(prefix + "tail-two")
        assert 0 <= sample_hash(prefix) < 2**31


class TestUsers:
    def test_register_hides_password(self, client: TestClient) -> None:
        response = client.post("/api/users/register", json=ACCOUNT)
        assert response.status_code == 201
        user = response.json()
        assert user["id"] == 2
        assert user["subscriptionTier"] == "free"
        assert "password" not in user
        assert "confirmPassword" not in user

    def test_passwords_must_match(self, client: TestClient) -> None:
        response = client.post("/api/users/register", json={**ACCOUNT, "confirmPassword": "other"})
        assert response.status_code == 400
        assert "Passwords don't match" in response.json()["errors"][0]["msg"]

    def test_username_taken(self, client: TestClient) -> None:
        response = client.post("/api/users/register", json={**ACCOUNT, "username": "demo"})
        assert response.status_code == 409
        assert response.json() == {"message": "Username already taken"}

    def test_email_taken(self, client: TestClient) -> None:
        response = client.post("/api/users/register", json={**ACCOUNT, "email": "demo@example.com"})
        assert response.status_code == 409
        assert response.json() == {"message": "Email already registered"}

    def test_login(self, client: TestClient) -> None:
        response = client.post("/api/users/login", json={"username": "demo", "password": "password123"})
        assert response.json()["displayName"] == "Demo User"
        bad = client.post("/api/users/login", json={"username": "demo", "password": "nope"})
        assert bad.status_code == 401

    def test_profile(self, client: TestClient) -> None:
        assert client.get("/api/users/1").json()["email"] == "demo@example.com"
        assert client.get("/api/users/9").json() == {"message": "User not found"}


class TestScans:
    def test_scan_of_known_user_is_stored(self, client: TestClient) -> None:
        response = client.post("/api/breath/scan", json={"userId": 1, "audioSample": "A", "location": "Home"})
        assert response.json() == {"bac": "0.05", "level": "warning", "message": MESSAGES["warning"]}

        test = client.get("/api/breath/1").json()
        assert test["bac"] == 0.05
        assert test["location"] == "Home"

    def test_history_oldest_first(self, client: TestClient) -> None:
        for sample in ("P", "F"):
            client.post("/api/breath/scan", json={"userId": 1, "audioSample": sample})
        history = client.get("/api/users/1/breath-tests").json()
        assert [t["level"] for t in history] == ["safe", "danger"]

    @pytest.mark.parametrize("body", [{"audioSample": "A"}, {"userId": 99, "audioSample": "A"}])
    def test_anonymous_scans_are_not_stored(self, client: TestClient, body: dict) -> None:
        assert client.post("/api/breath/scan", json=body).json()["level"] == "warning"
        assert client.app.state.storage.breath_tests.count() == 0

    def test_sample_required(self, client: TestClient) -> None:
        assert client.post("/api/breath/scan", json={"audioSample": ""}).status_code == 400

    def test_missing_test(self, client: TestClient) -> None:
        assert client.get("/api/breath/99").json() == {"message": "Breath test not found"}


class TestParentAlerts:
    def test_fail_alert(self, client: TestClient) -> None:
        response = client.post("/api/notify-parent", json={"teenId": "teen123", "bac": "0.12", "status": "fail"})
        assert response.json() == {"message": "Parent notified", "details": {"sms": False, "email": False}}

        sent = client.app.state.storage.parent_notifications.all()
        assert sent[0].contact == "parent@example.com"
        assert sent[0].message.startswith("ALERT: Your teen attempted to drive with a BAC of 0.12.")

    def test_pass_message(self, client: TestClient) -> None:
        client.post("/api/notify-parent", json={"teenId": "teen123", "bac": "0.00", "status": "pass"})
        sent = client.app.state.storage.parent_notifications.all()
        assert sent[0].message == (
            "Good News: Your teen passed the BAC check with 0.00. They are being safe and responsible."
        )

    def test_unknown_teen(self, client: TestClient) -> None:
        response = client.post("/api/notify-parent", json={"teenId": "teen999", "bac": "0.1", "status": "fail"})
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid teen ID"}

    def test_promotions(self, client: TestClient) -> None:
        promotions = client.get("/api/promotions").json()
        assert [p["id"] for p in promotions] == [1, 2, 3]
