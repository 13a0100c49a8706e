"""
Tests for the shared JSON error handling.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from protokit.backend.api.errors import failure_message, install_error_handlers, not_found


class Item(BaseModel):
    name: str = Field(min_length=2)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    install_error_handlers(app)

    @app.post("/items")
    def create(item: Item) -> dict:
        return {"name": item.name}

    @app.get("/items/{item_id}")
    def read(item_id: int) -> dict:
        with failure_message("Failed to fetch item"):
            raise not_found("Item")

    @app.get("/broken")
    def broken() -> dict:
        with failure_message("Failed to fetch broken thing"):
            raise RuntimeError("database on fire")

    @app.get("/invalid-record")
    def invalid_record() -> dict:
        with failure_message("Failed to build record"):
            Item(name="x")
        return {}

    @app.get("/conflict")
    def conflict() -> dict:
        raise HTTPException(status_code=409, detail={"message": "Taken", "existing": 1})

    @app.get("/crash")
    def crash() -> dict:
        raise ZeroDivisionError

    return TestClient(app, raise_server_exceptions=False)


class TestErrorResponses:
    def test_body_validation_is_400(self, client: TestClient) -> None:
        response = client.post("/items", json={"name": "x"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid request data"
        assert body["errors"][0]["loc"] == ["body", "name"]

    def test_path_validation_is_400(self, client: TestClient) -> None:
        assert client.get("/items/abc").status_code == 400

    def test_not_found_message(self, client: TestClient) -> None:
        response = client.get("/items/3")
        assert response.status_code == 404
        assert response.json() == {"message": "Item not found"}

    def test_unknown_route_is_json(self, client: TestClient) -> None:
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_handler_failure_is_500_with_action(self, client: TestClient) -> None:
        response = client.get("/broken")
        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch broken thing"}

    def test_record_validation_inside_handler_is_400(self, client: TestClient) -> None:
        response = client.get("/invalid-record")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"

    def test_dict_detail_passes_through(self, client: TestClient) -> None:
        response = client.get("/conflict")
        assert response.status_code == 409
        assert response.json() == {"message": "Taken", "existing": 1}

    def test_unhandled_exception(self, client: TestClient) -> None:
        response = client.get("/crash")
        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}
