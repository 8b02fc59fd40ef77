"""
Tests for the actors router.
"""

import logging
from datetime import date

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.dependencies.services import get_actor_service
from app.main import app


@pytest.fixture
def client(service):
    app.dependency_overrides[get_actor_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestActorsApi:

    def test_register_returns_201(self, client) -> None:
        response = client.post("/api/actors/", json={"name": "Sônia Braga", "birth_date": "1950-06-08"})

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Sônia Braga"
        assert body["birth_date"] == "1950-06-08"
        assert "X-Process-Time" in response.headers

    def test_register_validation_error_lists_every_message(self, client) -> None:
        response = client.post("/api/actors/", json={"name": ""})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VAL_1201"
        assert error["details"] == [
            "Actor name must be informed.",
            "Birth date must be informed.",
        ]

    def test_unknown_actor_is_404(self, client) -> None:
        response = client.get(f"/api/actors/{ObjectId()}")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "RES_1301"
        assert error["details"] == "Actor not found."

    def test_empty_listing_is_404(self, client) -> None:
        response = client.get("/api/actors/")
        assert response.status_code == 404

    def test_page_size_above_maximum_is_rejected(self, client) -> None:
        response = client.get("/api/actors/", params={"size": 1000})
        assert response.status_code == 422

    def test_patch_updates_name_only(self, client, stored_actor) -> None:
        response = client.patch(f"/api/actors/{stored_actor.id}", json={"name": "F. Montenegro"})

        assert response.status_code == 200
        assert response.json()["name"] == "F. Montenegro"
        assert response.json()["birth_date"] == stored_actor.birth_date.isoformat()

    def test_delete_actor(self, client, actor_repository, stored_actor) -> None:
        response = client.delete(f"/api/actors/{stored_actor.id}")

        assert response.status_code == 200
        assert response.json()["id"] == stored_actor.id
        assert actor_repository.items == {}

    def test_link_list_and_unlink_midias(self, client, stored_actor, midias) -> None:
        for midia in midias:
            response = client.post(f"/api/actors/{stored_actor.id}/midias/{midia.id}")
            assert response.status_code == 200
            assert response.json() == {"message": "Midia added successfully"}

        response = client.get(f"/api/actors/{stored_actor.id}/midias", params={"page": 1, "size": 2})
        assert response.status_code == 200
        page = response.json()
        assert page["total_elements"] == 3
        assert [m["id"] for m in page["content"]] == [midias[2].id]

        response = client.delete(f"/api/actors/{stored_actor.id}/midias/{midias[0].id}")
        assert response.status_code == 200
        assert response.json()["title"] == "Central do Brasil"

        detail = client.get(f"/api/actors/{stored_actor.id}").json()
        assert [m["id"] for m in detail["midias"]] == [midias[1].id, midias[2].id]

    def test_list_actors(self, client, actor_with_midias) -> None:
        response = client.get("/api/actors/", params={"page": 0, "size": 5})

        assert response.status_code == 200
        page = response.json()
        assert page["total_elements"] == 1
        assert page["content"][0]["birth_date"] == date(1929, 10, 16).isoformat()
        assert len(page["content"][0]["midias"]) == 3

    def test_request_log_carries_error_code(self, client, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="app.middleware.request_logging"):
            client.get(f"/api/actors/{ObjectId()}")

        lines = [r.getMessage() for r in caplog.records if r.name == "app.middleware.request_logging"]
        assert any("-> 404" in line and "error_code=RES_1301" in line for line in lines)

    def test_request_log_without_error_code(self, client, stored_actor, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="app.middleware.request_logging"):
            client.get(f"/api/actors/{stored_actor.id}")

        lines = [r.getMessage() for r in caplog.records if r.name == "app.middleware.request_logging"]
        assert any("-> 200" in line for line in lines)
        assert not any("error_code=" in line for line in lines)
