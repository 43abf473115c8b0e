"""End-to-end tests for newsletter and post search."""

import pytest
from fastapi.testclient import TestClient

from journal.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    return TestClient(create_app(build_test_container()))


class TestNewsletter:
    def test_subscribe_and_duplicate(self, client):
        first = client.post("/subscribe", json={"email": "Cook@Example.com"})
        second = client.post("/subscribe", json={"email": "cook@example.com"})

        assert first.status_code == 201
        assert first.json()["message"] == "Successfully subscribed to newsletter"
        assert second.status_code == 409

    def test_invalid_email(self, client):
        response = client.post("/subscribe", json={"email": "not-an-email"})

        assert response.status_code == 400

    def test_admin_listing(self, client):
        client.post("/subscribe", json={"email": "cook@example.com"})
        client.post("/auth/login", json={"password": "test-admin-password"})

        response = client.get("/admin/subscribers")

        assert response.status_code == 200
        assert response.json()["total"] == 1
        assert response.json()["subscribers"][0]["email"] == "cook@example.com"


class TestSearch:
    def test_blank_query(self, client):
        response = client.get("/search", params={"q": "  "})

        assert response.status_code == 200
        assert response.json() == []

    def test_matches_tag(self, client):
        response = client.get("/search", params={"q": "Fermentation"})

        assert response.status_code == 200
        assert [p["slug"] for p in response.json()] == ["sourdough-starter"]
