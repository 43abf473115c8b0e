"""End-to-end tests for public comments and the moderation dashboard."""

import pytest
from fastapi.testclient import TestClient

from journal.interface.api.app import create_app
from tests.di import build_test_container

PASSWORD = "test-admin-password"


@pytest.fixture
def client():
    """Test client backed by in-memory repositories and fixture posts."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def moderator(client):
    """Test client holding a moderator session cookie."""
    response = client.post("/auth/login", json={"password": PASSWORD})
    assert response.status_code == 200
    return client


def post_comment(client, content, parent_id=None, author="Alice", slug="sourdough-starter"):
    body = {"author": author, "email": f"{author.lower()}@example.com", "content": content}
    if parent_id:
        body["parentId"] = parent_id
    response = client.post(f"/posts/{slug}/comments", json=body)
    assert response.status_code == 201, response.text
    return response.json()["comment"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSession:
    """Moderator login, status and logout."""

    def test_wrong_password(self, client):
        response = client.post("/auth/login", json={"password": "nope"})

        assert response.status_code == 401

    def test_login_me_logout(self, client):
        assert client.get("/auth/me").json() == {
            "authenticated": False,
            "moderator": None,
            "expires_at": None,
        }

        login = client.post("/auth/login", json={"password": PASSWORD})
        assert login.status_code == 200
        assert "admin_session" in login.cookies

        me = client.get("/auth/me").json()
        assert me["authenticated"] is True
        assert me["moderator"] == "DigitalAxis"

        client.post("/auth/logout")
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_admin_routes_require_session(self, client):
        assert client.get("/admin/comments").status_code == 401
        assert client.get("/admin/comments/all").status_code == 401
        assert client.get("/admin/subscribers").status_code == 401

    def test_forged_cookie_is_rejected(self, client):
        client.cookies.set("admin_session", "true")

        assert client.get("/admin/comments").status_code == 401


class TestPublicComments:
    """Visitor comment flow."""

    def test_post_and_read_thread(self, client):
        root = post_comment(client, "Worked first time")
        reply = post_comment(client, "Same here", parent_id=root["id"], author="Bob")

        response = client.get("/posts/sourdough-starter/comments")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["comments"][0]["comment"]["id"] == root["id"]
        assert data["comments"][0]["children"][0]["comment"]["id"] == reply["id"]
        assert data["comments"][0]["children"][0]["depth"] == 1
        assert "email" not in data["comments"][0]["comment"] or (
            data["comments"][0]["comment"]["email"] is None
        )

    def test_invalid_comment(self, client):
        response = client.post(
            "/posts/sourdough-starter/comments",
            json={"author": "Alice", "email": "alice@example.com", "content": "x" * 2001},
        )

        assert response.status_code == 400
        assert "too long" in response.json()["detail"]

    def test_reply_to_missing_parent(self, client):
        response = client.post(
            "/posts/sourdough-starter/comments",
            json={
                "author": "Alice",
                "email": "alice@example.com",
                "content": "Hi",
                "parentId": "00000000-0000-0000-0000-000000000009",
            },
        )

        assert response.status_code == 404

    def test_reply_across_posts(self, client):
        root = post_comment(client, "Curry question", slug="weeknight-curry")

        response = client.post(
            "/posts/sourdough-starter/comments",
            json={
                "author": "Bob",
                "email": "bob@example.com",
                "content": "Hi",
                "parentId": root["id"],
            },
        )

        assert response.status_code == 400


class TestModerationFlow:
    """Moderator approve, reply and delete through the dashboard routes."""

    def test_reply_flattens_and_refetches(self, moderator):
        root = post_comment(moderator, "Question about hydration")
        reply = post_comment(moderator, "Me too", parent_id=root["id"], author="Bob")

        response = moderator.post(
            f"/admin/comments/{reply['id']}/replies",
            json={"content": "Use 75% water"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["reply"]["parentId"] == root["id"]
        assert data["reply"]["mentionedUser"] == "Bob"
        assert data["reply"]["isAdmin"] is True
        assert data["reply"]["author"] == "DigitalAxis"
        assert data["view"]["total"] == 3

    def test_approve(self, moderator):
        root = post_comment(moderator, "Hello")

        response = moderator.post(
            f"/admin/comments/{root['id']}/approve", params={"status": "pending"}
        )

        assert response.status_code == 200
        assert response.json()["comment"]["approved"] is True
        assert response.json()["view"]["comments"] == []

    def test_approve_unknown(self, moderator):
        response = moderator.post(
            "/admin/comments/00000000-0000-0000-0000-000000000009/approve"
        )

        assert response.status_code == 404

    def test_delete_requires_confirmation_for_threads(self, moderator):
        root = post_comment(moderator, "Root")
        child = post_comment(moderator, "Child", parent_id=root["id"], author="Bob")
        post_comment(moderator, "Grandchild", parent_id=child["id"], author="Cara")

        preview = moderator.get(f"/admin/comments/{root['id']}/delete-preview")
        assert preview.status_code == 200
        assert preview.json()["reply_count"] == 2
        assert preview.json()["requires_confirmation"] is True

        refused = moderator.delete(f"/admin/comments/{root['id']}")
        assert refused.status_code == 409
        assert refused.json()["detail"]["replyCount"] == 2

        deleted = moderator.delete(
            f"/admin/comments/{root['id']}", params={"confirm": "true"}
        )
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Comment and 2 replies deleted"
        assert deleted.json()["view"]["total"] == 0

        thread = moderator.get("/posts/sourdough-starter/comments").json()
        assert thread["comments"] == []

    def test_dashboard_filters(self, moderator):
        post_comment(moderator, "On sourdough")
        post_comment(moderator, "On curry", slug="weeknight-curry")

        response = moderator.get("/admin/comments", params={"post": "weeknight-curry"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["comments"][0]["comment"]["email"] == "alice@example.com"

    def test_invalid_status_filter(self, moderator):
        response = moderator.get("/admin/comments", params={"status": "spam"})

        assert response.status_code == 422
