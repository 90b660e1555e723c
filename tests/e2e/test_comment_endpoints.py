"""End-to-end tests for the article comment endpoints."""

import base64
import json
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from atlas.domain.value import CommentStatus, UserRole
from atlas.interface.api.app import create_app
from atlas.persistence.repository.inmemory import InMemoryCommentStore
from tests.conftest import add_author, add_likes, at, make_comment
from tests.di import build_test_container

PREFIX = "/support/article-comments/v1"


@pytest.fixture
def container():
    """Test container shared by the app and the seeding fixture."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client backed by the test container."""
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


@pytest.fixture
def store(client, container) -> InMemoryCommentStore:
    """Resolve the app-scoped store on the client's event loop."""
    return client.portal.call(container.get, InMemoryCommentStore)


@pytest.fixture
def thread(store):
    """Article with two roots; the older root has one reply."""
    article_id = uuid4()
    author = add_author(
        store, "Ana Lima", role=UserRole.GUIDE, avatar_url="https://cdn.example/a.png"
    )
    older = store.add_comment(
        make_comment(article_id, author_id=author.id, created_at=at(1))
    )
    newer = store.add_comment(
        make_comment(
            article_id,
            content="Is the ferry still running?",
            status=CommentStatus.PENDING,
            created_at=at(2),
        )
    )
    reply = store.add_comment(
        make_comment(article_id, parent_id=older.id, created_at=at(3))
    )
    add_likes(store, older.id, 3)
    return article_id, older, newer, reply


class TestRootCommentsEndpoint:
    """Tests for GET /{articleId}."""

    def test_page_shape(self, client, thread):
        article_id, older, newer, _ = thread

        response = client.get(f"{PREFIX}/{article_id}")

        assert response.status_code == 200
        data = response.json()
        assert [n["id"] for n in data["nodes"]] == [str(newer.id), str(older.id)]

        node = data["nodes"][1]
        assert node["articleId"] == str(article_id)
        assert node["parentId"] is None
        assert node["likes"] == 3
        assert node["replyCount"] == 1
        assert node["children"] == []
        assert node["author"] == {
            "id": str(older.author_id),
            "name": "Ana Lima",
            "avatarUrl": "https://cdn.example/a.png",
            "role": "guide",
        }

        meta = data["meta"]
        assert meta["pagination"]["hasNextPage"] is False
        assert meta["pagination"]["nextCursor"] is None
        assert meta["sort"] == {"key": "createdAt", "direction": "desc"}
        assert meta["scope"]["parentId"] is None
        assert meta["scope"]["depthMax"] is None

    def test_unknown_author_falls_back(self, client, thread):
        article_id, _, newer, _ = thread

        data = client.get(f"{PREFIX}/{article_id}").json()

        node = data["nodes"][0]
        assert node["id"] == str(newer.id)
        assert node["author"]["name"] == "Unknown"
        assert node["author"]["avatarUrl"] is None

    def test_cursor_walks_pages(self, client, thread):
        article_id, older, newer, _ = thread

        first = client.get(f"{PREFIX}/{article_id}", params={"pageSize": "1"}).json()
        assert [n["id"] for n in first["nodes"]] == [str(newer.id)]
        assert first["meta"]["pagination"]["hasNextPage"] is True

        second = client.get(
            f"{PREFIX}/{article_id}",
            params={"pageSize": "1", "cursor": first["meta"]["pagination"]["nextCursor"]},
        ).json()
        assert [n["id"] for n in second["nodes"]] == [str(older.id)]
        assert second["meta"]["pagination"]["hasNextPage"] is False

    def test_filters_are_echoed(self, client, thread):
        article_id, older, _, _ = thread

        data = client.get(
            f"{PREFIX}/{article_id}",
            params={"status": "approved", "minLikes": "2", "hasReplies": "true"},
        ).json()

        assert [n["id"] for n in data["nodes"]] == [str(older.id)]
        assert data["meta"]["filtersApplied"]["status"] == "approved"
        assert data["meta"]["filtersApplied"]["minLikes"] == 2
        assert data["meta"]["filtersApplied"]["hasReplies"] is True

    def test_malformed_parameters_fall_back(self, client, thread):
        article_id, *_ = thread

        response = client.get(
            f"{PREFIX}/{article_id}",
            params={"pageSize": "many", "sortKey": "karma", "cursor": "%%%"},
        )

        assert response.status_code == 200
        assert len(response.json()["nodes"]) == 2

    @pytest.mark.parametrize(
        "cursor",
        [
            base64.urlsafe_b64encode(b"[" * 1000).decode(),
            base64.urlsafe_b64encode(b"[" * 5000).decode(),
        ],
    )
    def test_deeply_nested_cursor_restarts_pagination(self, client, thread, cursor):
        article_id, *_ = thread

        response = client.get(f"{PREFIX}/{article_id}", params={"cursor": cursor})

        assert response.status_code == 200
        assert len(response.json()["nodes"]) == 2

    def test_out_of_range_likes_cursor_restarts_pagination(self, client, thread):
        article_id, older, *_ = thread
        payload = json.dumps({"v": 10**30, "id": str(uuid4())}).encode()
        cursor = base64.urlsafe_b64encode(payload).decode()

        response = client.get(
            f"{PREFIX}/{article_id}", params={"cursor": cursor, "sortKey": "likes"}
        )

        assert response.status_code == 200
        assert response.json()["nodes"][0]["id"] == str(older.id)

    def test_invalid_article_id(self, client):
        response = client.get(f"{PREFIX}/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid article ID format"


class TestChildCommentsEndpoint:
    """Tests for GET /{articleId}/{parentId}."""

    def test_returns_replies(self, client, thread):
        article_id, older, _, reply = thread

        response = client.get(f"{PREFIX}/{article_id}/{older.id}")

        assert response.status_code == 200
        data = response.json()
        assert [n["id"] for n in data["nodes"]] == [str(reply.id)]
        assert data["meta"]["sort"]["direction"] == "asc"
        assert data["meta"]["scope"]["parentId"] == str(older.id)

    def test_invalid_parent_id(self, client, thread):
        article_id, *_ = thread

        response = client.get(f"{PREFIX}/{article_id}/123")

        assert response.status_code == 400

    def test_missing_parent(self, client, thread):
        article_id, *_ = thread

        response = client.get(f"{PREFIX}/{article_id}/{uuid4()}")

        assert response.status_code == 404


class TestSegmentEndpoint:
    """Tests for GET /{articleId}/segment."""

    def test_null_parent_means_root(self, client, thread):
        article_id, older, newer, _ = thread

        data = client.get(
            f"{PREFIX}/{article_id}/segment", params={"parentId": "null"}
        ).json()

        assert {n["id"] for n in data["nodes"]} == {str(older.id), str(newer.id)}

    def test_parent_selects_replies(self, client, thread):
        article_id, older, _, reply = thread

        data = client.get(
            f"{PREFIX}/{article_id}/segment", params={"parentId": str(older.id)}
        ).json()

        assert [n["id"] for n in data["nodes"]] == [str(reply.id)]


class TestStatsEndpoint:
    """Tests for GET /stats."""

    def test_stats_route_is_not_an_article_id(self, client, thread):
        response = client.get(f"{PREFIX}/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["totalComments"] == 3
        assert data["totalApproved"] == 2
        assert data["totalPending"] == 1
        assert data["avgRepliesPerComment"] == 0.5
        assert data["mostActiveArticle"]["totalComments"] == 2

    def test_empty_store(self, client):
        data = client.get(f"{PREFIX}/stats").json()

        assert data["totalComments"] == 0
        assert data["mostActiveArticle"] is None


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["max_page_size"] == 200
