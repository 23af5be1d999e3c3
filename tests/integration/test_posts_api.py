from dataclasses import replace
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from qservice.api.main import create_app
from qservice.domain import PostRepository

MISSING_ID = "16fd2706-8baf-433b-82eb-8c7fada847da"


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as c:
        yield c


def _create(client, author_id, title="Hello"):
    r = client.post("/posts", json={"title": title, "content": "World", "authorId": author_id})
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["timestamp"].endswith("Z")


def test_create_post(client, author_id):
    r = client.post("/posts", json={"title": "Hello", "content": "World", "authorId": author_id})
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["data"]["title"] == "Hello"
    assert body["data"]["authorId"] == author_id
    assert set(body["data"]) == {"id", "title", "content", "authorId", "createdAt", "updatedAt"}


def test_create_post_missing_fields(client):
    r = client.post("/posts", json={"title": "Hello"})
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"]["message"] == "Missing required fields: content, authorId"
    assert body["error"]["code"] == "QS-VAL-013-POST"
    assert [d["field"] for d in body["error"]["details"]] == ["content", "authorId"]


def test_create_post_without_body(client):
    r = client.post("/posts")
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Missing required fields: title, content, authorId"


def test_create_post_invalid_author(client):
    r = client.post("/posts", json={"title": "a", "content": "b", "authorId": "nope"})
    assert r.status_code == 400
    error = r.json()["error"]
    assert error["code"] == "QS-VAL-008-CREATE_POST"
    assert error["details"][0]["field"] == "authorId"


def test_non_object_body_is_rejected(client):
    r = client.post("/posts", json=["a", "b"])
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_get_post(client, author_id):
    created = _create(client, author_id)
    r = client.get(f"/posts/{created['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True, "data": created}


def test_get_unknown_post(client):
    r = client.get(f"/posts/{MISSING_ID}")
    assert r.status_code == 404
    assert r.json()["error"] == {"code": "QS-BIZ-001-POST", "message": "Post not found", "details": []}


def test_author_posts(client, author_id):
    first = _create(client, author_id, "first")
    second = _create(client, author_id, "second")
    r = client.get(f"/authors/{author_id}/posts")
    assert r.status_code == 200
    ids = [p["id"] for p in r.json()["data"]]
    assert set(ids) == {first["id"], second["id"]}
    assert client.get(f"/authors/{MISSING_ID}/posts").json() == {"success": True, "data": []}


def test_patch_post(client, author_id):
    created = _create(client, author_id)
    r = client.patch(f"/posts/{created['id']}", json={"content": "Updated"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["content"] == "Updated"
    assert data["title"] == created["title"]


def test_patch_without_changes(client, author_id):
    created = _create(client, author_id)
    r = client.patch(f"/posts/{created['id']}", json={})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "QS-VAL-008-UPDATE_POST"


def test_delete_post(client, author_id):
    created = _create(client, author_id)
    r = client.delete(f"/posts/{created['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["id"] == created["id"]
    assert client.get(f"/posts/{created['id']}").status_code == 404


def test_unexpected_error_is_500(container, author_id):
    broken = Mock(spec=PostRepository)
    broken.find_by_author.side_effect = RuntimeError("connection reset")
    app = create_app(replace(container, post_repository=broken))
    client = TestClient(app, raise_server_exceptions=False)
    r = client.get(f"/authors/{author_id}/posts")
    assert r.status_code == 500
    assert r.json()["success"] is False
    assert r.json()["error"]["code"] == "QS-SYS-005"
