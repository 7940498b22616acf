import asyncio

import pytest


pytestmark = pytest.mark.asyncio


async def _register(client, name: str):
    resp = await client.post(
        "/api/auth/register",
        json={"name": name, "email": f"{name}@example.com", "password": "Comment#1"},
    )
    return {"Authorization": f"Bearer {resp.json()['token']}"}


async def _post(client, headers):
    resp = await client.post("/api/posts", headers=headers, json={"title": "t", "content": "c"})
    return resp.json()["post"]["id"]


async def test_comment_lifecycle(client, create_admin, auth_header_factory):
    author_headers = await _register(client, "author")
    reader_headers = await _register(client, "reader")
    post_id = await _post(client, author_headers)

    first = await client.post(
        "/api/comments", headers=reader_headers, json={"content": "  first!  ", "postId": post_id}
    )
    assert first.status_code == 201
    first_comment = first.json()["comment"]
    assert first_comment["content"] == "first!"
    assert first_comment["post"] == post_id
    assert first_comment["author"]["name"] == "reader"
    assert "email" not in first_comment["author"]

    await asyncio.sleep(0.01)
    second = await client.post(
        "/api/comments", headers=author_headers, json={"content": "thanks", "postId": post_id}
    )
    second_id = second.json()["comment"]["id"]

    listed = await client.get(f"/api/comments/{post_id}")
    assert [c["content"] for c in listed.json()] == ["first!", "thanks"]

    # Post author cannot delete someone else's comment
    forbidden = await client.delete(f"/api/comments/{first_comment['id']}", headers=author_headers)
    assert forbidden.status_code == 403

    own = await client.delete(f"/api/comments/{first_comment['id']}", headers=reader_headers)
    assert own.status_code == 200

    admin, admin_password = await create_admin()
    admin_headers = await auth_header_factory(admin.email, admin_password)
    moderated = await client.delete(f"/api/comments/{second_id}", headers=admin_headers)
    assert moderated.status_code == 200

    gone = await client.delete(f"/api/comments/{second_id}", headers=admin_headers)
    assert gone.status_code == 404
    assert gone.json()["detail"]["code"] == "COMMENT_NOT_FOUND"
    assert (await client.get(f"/api/comments/{post_id}")).json() == []


async def test_comment_on_missing_post(client):
    headers = await _register(client, "lost")
    resp = await client.post(
        "/api/comments",
        headers=headers,
        json={"content": "hello?", "postId": "7c9e6679-7425-40de-944b-e07fc1f90ae7"},
    )
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "POST_NOT_FOUND"


async def test_comment_validation_and_auth(client):
    unauth = await client.post("/api/comments", json={"content": "x", "postId": "whatever"})
    assert unauth.status_code == 401

    headers = await _register(client, "picky")
    post_id = await _post(client, headers)
    too_long = await client.post("/api/comments", headers=headers, json={"content": "x" * 501, "postId": post_id})
    assert too_long.status_code == 400
    bad_id = await client.post("/api/comments", headers=headers, json={"content": "x", "postId": "nope"})
    assert bad_id.status_code == 400
    assert bad_id.json()["detail"]["code"] == "INVALID_ID"


async def test_list_comments_for_unknown_post_is_empty(client):
    resp = await client.get("/api/comments/7c9e6679-7425-40de-944b-e07fc1f90ae7")
    assert resp.status_code == 200
    assert resp.json() == []
