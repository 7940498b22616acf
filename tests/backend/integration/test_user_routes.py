import asyncio

import pytest

from blog_api.core.security import create_access_token


pytestmark = pytest.mark.asyncio


async def test_profile_and_own_posts(client):
    reg = await client.post(
        "/api/auth/register",
        json={"name": "Prolific", "email": "prolific@example.com", "password": "Profile#1"},
    )
    headers = {"Authorization": f"Bearer {reg.json()['token']}"}
    other = await client.post(
        "/api/auth/register",
        json={"name": "Other", "email": "other@example.com", "password": "Profile#1"},
    )
    other_headers = {"Authorization": f"Bearer {other.json()['token']}"}

    for i in range(3):
        await client.post(
            "/api/posts",
            headers=headers,
            json={"title": f"post {i}", "content": "c", "isPublished": i != 0},
        )
        await asyncio.sleep(0.01)
    await client.post("/api/posts", headers=other_headers, json={"title": "not mine", "content": "c"})

    profile = await client.get("/api/user/profile", headers=headers)
    assert profile.status_code == 200
    user = profile.json()["user"]
    assert user["email"] == "prolific@example.com"
    assert user["postCount"] == 3
    assert "password_hash" not in user and "password" not in user

    page = await client.get("/api/user/posts", headers=headers, params={"page": 1, "limit": 2})
    body = page.json()
    assert page.status_code == 200
    assert [p["title"] for p in body["posts"]] == ["post 2", "post 1"]
    assert body["pagination"]["totalItems"] == 3
    assert body["pagination"]["totalPages"] == 2
    assert body["pagination"]["hasNext"] is True

    last = await client.get("/api/user/posts", headers=headers, params={"page": 2, "limit": 2})
    assert [p["title"] for p in last.json()["posts"]] == ["post 0"]  # drafts included


async def test_user_routes_require_token(client):
    assert (await client.get("/api/user/profile")).status_code == 401
    assert (await client.get("/api/user/posts")).status_code == 401


async def test_profile_of_deleted_account(client):
    token = create_access_token("7c9e6679-7425-40de-944b-e07fc1f90ae7", "ghost@example.com", "user")
    resp = await client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "USER_NOT_FOUND"
