# blog_api/api/v1/routers/users.py
from fastapi import APIRouter, Depends, Query

from blog_api.api.v1.deps import get_current_identity
from blog_api.api.v1.serializers import post_to_dict, user_to_dict
from blog_api.core.errors import NotFoundError
from blog_api.core.policy import Identity
from blog_api.services import content
from blog_api.services import identity as identity_store
from blog_api.services.pagination import build_pagination, paginate, parse_page_params

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/profile")
async def profile(current: Identity = Depends(get_current_identity)):
    """
    Get the caller's profile with the number of posts they authored.

    Returns:
        dict: {"user": {id, name, email, role, createdAt, updatedAt, postCount}}

    Raises:
        NotFoundError (404): If the account no longer exists
    """
    user = await identity_store.find_by_id(current.user_id)
    if not user:
        raise NotFoundError("User not found", code="USER_NOT_FOUND")
    data = user_to_dict(user)
    data["postCount"] = await identity_store.count_posts(user.id)
    return {"user": data}


@router.get("/posts")
async def my_posts(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    current: Identity = Depends(get_current_identity),
):
    """
    Get a page of the caller's own posts (published or not), newest first.
    """
    page_no, per_page = parse_page_params(page, limit)
    skip, per_page = paginate(page_no, per_page)
    rows, total = await content.list_by_author(current.user_id, skip, per_page)
    return {
        "posts": [post_to_dict(p) for p in rows],
        "pagination": build_pagination(page_no, per_page, total),
    }
