# blog_api/api/v1/routers/posts.py
from fastapi import APIRouter, Depends, Query, status

from blog_api.api.v1.deps import get_current_identity
from blog_api.api.v1.serializers import post_to_dict
from blog_api.core.errors import NotFoundError
from blog_api.core.ids import parse_id
from blog_api.core.policy import Identity
from blog_api.schemas.post import PostCreateIn, PostUpdateIn
from blog_api.services import content
from blog_api.services.pagination import build_pagination, comment_counts, paginate, parse_page_params

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("")
async def list_posts(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
):
    """
    Get a page of published posts, newest first.

    Each post carries a commentCount computed with one grouped query for the
    whole page. page/limit default to 1/10 when absent or non-numeric and are
    clamped to at least 1.

    Returns:
        dict: Response containing:
            - posts: List of post objects with commentCount
            - pagination: currentPage, totalPages, totalItems, totalPosts, hasNext, hasPrev
    """
    page_no, per_page = parse_page_params(page, limit)
    skip, per_page = paginate(page_no, per_page)
    rows, total = await content.list_published(skip, per_page)
    counts = await comment_counts(p.id for p in rows)
    return {
        "posts": [post_to_dict(p, counts.get(str(p.id), 0)) for p in rows],
        "pagination": build_pagination(page_no, per_page, total),
    }


@router.get("/{post_id}")
async def get_post(post_id: str):
    """
    Get a single post by id.

    Raises:
        MalformedIdError (400): If post_id is not a valid id
        NotFoundError (404): If the post does not exist
    """
    post = await content.get_post(parse_id(post_id))
    if not post:
        raise NotFoundError("Post not found", code=content.POST_NOT_FOUND)
    return post_to_dict(post)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(body: PostCreateIn, current: Identity = Depends(get_current_identity)):
    """
    Create a post authored by the caller.

    Args:
        body: title (1-100), content (1-5000), optional tags and isPublished
        current: Authenticated identity (from dependency)
    """
    post = await content.create_post(
        {
            "title": body.title,
            "content": body.content,
            "tags": body.tags,
            "is_published": body.isPublished,
        },
        current.user_id,
    )
    return {"message": "Post created successfully", "post": post_to_dict(post)}


@router.put("/{post_id}")
async def update_post(post_id: str, body: PostUpdateIn, current: Identity = Depends(get_current_identity)):
    """
    Update a post (author or admin only). Only provided fields change.

    Raises:
        MalformedIdError (400): If post_id is not a valid id
        ForbiddenError (403): If caller is neither author nor admin
        NotFoundError (404): If the post does not exist
    """
    post = await content.update_post(parse_id(post_id), body.to_fields(), current)
    return {"message": "Post updated successfully", "post": post_to_dict(post)}


@router.delete("/{post_id}")
async def delete_post(post_id: str, current: Identity = Depends(get_current_identity)):
    """
    Delete a post and its comments (author or admin only).

    Raises:
        MalformedIdError (400): If post_id is not a valid id
        ForbiddenError (403): If caller is neither author nor admin
        NotFoundError (404): If the post does not exist
    """
    await content.delete_post(parse_id(post_id), current)
    return {"message": "Post and associated comments deleted successfully"}
