# blog_api/services/content.py
"""
Content store: posts and comments.

Mutations run as load -> authorize -> conditional mutate. The final UPDATE or
DELETE is filtered by id and, for non-admins, by author as well; its affected
row count is authoritative, so a record removed between the load and the
mutation yields NotFoundError instead of a phantom success.
"""
import logging
import uuid

from tortoise import timezone
from tortoise.transactions import in_transaction

from blog_api.core.errors import NotFoundError
from blog_api.core.policy import Identity, ensure_can_mutate, owner_filter
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User

logger = logging.getLogger("uvicorn.error")

POST_NOT_FOUND = "POST_NOT_FOUND"
COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"


async def _require_author(author_id: str | uuid.UUID) -> User:
    author = await User.get_or_none(id=author_id)
    if not author:
        raise NotFoundError("User not found", code="USER_NOT_FOUND")
    return author


# ===== Posts =====
async def create_post(fields: dict, author_id: str | uuid.UUID) -> Post:
    """
    Create a post owned by author_id.

    Args:
        fields: title, content and optionally tags / is_published
        author_id: id of the authenticated caller
    """
    author = await _require_author(author_id)
    post = await Post.create(
        title=fields["title"],
        content=fields["content"],
        tags=fields.get("tags") or [],
        is_published=fields.get("is_published", True),
        author=author,
    )
    logger.info("[posts] Created post id=%s author=%s", post.id, author.id)
    return post


async def get_post(post_id: uuid.UUID) -> Post | None:
    return await Post.get_or_none(id=post_id).prefetch_related("author")


async def list_published(skip: int, limit: int) -> tuple[list[Post], int]:
    qs = Post.filter(is_published=True)
    total = await qs.count()
    rows = await qs.order_by("-created_at").offset(skip).limit(limit).prefetch_related("author")
    return list(rows), total


async def list_by_author(author_id: str | uuid.UUID, skip: int, limit: int) -> tuple[list[Post], int]:
    qs = Post.filter(author_id=author_id)
    total = await qs.count()
    rows = await qs.order_by("-created_at").offset(skip).limit(limit).prefetch_related("author")
    return list(rows), total


async def update_post(post_id: uuid.UUID, fields: dict, identity: Identity) -> Post:
    """
    Apply the provided fields to a post owned by the caller (or any post for an admin).

    Raises:
        NotFoundError: Post does not exist (or vanished before the update)
        ForbiddenError: Caller is neither the author nor an admin
    """
    post = await Post.get_or_none(id=post_id)
    if not post:
        raise NotFoundError("Post not found", code=POST_NOT_FOUND)
    ensure_can_mutate(post.author_id, identity, "You can only edit your own posts")

    if fields:
        updated = await Post.filter(id=post_id, **owner_filter(identity)).update(
            **fields, updated_at=timezone.now()
        )
        if not updated:
            raise NotFoundError("Post not found", code=POST_NOT_FOUND)

    post = await get_post(post_id)
    if not post:
        raise NotFoundError("Post not found", code=POST_NOT_FOUND)
    return post


async def delete_post(post_id: uuid.UUID, identity: Identity) -> None:
    """
    Delete a post and all of its comments in one transaction.

    Raises:
        NotFoundError: Post does not exist (or vanished before the delete)
        ForbiddenError: Caller is neither the author nor an admin
    """
    post = await Post.get_or_none(id=post_id)
    if not post:
        raise NotFoundError("Post not found", code=POST_NOT_FOUND)
    ensure_can_mutate(post.author_id, identity, "You can only delete your own posts")

    async with in_transaction():
        # Comments first; raising below rolls them back
        removed_comments = await Comment.filter(post_id=post_id).delete()
        deleted = await Post.filter(id=post_id, **owner_filter(identity)).delete()
        if not deleted:
            raise NotFoundError("Post not found", code=POST_NOT_FOUND)
    logger.info("[posts] Deleted post id=%s with %s comment(s) by user=%s",
                post_id, removed_comments, identity.user_id)


# ===== Comments =====
async def create_comment(content: str, post_id: uuid.UUID, author_id: str | uuid.UUID) -> Comment:
    """
    Attach a comment to an existing post.

    Raises:
        NotFoundError: Post (or author) does not exist
    """
    post = await Post.get_or_none(id=post_id)
    if not post:
        raise NotFoundError("Post not found", code=POST_NOT_FOUND)
    author = await _require_author(author_id)
    return await Comment.create(content=content, post=post, author=author)


async def list_by_post(post_id: uuid.UUID) -> list[Comment]:
    rows = await Comment.filter(post_id=post_id).order_by("created_at").prefetch_related("author")
    return list(rows)


async def delete_comment(comment_id: uuid.UUID, identity: Identity) -> None:
    """
    Raises:
        NotFoundError: Comment does not exist (or vanished before the delete)
        ForbiddenError: Caller is neither the author nor an admin
    """
    comment = await Comment.get_or_none(id=comment_id)
    if not comment:
        raise NotFoundError("Comment not found", code=COMMENT_NOT_FOUND)
    ensure_can_mutate(comment.author_id, identity, "You can only delete your own comments")

    deleted = await Comment.filter(id=comment_id, **owner_filter(identity)).delete()
    if not deleted:
        raise NotFoundError("Comment not found", code=COMMENT_NOT_FOUND)
