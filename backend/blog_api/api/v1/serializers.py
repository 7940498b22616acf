# blog_api/api/v1/serializers.py
"""
Conversion of ORM rows into API response dictionaries.
The password hash never leaves this module.
"""
import datetime as dt

from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User


def _iso(value: dt.datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.isoformat() + "Z"
    return value.isoformat()


def user_to_dict(u: User) -> dict:
    return {
        "id": str(u.id),
        "name": u.name,
        "email": u.email,
        "role": u.role,
        "createdAt": _iso(u.created_at),
        "updatedAt": _iso(u.updated_at),
    }


def author_to_dict(u: User, with_email: bool = True) -> dict:
    data = {"id": str(u.id), "name": u.name}
    if with_email:
        data["email"] = u.email
    return data


def post_to_dict(p: Post, comment_count: int | None = None) -> dict:
    """Serialize a post; the author relation must be fetched."""
    data = {
        "id": str(p.id),
        "title": p.title,
        "content": p.content,
        "author": author_to_dict(p.author),
        "tags": list(p.tags or []),
        "isPublished": p.is_published,
        "createdAt": _iso(p.created_at),
        "updatedAt": _iso(p.updated_at),
    }
    if comment_count is not None:
        data["commentCount"] = comment_count
    return data


def comment_to_dict(c: Comment) -> dict:
    """Serialize a comment; the author relation must be fetched."""
    return {
        "id": str(c.id),
        "content": c.content,
        "post": str(c.post_id),
        "author": author_to_dict(c.author, with_email=False),
        "createdAt": _iso(c.created_at),
    }
