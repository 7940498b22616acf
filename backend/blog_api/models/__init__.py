# blog_api/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: account and authentication model
- Post: blog post authored by a User
- Comment: comment on a Post (deleted with its Post)
"""
from .user import User
from .post import Post
from .comment import Comment
