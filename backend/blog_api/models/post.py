# blog_api/models/post.py
"""
Database model for blog posts.
"""
import uuid
from tortoise import fields, models

class Post(models.Model):
    """
    Post database model.

    Relationships:
    - Belongs to a User author (many-to-one); author never changes after creation
    - Has many Comments (one-to-many, via related_name="comments"); deleting
      a post deletes its comments
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=100)
    content = fields.TextField()  # Up to 5000 characters, enforced by request schemas
    author = fields.ForeignKeyField(
        "models.User",
        related_name="posts",
        on_delete=fields.CASCADE
    )
    tags = fields.JSONField(default=list)  # Ordered list of trimmed tag strings
    is_published = fields.BooleanField(default=True, index=True)
    created_at = fields.DatetimeField(auto_now_add=True, index=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "posts"
