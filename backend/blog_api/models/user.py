# blog_api/models/user.py
"""
Database model for users.
Represents an account that can author posts and comments.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Posts (one-to-many, via related_name="posts")
    - Has many Comments (one-to-many, via related_name="comments")

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email is unique and stored lowercase
    - Role determines access level (user vs admin)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    name = fields.CharField(max_length=50)  # Display name
    email = fields.CharField(
        max_length=254,
        unique=True,
        index=True
    )  # Login email (unique, lowercase-normalized before save)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never serialized
    role = fields.CharField(max_length=16, default="user")  # "user" (default) or "admin"
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
