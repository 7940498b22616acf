# blog_api/models/comment.py
import uuid
from tortoise import fields, models

class Comment(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    content = fields.CharField(max_length=500)
    post = fields.ForeignKeyField(
        "models.Post",
        related_name="comments",
        on_delete=fields.CASCADE
    )  # Comments go away with their post
    author = fields.ForeignKeyField("models.User", related_name="comments", on_delete=fields.CASCADE)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "comments"
