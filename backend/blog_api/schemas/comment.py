# blog_api/schemas/comment.py
from pydantic import BaseModel, Field, field_validator


class CommentCreateIn(BaseModel):
    content: str = Field(min_length=1, max_length=500)
    postId: str  # Parsed into a UUID by the route (400 INVALID_ID if malformed)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v):
        return v.strip() if isinstance(v, str) else v
