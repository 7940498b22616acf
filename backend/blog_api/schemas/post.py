# blog_api/schemas/post.py
"""
Pydantic schemas for post endpoints.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _clean_tags(tags):
    """Trim every tag and drop the empty ones, keeping order."""
    if tags is None:
        return None
    return [t.strip() for t in tags if isinstance(t, str) and t.strip()]


class PostCreateIn(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=5000)
    tags: List[str] = Field(default_factory=list)
    isPublished: bool = True

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v):
        return _clean_tags(v)


class PostUpdateIn(BaseModel):
    """
    Request model for updating a post.
    All fields are optional - only provided fields will be updated.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    content: Optional[str] = Field(default=None, min_length=1, max_length=5000)
    tags: Optional[List[str]] = None
    isPublished: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v):
        return _clean_tags(v)

    def to_fields(self) -> dict:
        """Map provided fields onto Post model column names."""
        fields = {}
        if self.title is not None:
            fields["title"] = self.title
        if self.content is not None:
            fields["content"] = self.content
        if self.tags is not None:
            fields["tags"] = self.tags
        if self.isPublished is not None:
            fields["is_published"] = self.isPublished
        return fields
