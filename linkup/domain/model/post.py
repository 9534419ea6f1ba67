"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from linkup.domain.model.common import DomainModel
from linkup.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    ``image_url`` always points at the external image host; raw image
    bytes never reach the post store. ``likes`` holds each liker once.
    """

    id: PostId
    author_id: UserId
    content: str = Field(default="", max_length=5000)
    image_url: Optional[str] = None
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("likes")
    @classmethod
    def validate_unique_likes(cls, v: list[UserId]) -> list[UserId]:
        """Each user likes a post at most once."""
        if len(set(v)) != len(v):
            raise ValueError("A user can like a post only once")
        return v

    @model_validator(mode="after")
    def validate_has_body(self) -> "Post":
        """A post carries text, an image, or both."""
        if not self.content.strip() and not self.image_url:
            raise ValueError("A post needs content or an image")
        return self
