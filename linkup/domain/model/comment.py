"""Comment entity.

Comments are flat replies on a post. They are removed together with
their post.
"""

from datetime import datetime, timezone

from pydantic import Field

from linkup.domain.model.common import DomainModel
from linkup.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
