"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from linkup.application.usecase.views import CommentView
from linkup.domain.service import CommentService
from linkup.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # Parent post UUID string
    author_id: str  # Current user ID
    text: str = Field(min_length=1, max_length=2000)


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        comment = await self.comment_service.add_comment(
            PostId(UUID(request.post_id)),
            UserId(UUID(request.author_id)),
            request.text,
        )
        return CommentView.from_comment(comment)
