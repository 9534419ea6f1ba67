"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.application.usecase.views import MessageResponse
from linkup.domain.service import CommentService
from linkup.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be the comment author)


class DeleteCommentUseCase:
    """Use case for deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        """Execute delete comment.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment author
        """
        await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return MessageResponse(message="Comment deleted")
