"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.application.usecase.views import CommentView
from linkup.domain.service import CommentService
from linkup.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase:
    """Use case for fetching a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentView:
        comment = await self.comment_service.get_comment(
            CommentId(UUID(request.comment_id))
        )
        return CommentView.from_comment(comment)
