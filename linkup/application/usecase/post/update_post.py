"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from linkup.application.usecase.post.assemble import assemble_posts
from linkup.application.usecase.views import PostView
from linkup.domain.service import CommentService, PostService, UserService
from linkup.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str = Field(max_length=5000)


class UpdatePostUseCase:
    """Use case for editing a post's text."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user doesn't own the post
        """
        post = await self.post_service.edit_post(
            PostId(UUID(request.post_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        [view] = await assemble_posts([post], self.user_service, self.comment_service)
        return view
