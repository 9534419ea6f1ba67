"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.application.usecase.post.assemble import assemble_posts
from linkup.application.usecase.views import PostView
from linkup.domain.service import CommentService, PostService, UserService
from linkup.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase:
    """Use case for a single post with author and comments."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))
        [view] = await assemble_posts([post], self.user_service, self.comment_service)
        return view
