"""List posts use case."""

from typing import Optional

from pydantic import BaseModel, Field

from linkup.application.usecase.post.assemble import assemble_posts
from linkup.application.usecase.views import PostView
from linkup.domain.service import CommentService, PostService, UserService


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: Optional[int] = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase:
    """Use case for the global feed, newest first."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts = await self.post_service.list_posts(
            limit=request.limit, offset=request.offset
        )
        return ListPostsResponse(
            posts=await assemble_posts(posts, self.user_service, self.comment_service)
        )
