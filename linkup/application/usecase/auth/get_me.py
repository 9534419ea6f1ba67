"""Get current user use case."""

from pydantic import BaseModel

from linkup.application.usecase.post.assemble import assemble_posts
from linkup.application.usecase.views import PostView, UserView
from linkup.domain.model import User
from linkup.domain.service import CommentService, PostService, UserService


class GetMeResponse(BaseModel):
    """Current user and their posts (newest first)."""

    user: UserView
    posts: list[PostView]


class GetMeUseCase:
    """Use case for the authenticated user's own profile."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, user: User) -> GetMeResponse:
        posts = await self.post_service.list_posts_by_author(user.id)
        return GetMeResponse(
            user=UserView.from_user(user),
            posts=await assemble_posts(posts, self.user_service, self.comment_service),
        )
