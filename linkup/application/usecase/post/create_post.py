"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from linkup.application.usecase.post.assemble import assemble_posts
from linkup.application.usecase.views import PostView
from linkup.domain.service import (
    CommentService,
    ImageService,
    PostService,
    UserService,
)
from linkup.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # Current user ID
    content: str = Field(default="", max_length=5000)
    image: bytes | None = None  # Raw upload, relayed to the image host
    image_filename: str | None = None


class CreatePostUseCase:
    """Use case for creating a post with optional image."""

    def __init__(
        self,
        post_service: PostService,
        image_service: ImageService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            image_service: Image relay service
            user_service: User domain service (author summary)
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.image_service = image_service
        self.user_service = user_service
        self.comment_service = comment_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Relay the image to the host, if any
        2. Save the post with the hosted URL

        Raises:
            UploadFailedError: If the image host fails
            InvalidOperationError: If the post has neither text nor image
        """
        author_id = UserId(UUID(request.author_id))

        image_url = None
        if request.image is not None:
            image_url = await self.image_service.relay(
                request.image, request.image_filename
            )

        with logfire.span("create_post", author_id=request.author_id):
            post = await self.post_service.create_post(
                author_id, request.content, image_url
            )

        [view] = await assemble_posts([post], self.user_service, self.comment_service)
        return view
