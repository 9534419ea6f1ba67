"""Post routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Query, UploadFile
from pydantic import BaseModel, Field

from linkup.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from linkup.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from linkup.application.usecase.views import CommentView, PostView
from linkup.interface.api.dependencies import CurrentUser

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post."""

    content: str = Field(max_length=5000)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    text: str = Field(min_length=1, max_length=2000)


@router.post("", response_model=PostView)
async def create_post(
    user: CurrentUser,
    create_post_use_case: FromDishka[CreatePostUseCase],
    content: str = Form(default="", max_length=5000),
    image: UploadFile | None = File(default=None),
) -> PostView:
    """Create a post from multipart form data.

    The optional ``image`` is relayed to the image host and only its URL
    is stored. Returns 502 UploadFailed if the host fails.
    """
    data = await image.read() if image is not None else None
    return await create_post_use_case.execute(
        CreatePostRequest(
            author_id=str(user.id),
            content=content,
            image=data,
            image_filename=image.filename if image is not None else None,
        )
    )


@router.get("", response_model=list[PostView])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> list[PostView]:
    """All posts, newest first, with author and comments.

    ``limit`` and ``offset`` page through the feed; without ``limit`` every
    post is returned.
    """
    result = await list_posts_use_case.execute(
        ListPostsRequest(limit=limit, offset=offset)
    )
    return result.posts


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """A single post with author and comments."""
    return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    user: CurrentUser,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> PostView:
    """Edit a post's text. Only the author may edit."""
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id), user_id=str(user.id), content=request.content
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    user: CurrentUser,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete a post and its comments (author or admin)."""
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id)), user
    )


@router.put("/{post_id}/like", response_model=LikePostResponse)
async def like_post(
    post_id: UUID,
    user: CurrentUser,
    like_post_use_case: FromDishka[LikePostUseCase],
) -> LikePostResponse:
    """Like a post. Liking twice is a no-op."""
    return await like_post_use_case.execute(
        LikePostRequest(post_id=str(post_id), user_id=str(user.id))
    )


@router.post("/{post_id}/comments", response_model=CommentView)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    user: CurrentUser,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentView:
    """Comment on a post."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id), author_id=str(user.id), text=request.text
        )
    )
