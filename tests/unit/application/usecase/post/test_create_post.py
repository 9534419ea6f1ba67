"""Unit tests for post use cases."""

from uuid import uuid4

import pytest

from linkup.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from linkup.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from linkup.domain.error import ForbiddenError, InvalidOperationError, NotFoundError
from linkup.domain.service import ImageHostClient, UserService
from linkup.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(unit_env, handle: str):
    user_service = await unit_env.get(UserService)
    return await user_service.register(
        Handle(root=handle), f"{handle}@example.com", "hash"
    )


async def _post(unit_env, author, content="hello"):
    create_post = await unit_env.get(CreatePostUseCase)
    return await create_post.execute(
        CreatePostRequest(author_id=str(author.id), content=content)
    )


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_text_post(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")

        # Act
        view = await _post(unit_env, alice)

        # Assert
        assert view.content == "hello"
        assert view.author.handle.root == "alice"
        assert view.likes == []
        assert view.comments == []

    @pytest.mark.asyncio
    async def test_image_is_relayed_and_only_url_stored(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        create_post = await unit_env.get(CreatePostUseCase)
        image_host = await unit_env.get(ImageHostClient)

        # Act
        view = await create_post.execute(
            CreatePostRequest(
                author_id=str(alice.id),
                image=b"\x89PNG fake",
                image_filename="cat.png",
            )
        )

        # Assert
        assert view.content == ""
        assert view.image_url.startswith("https://i.ibb.co/mock/")
        assert image_host.uploads == [b"\x89PNG fake"]

    @pytest.mark.asyncio
    async def test_empty_post_rejected(self, unit_env):
        alice = await _register(unit_env, "alice")

        with pytest.raises(InvalidOperationError):
            await _post(unit_env, alice, content="")


class TestListAndGetPosts:
    """Tests for ListPostsUseCase and GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_list_resolves_authors_and_comments(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        older = await _post(unit_env, alice, "older")
        newer = await _post(unit_env, bob, "newer")
        create_comment = await unit_env.get(CreateCommentUseCase)
        await create_comment.execute(
            CreateCommentRequest(
                post_id=older.post_id, author_id=str(bob.id), text="first!"
            )
        )
        list_posts = await unit_env.get(ListPostsUseCase)

        # Act
        response = await list_posts.execute(ListPostsRequest())

        # Assert
        assert [p.post_id for p in response.posts] == [newer.post_id, older.post_id]
        assert response.posts[0].author.handle.root == "bob"
        assert [c.text for c in response.posts[1].comments] == ["first!"]

    @pytest.mark.asyncio
    async def test_get_missing_post(self, unit_env):
        get_post = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await get_post.execute(GetPostRequest(post_id=str(uuid4())))


class TestUpdateAndLike:
    """Tests for UpdatePostUseCase and LikePostUseCase."""

    @pytest.mark.asyncio
    async def test_update_by_author(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        view = await _post(unit_env, alice)
        update_post = await unit_env.get(UpdatePostUseCase)

        # Act
        updated = await update_post.execute(
            UpdatePostRequest(
                post_id=view.post_id, user_id=str(alice.id), content="edited"
            )
        )

        # Assert
        assert updated.content == "edited"

    @pytest.mark.asyncio
    async def test_update_by_other_user_forbidden(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        view = await _post(unit_env, alice)
        update_post = await unit_env.get(UpdatePostUseCase)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await update_post.execute(
                UpdatePostRequest(
                    post_id=view.post_id, user_id=str(bob.id), content="edited"
                )
            )

    @pytest.mark.asyncio
    async def test_like_twice_reports_not_created(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        view = await _post(unit_env, alice)
        like_post = await unit_env.get(LikePostUseCase)
        request = LikePostRequest(post_id=view.post_id, user_id=str(bob.id))

        # Act
        first = await like_post.execute(request)
        second = await like_post.execute(request)

        # Assert
        assert first.created is True
        assert second.created is False


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reports_removed_comments(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        view = await _post(unit_env, alice)
        create_comment = await unit_env.get(CreateCommentUseCase)
        for text in ("one", "two"):
            await create_comment.execute(
                CreateCommentRequest(
                    post_id=view.post_id, author_id=str(bob.id), text=text
                )
            )
        delete_post = await unit_env.get(DeletePostUseCase)

        # Act
        response = await delete_post.execute(
            DeletePostRequest(post_id=view.post_id), alice
        )

        # Assert
        assert response.message == "Post deleted"
        assert response.removed_comments == 2
