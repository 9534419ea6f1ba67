"""Build post views with authors and comments."""

from linkup.application.usecase.views import PostView
from linkup.domain.model import Post
from linkup.domain.service import CommentService, UserService


async def assemble_posts(
    posts: list[Post],
    user_service: UserService,
    comment_service: CommentService,
) -> list[PostView]:
    """Resolve authors and comments for a batch of posts (two queries)."""
    authors = await user_service.get_users_by_ids([p.author_id for p in posts])
    comments = await comment_service.comments_by_post([p.id for p in posts])
    return [PostView.build(post, authors, comments) for post in posts]
