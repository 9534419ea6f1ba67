"""Social graph domain service.

Follow edges and post likes are sets. Adding an existing member is a
no-op, and only a newly created edge or like produces a notification.
"""

import logfire

from linkup.domain.error import InvalidOperationError, NotFoundError
from linkup.domain.repository import PostRepository, UserRepository
from linkup.domain.value import NotificationType, PostId, UserId

from .base import Service
from .notification_service import NotificationService


class GraphService(Service):
    """Domain service for follows and likes."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize graph service.

        Args:
            user_repository: User repository
            post_repository: Post repository
            notification_service: Notification domain service
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.notification_service = notification_service

    async def follow(self, actor_id: UserId, target_id: UserId) -> bool:
        """Make ``actor_id`` follow ``target_id``.

        Args:
            actor_id: Following user
            target_id: Followed user

        Returns:
            True if the edge is new, False if it already existed

        Raises:
            InvalidOperationError: If a user tries to follow themselves
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "graph_service.follow", actor_id=str(actor_id), target_id=str(target_id)
        ):
            if actor_id == target_id:
                logfire.warn("Self-follow attempt", actor_id=str(actor_id))
                raise InvalidOperationError("You cannot follow yourself")

            if await self.user_repository.find_by_id(target_id) is None:
                raise NotFoundError("User", str(target_id))

            added_following = await self.user_repository.add_following(
                actor_id, target_id
            )
            added_follower = await self.user_repository.add_follower(
                target_id, actor_id
            )
            created = added_following or added_follower

            if created:
                await self.notification_service.notify(
                    NotificationType.FOLLOW, actor_id, target_id
                )
                logfire.info(
                    "Follow edge created",
                    actor_id=str(actor_id),
                    target_id=str(target_id),
                )
            return created

    async def unfollow(self, actor_id: UserId, target_id: UserId) -> bool:
        """Remove the follow edge between two users.

        Unfollowing someone you don't follow is a no-op.

        Returns:
            True if an edge was removed
        """
        with logfire.span(
            "graph_service.unfollow", actor_id=str(actor_id), target_id=str(target_id)
        ):
            removed_following = await self.user_repository.remove_following(
                actor_id, target_id
            )
            removed_follower = await self.user_repository.remove_follower(
                target_id, actor_id
            )
            return removed_following or removed_follower

    async def like(self, actor_id: UserId, post_id: PostId) -> bool:
        """Like a post.

        Args:
            actor_id: Liking user
            post_id: Post to like

        Returns:
            True if the like is new, False if the user already liked it

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "graph_service.like", actor_id=str(actor_id), post_id=str(post_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Like on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            added = await self.post_repository.add_like(post_id, actor_id)
            if added:
                await self.notification_service.notify(
                    NotificationType.LIKE, actor_id, post.author_id, post_id
                )
                logfire.info("Post liked", post_id=str(post_id), actor_id=str(actor_id))
            return added
