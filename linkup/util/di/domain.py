"""Domain layer DI providers."""

from dishka import Scope, provide

from linkup.config import AuthSettings
from linkup.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from linkup.domain.service import (
    AuthService,
    CommentService,
    GraphService,
    IdentityVerifier,
    ImageHostClient,
    ImageService,
    JWTService,
    NotificationService,
    PasswordService,
    PostService,
    UserService,
)
from linkup.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, identity_verifier: IdentityVerifier) -> AuthService:
        """Provide external identity authentication service."""
        return AuthService(identity_verifier=identity_verifier)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service (holds the passlib context)."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_image_service(self, image_host: ImageHostClient) -> ImageService:
        """Provide image relay service."""
        return ImageService(image_host=image_host)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_graph_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
    ) -> GraphService:
        """Provide social graph domain service."""
        return GraphService(
            user_repository=user_repository,
            post_repository=post_repository,
            notification_service=notification_service,
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            notification_service=notification_service,
        )
