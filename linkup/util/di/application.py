"""Application layer DI providers."""

from dishka import Scope, provide

from linkup.application.usecase.admin import BanUserUseCase, RemovePostUseCase
from linkup.application.usecase.auth import (
    AuthenticateUseCase,
    ExternalLoginUseCase,
    GetMeUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from linkup.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
)
from linkup.application.usecase.follow import FollowUserUseCase, UnfollowUserUseCase
from linkup.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkAllReadUseCase,
)
from linkup.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from linkup.application.usecase.user import (
    UpdateProfileImageUseCase,
    UpdateProfileUseCase,
)
from linkup.domain.service import (
    AuthService,
    CommentService,
    GraphService,
    ImageService,
    JWTService,
    NotificationService,
    PasswordService,
    PostService,
    UserService,
)
from linkup.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, password_service: PasswordService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service, password_service=password_service
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_external_login_use_case(
        self,
        auth_service: AuthService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> ExternalLoginUseCase:
        """Provide external identity login use case."""
        return ExternalLoginUseCase(
            auth_service=auth_service,
            user_service=user_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_authenticate_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> AuthenticateUseCase:
        """Provide access gate use case."""
        return AuthenticateUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_me_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> GetMeUseCase:
        """Provide current user use case."""
        return GetMeUseCase(
            post_service=post_service,
            user_service=user_service,
            comment_service=comment_service,
        )

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_image_use_case(
        self, image_service: ImageService, user_service: UserService
    ) -> UpdateProfileImageUseCase:
        """Provide avatar/cover upload use case."""
        return UpdateProfileImageUseCase(
            image_service=image_service, user_service=user_service
        )

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(self, graph_service: GraphService) -> FollowUserUseCase:
        """Provide follow use case."""
        return FollowUserUseCase(graph_service=graph_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, graph_service: GraphService
    ) -> UnfollowUserUseCase:
        """Provide unfollow use case."""
        return UnfollowUserUseCase(graph_service=graph_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        image_service: ImageService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            image_service=image_service,
            user_service=user_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            user_service=user_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_service: CommentService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, graph_service: GraphService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(graph_service=graph_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_ban_user_use_case(self, user_service: UserService) -> BanUserUseCase:
        """Provide ban user use case."""
        return BanUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_post_use_case(self, post_service: PostService) -> RemovePostUseCase:
        """Provide admin remove post use case."""
        return RemovePostUseCase(post_service=post_service)
