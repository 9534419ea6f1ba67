"""External identity login use case."""

import logfire
from pydantic import BaseModel, Field

from linkup.application.usecase.auth.login import LoginResponse
from linkup.application.usecase.views import UserView
from linkup.domain.service import AuthService, JWTService, UserService


class ExternalLoginRequest(BaseModel):
    """Login with a token issued by the external identity provider."""

    token: str = Field(min_length=1)


class ExternalLoginUseCase:
    """Use case for signing in with an external identity provider token.

    The local account is created on first login.
    """

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize external login use case.

        Args:
            auth_service: Authentication domain service
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: ExternalLoginRequest) -> LoginResponse:
        """Execute external login flow.

        Steps:
        1. Verify the provider token
        2. Resolve or create the local account for the verified email
        3. Issue a local JWT

        Raises:
            InvalidTokenError: If the provider rejects the token
        """
        identity = await self.auth_service.verify_external_token(request.token)

        with logfire.span("external_login", email=identity.email):
            user = await self.user_service.get_or_create_external(identity)
            token = self.jwt_service.create_token(str(user.id))

        return LoginResponse(token=token, user=UserView.from_user(user))
