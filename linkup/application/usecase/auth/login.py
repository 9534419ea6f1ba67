"""Login use case."""

import logfire
from pydantic import BaseModel

from linkup.application.usecase.views import UserView
from linkup.domain.error import InvalidCredentialsError
from linkup.domain.service import JWTService, PasswordService, UserService


class LoginRequest(BaseModel):
    """Email/password login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: UserView


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Unknown email, an account without a local password and a wrong
        password all fail the same way.

        Args:
            request: Login request

        Returns:
            JWT token and the user

        Raises:
            InvalidCredentialsError: If the credentials don't match
        """
        with logfire.span("login_user"):
            user = await self.user_service.get_user_by_email(request.email)

            if user is None or not self.password_service.verify(
                request.password, user.password_hash
            ):
                logfire.warn("Login failed")
                raise InvalidCredentialsError()

            # Banned users may still log in; the access gate rejects them
            token = self.jwt_service.create_token(str(user.id))
            logfire.info("User logged in", user_id=str(user.id))

            return LoginResponse(token=token, user=UserView.from_user(user))
