"""Authenticate request use case (the access gate)."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from linkup.domain.error import ForbiddenError, UnauthenticatedError
from linkup.domain.model import User
from linkup.domain.service import JWTService, UserService
from linkup.domain.value import UserId
from linkup.util.jwt import JWTError


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    token: str | None  # Bearer credential, None if the header is missing


class AuthenticateUseCase:
    """Resolve the acting user from a bearer token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize authenticate use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: AuthenticateRequest) -> User:
        """Execute the access checks.

        Steps:
        1. Require a credential
        2. Verify the JWT
        3. Load the referenced user
        4. Reject banned users

        Args:
            request: Bearer token

        Returns:
            The acting user

        Raises:
            UnauthenticatedError: If the token is missing, invalid or
                references no user
            ForbiddenError: If the user is banned
        """
        if not request.token:
            raise UnauthenticatedError()

        try:
            payload = self.jwt_service.verify_token(request.token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            raise UnauthenticatedError("Invalid token") from e

        user = await self.user_service.find_by_id(user_id)
        if user is None:
            logfire.warn("Token for unknown user", user_id=str(user_id))
            raise UnauthenticatedError("Invalid token")

        if user.banned:
            logfire.warn("Banned user rejected", user_id=str(user.id))
            raise ForbiddenError("Account is banned")

        return user
