"""Ban user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from linkup.application.usecase.views import MessageResponse
from linkup.domain.model import User
from linkup.domain.service import UserService
from linkup.domain.value import UserId


class BanUserRequest(BaseModel):
    """Ban user request."""

    user_id: str  # User to ban


class BanUserUseCase:
    """Admin use case for banning an account.

    Banned users keep their data but fail the access gate on every request.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: BanUserRequest, admin: User) -> MessageResponse:
        """Execute ban.

        Args:
            request: User to ban
            admin: Acting admin (already checked by the access gate)

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("ban_user", admin_id=str(admin.id), user_id=request.user_id):
            await self.user_service.ban(UserId(UUID(request.user_id)))
        return MessageResponse(message="User banned")
