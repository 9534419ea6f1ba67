"""Register use case."""

from pydantic import BaseModel, Field

from linkup.domain.service import PasswordService, UserService
from linkup.domain.value.types import Handle


class RegisterRequest(BaseModel):
    """Register request."""

    username: Handle
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1, max_length=128)


class RegisterResponse(BaseModel):
    """Register response."""

    message: str
    user_id: str


class RegisterUseCase:
    """Use case for creating an account with email and password."""

    def __init__(
        self, user_service: UserService, password_service: PasswordService
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
        """
        self.user_service = user_service
        self.password_service = password_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration.

        Args:
            request: Handle, email and plain-text password

        Returns:
            Confirmation with the new user ID

        Raises:
            DuplicateIdentityError: If the email or handle is taken
        """
        password_hash = self.password_service.hash(request.password)
        user = await self.user_service.register(
            request.username, request.email, password_hash
        )
        return RegisterResponse(message="Registered", user_id=str(user.id))
