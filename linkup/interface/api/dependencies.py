"""Access gate dependencies.

``require_user`` resolves the acting user from the ``Authorization:
Bearer`` header and stores it on ``request.state.user``.
``require_admin`` runs ``require_user`` first, then checks the role.
"""

from typing import Annotated

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from linkup.application.usecase.auth import AuthenticateRequest, AuthenticateUseCase
from linkup.domain.error import ForbiddenError
from linkup.domain.model import User

# auto_error=False so missing credentials become our 401 body, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def require_user(
    request: Request,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> User:
    """Authenticate the request.

    Raises:
        UnauthenticatedError: If the credential is missing or invalid
        ForbiddenError: If the user is banned
    """
    token = credentials.credentials if credentials else None
    user = await authenticate_use_case.execute(AuthenticateRequest(token=token))
    request.state.user = user
    return user


async def require_admin(user: User = Depends(require_user)) -> User:
    """Authenticate the request and require the admin role.

    Raises:
        ForbiddenError: If the user is not an admin
    """
    if not user.is_admin:
        raise ForbiddenError("Admin only")
    return user


CurrentUser = Annotated[User, Depends(require_user)]
AdminUser = Annotated[User, Depends(require_admin)]
