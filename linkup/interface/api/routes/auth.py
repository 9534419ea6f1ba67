"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from linkup.application.usecase.auth import (
    ExternalLoginRequest,
    ExternalLoginUseCase,
    GetMeResponse,
    GetMeUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from linkup.interface.api.dependencies import CurrentUser

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


@router.post("/register", response_model=RegisterResponse)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account with username, email and password.

    Returns 400 DuplicateIdentity if the email or username is taken.
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a bearer token.

    Returns 400 InvalidCredentials on any mismatch.
    """
    return await login_use_case.execute(request)


@router.post("/login/external", response_model=LoginResponse)
async def login_external(
    request: ExternalLoginRequest,
    external_login_use_case: FromDishka[ExternalLoginUseCase],
) -> LoginResponse:
    """Exchange an identity provider token for a bearer token.

    The account is created on first login. Returns 401 InvalidToken if the
    provider rejects the token.
    """
    return await external_login_use_case.execute(request)


@router.get("/me", response_model=GetMeResponse)
async def get_me(
    user: CurrentUser,
    get_me_use_case: FromDishka[GetMeUseCase],
) -> GetMeResponse:
    """Current user and their posts, newest first."""
    return await get_me_use_case.execute(user)
