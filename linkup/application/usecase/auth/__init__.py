"""Authentication use cases."""

from .authenticate import AuthenticateRequest, AuthenticateUseCase
from .external_login import ExternalLoginRequest, ExternalLoginUseCase
from .get_me import GetMeResponse, GetMeUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "ExternalLoginRequest",
    "ExternalLoginUseCase",
    "GetMeResponse",
    "GetMeUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
