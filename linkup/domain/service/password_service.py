"""Password hashing domain service."""

import logfire

from linkup.config import AuthSettings
from linkup.util.password import (
    create_password_context,
    hash_password,
    verify_password,
)

from .base import Service


class PasswordService(Service):
    """Hashes and checks local account passwords with bcrypt."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.context = create_password_context(auth_settings)

    def hash(self, password: str) -> str:
        with logfire.span("password_service.hash"):
            return hash_password(self.context, password)

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Check a password against a stored hash.

        Accounts without a local password (external sign-in only) never match.
        """
        if not password_hash:
            return False
        with logfire.span("password_service.verify"):
            return verify_password(self.context, password, password_hash)
