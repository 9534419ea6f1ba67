"""Authentication domain service."""

import logfire

from linkup.domain.error import ExternalServiceError, InvalidTokenError
from linkup.domain.value.types import VerifiedIdentity

from .base import Service


class IdentityVerifier:
    """Interface for third-party identity token verification."""

    async def verify(self, token: str) -> VerifiedIdentity:
        """Verify a provider token and return the identity it asserts.

        Args:
            token: Bearer token issued by the identity provider

        Returns:
            Verified identity (at least the email)

        Raises:
            ExternalServiceError: If the provider rejects the token or is
                unreachable
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for external identity verification."""

    def __init__(self, identity_verifier: IdentityVerifier) -> None:
        """Initialize auth service.

        Args:
            identity_verifier: Identity provider client
        """
        self.identity_verifier = identity_verifier

    async def verify_external_token(self, token: str) -> VerifiedIdentity:
        """Verify an external provider token.

        Args:
            token: Provider-issued token

        Returns:
            Verified identity with a normalized email

        Raises:
            InvalidTokenError: If verification fails for any reason
        """
        with logfire.span("auth_service.verify_external_token"):
            if not token or not token.strip():
                raise InvalidTokenError("Token is empty")

            try:
                identity = await self.identity_verifier.verify(token.strip())
            except ExternalServiceError as e:
                logfire.warn("External token rejected", error=str(e))
                raise InvalidTokenError(str(e)) from e

            email = identity.email.strip().lower()
            if not email:
                raise InvalidTokenError("Provider returned no email")

            logfire.info("External token verified", email=email)
            return identity.model_copy(update={"email": email})
