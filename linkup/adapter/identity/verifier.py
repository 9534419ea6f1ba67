"""OpenID Connect identity verifier.

Verifies an access token by calling the provider's userinfo endpoint;
a successful response proves the token and yields the user's email.
"""

import httpx
import logfire

from linkup.adapter.error import IdentityProviderError
from linkup.domain.service.auth_service import IdentityVerifier
from linkup.domain.value.types import VerifiedIdentity


class OIDCIdentityVerifier(IdentityVerifier):
    """Base class for OIDC identity verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealOIDCIdentityVerifier(OIDCIdentityVerifier):
    """Identity verifier backed by an OIDC userinfo endpoint."""

    def __init__(
        self,
        userinfo_url: str,
        timeout: float = 30.0,
        require_verified_email: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize verifier.

        Args:
            userinfo_url: Provider userinfo endpoint
            timeout: Request timeout in seconds
            require_verified_email: Reject identities with email_verified=false
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.userinfo_url = userinfo_url
        self.timeout = timeout
        self.require_verified_email = require_verified_email
        self.transport = transport

    async def verify(self, token: str) -> VerifiedIdentity:
        """Verify a provider access token.

        Args:
            token: Provider access token

        Returns:
            Identity from the userinfo claims

        Raises:
            IdentityProviderError: If the provider rejects the token or the
                claims lack a usable email
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    self.userinfo_url,
                    headers={"Authorization": f"Bearer {token}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Userinfo HTTP error", error=str(e))
            raise IdentityProviderError(f"HTTP error during verification: {e}")

        if response.status_code != 200:
            logfire.warn("Userinfo request rejected", status_code=response.status_code)
            raise IdentityProviderError(
                f"Token verification failed: {response.status_code}"
            )

        try:
            claims = response.json()
        except ValueError:
            raise IdentityProviderError("Malformed userinfo response")

        email = claims.get("email") if isinstance(claims, dict) else None
        if not email:
            raise IdentityProviderError("Userinfo response has no email")

        if self.require_verified_email and claims.get("email_verified") is False:
            raise IdentityProviderError("Email is not verified by the provider")

        logfire.info("External identity verified", email=email)
        return VerifiedIdentity(
            email=email,
            display_name=claims.get("name"),
            avatar_url=claims.get("picture"),
        )


class MockOIDCIdentityVerifier(OIDCIdentityVerifier):
    """Mock identity verifier for testing.

    Accepts tokens of the form ``mock-<email>`` and rejects everything else.
    """

    PREFIX = "mock-"

    def __init__(self) -> None:
        pass

    async def verify(self, token: str) -> VerifiedIdentity:
        if not token.startswith(self.PREFIX) or "@" not in token:
            raise IdentityProviderError("Mock provider rejected token")

        email = token[len(self.PREFIX):]
        return VerifiedIdentity(
            email=email,
            display_name=email.split("@")[0],
            avatar_url=None,
        )
