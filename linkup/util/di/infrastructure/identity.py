"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from linkup.adapter.identity.verifier import RealOIDCIdentityVerifier
from linkup.config import AuthSettings
from linkup.domain.service.auth_service import IdentityVerifier
from linkup.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Identity verification component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider (OIDC userinfo)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_verifier(self, settings: AuthSettings) -> IdentityVerifier:
        """Provide OIDC identity verifier."""
        return RealOIDCIdentityVerifier(
            userinfo_url=settings.external.userinfo_url,
            timeout=settings.external.timeout_seconds,
            require_verified_email=settings.external.require_verified_email,
        )
