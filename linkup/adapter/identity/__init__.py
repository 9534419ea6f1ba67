"""External identity provider adapter."""

from .verifier import (
    MockOIDCIdentityVerifier,
    OIDCIdentityVerifier,
    RealOIDCIdentityVerifier,
)

__all__ = [
    "OIDCIdentityVerifier",
    "RealOIDCIdentityVerifier",
    "MockOIDCIdentityVerifier",
]
