"""Infrastructure layer errors."""

from linkup.domain.error import ExternalServiceError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError, ExternalServiceError):
    """External provider error."""

    pass


class ImageHostError(ProviderError):
    """Image host rejected an upload or returned an unusable response."""

    pass


class IdentityProviderError(ProviderError):
    """Identity provider rejected a token or returned an unusable response."""

    pass
