"""Domain layer errors.

Each error carries a short machine-checkable ``reason`` that the API layer
returns alongside the HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    reason = "DomainError"


class UnauthenticatedError(DomainError):
    """Raised when a request carries no valid credential."""

    reason = "Unauthenticated"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when the actor may not perform the operation.

    Covers banned accounts, non-owners and non-admins.
    """

    reason = "Forbidden"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class NotAuthorizedError(ForbiddenError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    reason = "NotFound"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidOperationError(DomainError):
    """Raised when an operation violates a business rule (e.g. self-follow)."""

    reason = "InvalidOperation"


class DuplicateIdentityError(InvalidOperationError):
    """Raised when registering an email or handle that is already taken."""

    reason = "DuplicateIdentity"

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"An account with this {field} already exists: {value}")


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not match an account."""

    reason = "InvalidCredentials"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InvalidTokenError(DomainError):
    """Raised when an external provider rejects a presented token."""

    reason = "InvalidToken"


class UploadFailedError(DomainError):
    """Raised when the image host cannot store an upload."""

    reason = "UploadFailed"


class ExternalServiceError(Exception):
    """Raised by an injected capability (identity provider, image host)
    when the remote call fails.

    Not a DomainError: domain services translate it into InvalidTokenError
    or UploadFailedError before it reaches the API layer.
    """

    pass
