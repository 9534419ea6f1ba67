"""Domain value objects for LinkUp.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from linkup.domain.value.common import RootValueObject, ValueObject


class UserRole(str, Enum):
    """Role of an account."""

    USER = "user"
    ADMIN = "admin"


class NotificationType(str, Enum):
    """Kind of action that produced a notification."""

    FOLLOW = "follow"
    LIKE = "like"
    COMMENT = "comment"


class Handle(RootValueObject[str]):
    """Public username of an account.

    Locally registered users pick their handle; users created on first
    external login get their verified email as handle.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is non-empty, bounded and has no whitespace."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        if any(c.isspace() for c in v):
            raise ValueError("Handle must not contain whitespace")
        return v


class VerifiedIdentity(ValueObject):
    """Identity asserted by an external provider after token verification."""

    email: str
    display_name: str | None = None
    avatar_url: str | None = None
