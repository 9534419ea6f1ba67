"""User aggregate root.

Users register with a password or sign in through an external identity
provider, and hold the follow edges of the social graph.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from linkup.domain.model.common import DomainModel
from linkup.domain.value import UserId, UserRole
from linkup.domain.value.types import Handle


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` is None for accounts created by an external provider;
    those accounts cannot use password login.

    Follow edges are stored on both ends: ``following`` on the actor and
    ``followers`` on the target. Both are sets (no duplicates).
    """

    id: UserId
    handle: Handle
    email: str
    password_hash: Optional[str] = None
    role: UserRole = UserRole.USER
    banned: bool = False

    display_name: Optional[str] = Field(default=None, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    birth_date: Optional[date] = None
    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None

    followers: list[UserId] = Field(default_factory=list)
    following: list[UserId] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_graph_edges(self) -> "User":
        """A user never follows or is followed by themselves."""
        if self.id in self.followers or self.id in self.following:
            raise ValueError("A user cannot appear in their own follow lists")
        return self

    @property
    def is_admin(self) -> bool:
        """Whether the user has the admin role."""
        return self.role == UserRole.ADMIN
