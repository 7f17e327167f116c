"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from quotevote.domain.value.common import RootValueObject, ValueObject
from quotevote.domain.value.identifiers import UserId


class VoteType(str, Enum):
    """Stored orientation of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VoteDirection(str, Enum):
    """Direction requested by a caller."""

    UP = "up"
    DOWN = "down"

    @property
    def vote_type(self) -> VoteType:
        """Vote type this direction records."""
        return VoteType.UPVOTE if self is VoteDirection.UP else VoteType.DOWNVOTE


class Username(RootValueObject[str]):
    """Unique login name.

    Surrounding whitespace is stripped; must be 1-64 characters afterwards.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Username must be 1-64 characters")
        return v


class CallerIdentity(ValueObject):
    """Identity of the authenticated caller.

    Resolved by the interface layer from the session token; the domain
    trusts it as-is and never parses tokens itself.
    """

    user_id: UserId
