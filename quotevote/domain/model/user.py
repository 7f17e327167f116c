"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from quotevote.domain.model.common import DomainModel
from quotevote.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    Created at registration and read at login. Only the bcrypt hash of
    the password is ever stored.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.now)
