"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from quotevote.domain.model.user import User
from quotevote.domain.repository.user import UserRepository
from quotevote.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a new user.

        Raises:
            IntegrityError: If the username is taken
        """
        if await self.find_by_username(user.username):
            raise IntegrityError("Duplicate username", None, Exception())

        self._users[user.id] = user
        return user
