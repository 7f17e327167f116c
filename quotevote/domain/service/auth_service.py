"""Authentication domain service.

Username/password registration and login. Passwords are bcrypt-hashed in
a worker thread so hashing never blocks the event loop.
"""

import asyncio
from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from quotevote.config import AuthSettings
from quotevote.domain.error import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
)
from quotevote.domain.model.common import DomainModel
from quotevote.domain.model.user import User
from quotevote.domain.repository import UserRepository
from quotevote.domain.value import UserId, Username
from quotevote.util.password import (
    MAX_PASSWORD_BYTES,
    hash_password,
    verify_password,
)

from .base import Service
from .jwt_service import JWTService


class AuthResult(DomainModel):
    """Outcome of a successful registration or login."""

    token: str
    user: User


def _parse_username(username: str) -> Username:
    try:
        return Username(username)
    except ValidationError as e:
        raise InvalidArgumentError(str(e.errors()[0]["msg"])) from e


class AuthService(Service):
    """Domain service for registration and login."""

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            jwt_service: JWT token domain service
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.user_repository = user_repository
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def register(self, username: str, password: str) -> AuthResult:
        """Create a user and issue a token.

        Args:
            username: Desired username
            password: Plain-text password

        Returns:
            Token and the created user

        Raises:
            InvalidArgumentError: If username or password is blank,
                or the password is longer than bcrypt accepts
            AlreadyExistsError: If the username is taken
        """
        name = _parse_username(username)
        with logfire.span("auth_service.register", username=name.root):
            if not password:
                raise InvalidArgumentError("Password is required")
            if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
                raise InvalidArgumentError(
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
                )

            if await self.user_repository.find_by_username(name):
                logfire.warn("Username already taken", username=name.root)
                raise AlreadyExistsError("User", name.root)

            password_hash = await asyncio.to_thread(
                hash_password, password, self.auth_settings.bcrypt_rounds
            )
            user = User(
                id=UserId(uuid4()),
                username=name,
                password_hash=password_hash,
                created_at=datetime.now(),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent registration
                raise AlreadyExistsError("User", name.root)

            logfire.info("User registered", user_id=str(saved.id), username=name.root)
            return AuthResult(token=self._issue_token(saved), user=saved)

    async def login(self, username: str, password: str) -> AuthResult:
        """Check credentials and issue a token.

        Args:
            username: Username
            password: Plain-text password

        Returns:
            Token and the authenticated user

        Raises:
            NotFoundError: If no user has this username
            UnauthorizedError: If the password doesn't match
        """
        name = _parse_username(username)
        with logfire.span("auth_service.login", username=name.root):
            user = await self.user_repository.find_by_username(name)
            if user is None:
                logfire.warn("Login for unknown user", username=name.root)
                raise NotFoundError("User", name.root)

            valid = await asyncio.to_thread(
                verify_password, password, user.password_hash
            )
            if not valid:
                logfire.warn("Invalid credentials", username=name.root)
                raise UnauthorizedError("Invalid credentials")

            logfire.info("User logged in", user_id=str(user.id))
            return AuthResult(token=self._issue_token(user), user=user)

    def _issue_token(self, user: User) -> str:
        return self.jwt_service.create_token(str(user.id), user.username.root)
