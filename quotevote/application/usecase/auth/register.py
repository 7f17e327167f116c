"""Register use case."""

import logfire
from pydantic import BaseModel

from quotevote.application.usecase.auth.login import AuthResponse
from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import AuthService


class RegisterRequest(BaseModel):
    """New account request."""

    username: str
    password: str


class RegisterUseCase(BaseUseCase[RegisterRequest, AuthResponse]):
    """Use case for creating an account and signing in."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Args:
            request: Desired username and password

        Returns:
            Session token and the new user's details

        Raises:
            InvalidArgumentError: If username or password is blank
            AlreadyExistsError: If the username is taken
        """
        with logfire.span("register.execute", username=request.username):
            result = await self.auth_service.register(
                request.username, request.password
            )
            return AuthResponse.from_result(result)
