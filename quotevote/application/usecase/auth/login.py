"""Login use case."""

import logfire
from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import AuthResult, AuthService


class LoginRequest(BaseModel):
    """Username/password login request."""

    username: str
    password: str


class AuthResponse(BaseModel):
    """Issued session token and the user it belongs to."""

    token: str
    user_id: str
    username: str

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        """Build response from a domain auth result."""
        return cls(
            token=result.token,
            user_id=str(result.user.id),
            username=result.user.username.root,
        )


class LoginUseCase(BaseUseCase[LoginRequest, AuthResponse]):
    """Use case for logging in with username and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Login credentials

        Returns:
            Session token and user details

        Raises:
            NotFoundError: If no user has this username
            UnauthorizedError: If the password is wrong
        """
        with logfire.span("login.execute", username=request.username):
            result = await self.auth_service.login(request.username, request.password)
            return AuthResponse.from_result(result)
