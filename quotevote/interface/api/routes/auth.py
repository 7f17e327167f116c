"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from quotevote.application.usecase.auth import (
    AuthResponse,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from quotevote.config import Settings
from quotevote.domain.error import DomainError
from quotevote.interface.error import to_http_exception
from quotevote.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an http-only cookie."""
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_hours * 60 * 60,
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account and start a session.

    Args:
        request: Username and password
        response: FastAPI response object (cookie is set on it)
        register_use_case: Register use case from DI
        settings: Application settings from DI

    Returns:
        Session token and user details

    Raises:
        HTTPException: 400 on blank input, 409 if the username is taken

    Example:
        POST /auth/register
        {"username": "alice", "password": "s3cret"}
    """
    try:
        result = await register_use_case.execute(request)
    except DomainError as e:
        logger.info(f"Registration rejected for {request.username!r}: {e}")
        raise to_http_exception(e)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Log in with username and password.

    Args:
        request: Username and password
        response: FastAPI response object (cookie is set on it)
        login_use_case: Login use case from DI
        settings: Application settings from DI

    Returns:
        Session token and user details

    Raises:
        HTTPException: 404 for an unknown user, 401 for a wrong password
    """
    try:
        result = await login_use_case.execute(request)
    except DomainError as e:
        logger.info(f"Login rejected for {request.username!r}: {e}")
        raise to_http_exception(e)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie.

    Args:
        response: FastAPI response object
        settings: Application settings from DI

    Returns:
        Logout success message
    """
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")
