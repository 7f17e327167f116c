"""Caller identity resolution.

The session token travels in the http-only auth cookie, or in an
``Authorization: Bearer`` header for non-browser clients.
"""

from fastapi import HTTPException, Request, status

from quotevote.config import AuthSettings
from quotevote.domain.service import JWTService

_BEARER_PREFIX = "bearer "


def extract_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Pull the session token from the cookie or the Authorization header.

    The cookie wins when both are present.
    """
    token = request.cookies.get(auth_settings.cookie_name)
    if token:
        return token

    header = request.headers.get("authorization", "")
    if header.lower().startswith(_BEARER_PREFIX):
        return header[len(_BEARER_PREFIX) :].strip() or None
    return None


def require_user_id(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> str:
    """Resolve the authenticated caller's user ID.

    Args:
        request: Incoming request
        jwt_service: JWT service for token verification
        auth_settings: Cookie name configuration

    Returns:
        User ID from a valid session token

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(
        extract_token(request, auth_settings)
    )
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
