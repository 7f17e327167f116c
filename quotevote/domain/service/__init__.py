"""Domain services."""

from .auth_service import AuthResult, AuthService
from .base import Service
from .jwt_service import JWTService
from .lock import QuoteLockRegistry
from .quote_service import QuoteService
from .vote_service import VoteService

__all__ = [
    "AuthResult",
    "AuthService",
    "JWTService",
    "QuoteLockRegistry",
    "QuoteService",
    "Service",
    "VoteService",
]
