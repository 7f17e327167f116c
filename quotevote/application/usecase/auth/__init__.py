"""Authentication use cases."""

from .login import AuthResponse, LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
