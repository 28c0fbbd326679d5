"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .dtos import (
    AuthResponse,
    LoginCommand,
    RefreshTokenCommand,
    RegisterCommand,
    UserSummary,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "LoginCommand",
    "RefreshTokenCommand",
    # DTOs - Responses
    "AuthResponse",
    "UserSummary",
]
