"""
User Management Use Cases

All user-related business logic.
"""

from .change_password_use_case import ChangePasswordUseCase
from .get_password_history_use_case import GetPasswordHistoryUseCase
from .load_profile_use_case import LoadProfileUseCase
from .list_sessions_use_case import ListSessionsUseCase
from .revoke_sessions_use_case import RevokeSessionsUseCase
from .dtos import (
    ChangePasswordResponse,
    PasswordHistoryResponse,
    ProfileResponse,
    RevokeSessionsResponse,
    SessionInfo,
)

__all__ = [
    "ChangePasswordUseCase",
    "GetPasswordHistoryUseCase",
    "LoadProfileUseCase",
    "ListSessionsUseCase",
    "RevokeSessionsUseCase",
    "ChangePasswordResponse",
    "PasswordHistoryResponse",
    "ProfileResponse",
    "RevokeSessionsResponse",
    "SessionInfo",
]
