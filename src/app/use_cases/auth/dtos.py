"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    username: str
    password: str
    first_name: str
    last_name: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class LoginCommand(BaseModel):
    """Login command"""

    email: str
    password: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class RefreshTokenCommand(BaseModel):
    """Refresh command"""

    refresh_token: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserSummary(BaseModel):
    """Account summary in authentication responses"""

    id: str
    email: str
    username: str
    role: str
    company_id: str


class AuthResponse(BaseModel):
    """Token pair plus account summary (register, login, refresh)"""

    access_token: str
    refresh_token: str
    user: UserSummary
