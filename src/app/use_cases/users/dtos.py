"""
User Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class ChangePasswordResponse(BaseModel):
    """Response for change password use case"""

    message: str


class PasswordHistoryEntry(BaseModel):
    """One historical password change; the hash is never exposed"""

    changed_at: str


class PasswordHistoryResponse(BaseModel):
    """Response for password history use case"""

    password_history: List[PasswordHistoryEntry]
    last_password_change: Optional[datetime]


class ProfileResponse(BaseModel):
    """Current account profile"""

    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    role: str
    company_id: str
    company_name: Optional[str]
    account_status: str
    last_login_at: Optional[datetime]


class SessionInfo(BaseModel):
    """Active session, without its token"""

    id: str
    ip_address: Optional[str]
    user_agent: Optional[str]
    created_at: datetime
    expires_at: datetime


class RevokeSessionsResponse(BaseModel):
    """Response for revoke-all-sessions use case"""

    revoked_count: int
