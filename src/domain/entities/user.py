"""
User Entity

Registered identity with credentials, status and lockout fields.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utc_now
from .enums import AccountStatus


class User(SQLModel, table=True):
    """
    User entity - an account belonging to one company with one role.

    Business Rules:
    - Email and username are unique across all users
    - Password stored as bcrypt hash
    - account_status=locked always carries deactivated_at (lock start time)
    - password_history holds {"hash", "changed_at"} entries, newest first,
      capped at PASSWORD_HISTORY_SIZE
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    username: str = Field(unique=True, index=True, max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)

    role_id: UUID = Field(foreign_key="roles.id", nullable=False)
    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)

    account_status: AccountStatus = Field(default=AccountStatus.active)
    deactivated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    deactivation_reason: Optional[str] = Field(default=None, max_length=255)

    password_history: List[dict] = Field(default_factory=list, sa_column=Column(JSON))
    last_password_change: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_account_status", "account_status"),)
