"""
FailedLoginAttempt Entity

Append-only record of a failed login.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class FailedLoginAttempt(SQLModel, table=True):
    """
    FailedLoginAttempt entity.

    Business Rules:
    - Recorded even when the email matches no user (user_id is then None)
    - Never updated; purged in bulk once older than the retention window
    """

    __tablename__ = "failed_login_attempts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(max_length=255, index=True)
    user_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_failed_login_user_created", "user_id", "created_at"),
        Index("idx_failed_login_created_at", "created_at"),
    )
