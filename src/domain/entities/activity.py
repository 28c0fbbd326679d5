"""
Activity Entity

Immutable log of security-relevant user actions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utc_now


class Activity(SQLModel, table=True):
    """
    Activity entity - append-only audit trail.

    Business Rules:
    - Immutable (never updated or deleted)
    - action is one of ActivityAction
    - activity_metadata stores additional context (username, counts, ...)
    """

    __tablename__ = "user_activities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False)
    action: str = Field(max_length=100)
    activity_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_activity_user_created", "user_id", "created_at"),
        Index("idx_activity_action", "action"),
    )
