"""
Company Entity

Tenant boundary: every user belongs to exactly one company.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Company(SQLModel, table=True):
    """
    Company entity - isolated workspace for an organization.

    Business Rules:
    - identifier is unique (registration uses the upper-cased username)
    - Registration creates a single-member default company
    """

    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    identifier: str = Field(unique=True, index=True, max_length=100)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
