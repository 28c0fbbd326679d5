from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.failed_login_attempt_repository import (
    IFailedLoginAttemptRepository,
)
from src.domain.entities import FailedLoginAttempt


class FailedLoginAttemptRepository(IFailedLoginAttemptRepository):
    """FailedLoginAttempt repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, attempt: FailedLoginAttempt) -> FailedLoginAttempt:
        """Record a failed login attempt"""
        self.session.add(attempt)
        await self.session.flush()
        await self.session.refresh(attempt)
        return attempt

    async def count_by_user_since(self, user_id: UUID, since: datetime) -> int:
        """Count attempts for a user inside the trailing window"""
        stmt = (
            select(func.count())
            .select_from(FailedLoginAttempt)
            .where(
                FailedLoginAttempt.user_id == user_id,
                FailedLoginAttempt.created_at >= since,
            )
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def delete_older_than(self, cutoff: datetime) -> int:
        """Bulk-delete attempts created before cutoff"""
        stmt = delete(FailedLoginAttempt).where(FailedLoginAttempt.created_at < cutoff)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
