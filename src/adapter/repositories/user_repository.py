from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """Account storage backed by the users table"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        result = await self.session.exec(select(User).where(*criteria))
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._find_one(User.email == email)

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._find_one(User.username == username)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return await self._find_one(User.id == user_id)

    async def create(self, user: User) -> User:
        """
        Insert an account.

        The flush surfaces unique-constraint violations (email, username)
        as IntegrityError inside the caller's transaction.
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Flush status, lockout, credential or login-time changes"""
        self.session.add(user)
        await self.session.flush()
        return user
