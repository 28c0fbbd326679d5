from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """
    Account repository interface - application layer.

    Email and username are matched exactly as stored; both are unique.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Account registered with email, if any"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Account holding username, if any"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert an account; raises IntegrityError on a uniqueness conflict"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist changes to an existing account"""
        pass
