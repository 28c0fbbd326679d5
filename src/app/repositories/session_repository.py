from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Session]:
        """Get session by its refresh token value"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID, now: datetime) -> List[Session]:
        """Get unexpired sessions for a user, newest first"""
        pass

    @abstractmethod
    async def delete_by_token(self, token: str) -> bool:
        """Delete the session holding token. Returns True if a row was deleted."""
        pass

    @abstractmethod
    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions for a user. Returns count of deleted sessions."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete sessions whose expiry is before now. Returns count."""
        pass
