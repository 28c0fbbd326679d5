from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from src.domain.entities import FailedLoginAttempt


class IFailedLoginAttemptRepository(ABC):
    """FailedLoginAttempt repository interface - application layer"""

    @abstractmethod
    async def create(self, attempt: FailedLoginAttempt) -> FailedLoginAttempt:
        """Record a failed login attempt (append-only)"""
        pass

    @abstractmethod
    async def count_by_user_since(self, user_id: UUID, since: datetime) -> int:
        """Count attempts for a user created at or after since"""
        pass

    @abstractmethod
    async def delete_older_than(self, cutoff: datetime) -> int:
        """Bulk-delete attempts created before cutoff. Returns count."""
        pass
