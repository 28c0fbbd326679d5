from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import Activity


class IActivityRepository(ABC):
    """Activity repository interface - application layer"""

    @abstractmethod
    async def create(self, activity: Activity) -> Activity:
        """Append a new activity (immutable)"""
        pass

    @abstractmethod
    async def get_by_user_id(
        self, user_id: UUID, limit: int = 50, offset: int = 0
    ) -> List[Activity]:
        """Get activities for a user ordered by created_at DESC"""
        pass
