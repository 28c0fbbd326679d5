"""
Get Activities Use Case

Retrieves a user's security activity log with offset pagination.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork


class ActivityInfo(BaseModel):
    """Single activity in response"""

    action: str
    metadata: Dict[str, Any]
    ip_address: Optional[str]
    user_agent: Optional[str]
    timestamp: datetime


class ActivitiesResponse(BaseModel):
    """Page of activities"""

    activities: List[ActivityInfo]
    limit: int
    offset: int


class GetActivitiesUseCase:
    """
    Use case for retrieving a user's activities.

    Business Rules:
    - Results are scoped to the requesting user
    - Results ordered by newest first
    - Supports limit/offset pagination
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, limit: int = 50, offset: int = 0
    ) -> Result[ActivitiesResponse]:
        async with self.uow:
            activities = await self.uow.activities.get_by_user_id(user_id, limit, offset)

            return Return.ok(
                ActivitiesResponse(
                    activities=[
                        ActivityInfo(
                            action=activity.action,
                            metadata=activity.activity_metadata or {},
                            ip_address=activity.ip_address,
                            user_agent=activity.user_agent,
                            timestamp=activity.created_at,
                        )
                        for activity in activities
                    ],
                    limit=limit,
                    offset=offset,
                )
            )
