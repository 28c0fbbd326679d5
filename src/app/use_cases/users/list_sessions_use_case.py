from typing import List
from uuid import UUID

from libs.result import Result, Return
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork
from .dtos import SessionInfo


class ListSessionsUseCase:
    """Active (unexpired) sessions of a user, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[SessionInfo]]:
        async with self.uow:
            sessions = await SecurityService(self.uow).list_sessions(user_id)
            return Return.ok(
                [
                    SessionInfo(
                        id=str(session.id),
                        ip_address=session.ip_address,
                        user_agent=session.user_agent,
                        created_at=session.created_at,
                        expires_at=session.expires_at,
                    )
                    for session in sessions
                ]
            )
