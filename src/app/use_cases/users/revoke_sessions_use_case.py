"""
Revoke Sessions Use Case

Signs a user out everywhere, e.g. on suspected compromise.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityAction
from .dtos import RevokeSessionsResponse


class RevokeSessionsUseCase:
    """
    Use case for revoking all sessions of a user.

    Business Rules:
    - Every session row of the user is deleted; their refresh tokens stop working
    - Access tokens already issued stay valid until they expire
    - Revocation is recorded as SESSIONS_REVOKED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def revoke_all(
        self,
        user_id: UUID,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[RevokeSessionsResponse]:
        """
        Revoke all sessions for a user.

        Returns:
            Result with count of revoked sessions, or Error(USER_NOT_FOUND)
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            security = SecurityService(self.uow)
            count = await security.invalidate_all_sessions(user_id)

            await security.track_activity(
                user_id,
                ActivityAction.sessions_revoked,
                {"revoked_count": count},
                ip_address,
                user_agent,
            )

            await self.uow.commit()

            return Return.ok(RevokeSessionsResponse(revoked_count=count))
