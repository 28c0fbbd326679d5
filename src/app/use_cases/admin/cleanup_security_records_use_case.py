"""
Use Case: Cleanup Security Records

Sweeps expired sessions and stale failed-login attempts. Triggered by an
external scheduler through the admin API.
"""

import logging

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CleanupSecurityRecordsResponse(BaseModel):
    """Response DTO for CleanupSecurityRecordsUseCase"""

    expired_sessions: int
    failed_attempts: int


class CleanupSecurityRecordsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[CleanupSecurityRecordsResponse]:
        async with self.uow:
            counts = await SecurityService(self.uow).cleanup_expired_records()
            await self.uow.commit()

        logger.info(
            f"Security cleanup removed {counts['expired_sessions']} expired sessions "
            f"and {counts['failed_attempts']} failed login attempts"
        )
        return Return.ok(CleanupSecurityRecordsResponse(**counts))
