"""
Logout Use Case
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Result, Return
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Invalidate the session behind a refresh token.

    Idempotent: a token with no matching session, or a store failure while
    deleting it, is logged and reported as success.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[None]:
        async with self.uow:
            try:
                result = await SecurityService(self.uow).invalidate_session(refresh_token)
                if result.is_err():
                    logger.warning(
                        f"Logout: {result.error.code}, refresh token might not exist"
                    )
                    return Return.ok(None)

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.warning(
                    f"Logout: session could not be invalidated ({exc.__class__.__name__})"
                )

            return Return.ok(None)
