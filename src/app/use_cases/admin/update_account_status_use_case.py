"""
Use Case: Update Account Status

Administrative status change for an account (active / suspended / deactivated).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AccountStatus, ActivityAction

ASSIGNABLE_STATUSES = (
    AccountStatus.active,
    AccountStatus.suspended,
    AccountStatus.deactivated,
)


class AccountStatusResponse(BaseModel):
    """Response DTO for UpdateAccountStatusUseCase"""

    id: str
    email: str
    username: str
    account_status: str
    deactivated_at: Optional[datetime]
    deactivation_reason: Optional[str]
    sessions_revoked: int


class UpdateAccountStatusUseCase:
    """
    Change an account's status.

    Business Logic:
    1. Validate status (locked is only set by the failed-login tracker)
    2. Validate user exists
    3. deactivated stamps deactivated_at + reason, active clears both,
       suspended keeps the reason only
    4. Suspending or deactivating deletes all sessions
    5. Record ACCOUNT_STATUS_CHANGED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, status: str, reason: Optional[str] = None
    ) -> Result[AccountStatusResponse]:
        """
        Execute update account status use case.

        Args:
            user_id: UUID of the account
            status: "active", "suspended" or "deactivated"
            reason: Optional reason stored with suspended/deactivated

        Returns:
            Result[AccountStatusResponse], or Error(INVALID_STATUS | USER_NOT_FOUND)
        """
        valid = [s.value for s in ASSIGNABLE_STATUSES]
        if status not in valid:
            return Return.err(
                Error("INVALID_STATUS", f"Status must be one of: {', '.join(valid)}")
            )
        new_status = AccountStatus(status)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            previous_status = user.account_status
            user.account_status = new_status
            if new_status == AccountStatus.deactivated:
                user.deactivated_at = utc_now()
                user.deactivation_reason = reason
            elif new_status == AccountStatus.suspended:
                user.deactivated_at = None
                user.deactivation_reason = reason
            else:
                user.deactivated_at = None
                user.deactivation_reason = None
            await self.uow.users.update(user)

            security = SecurityService(self.uow)
            sessions_revoked = 0
            if new_status != AccountStatus.active:
                sessions_revoked = await security.invalidate_all_sessions(user.id)

            await security.track_activity(
                user.id,
                ActivityAction.account_status_changed,
                {
                    "from": previous_status.value,
                    "to": new_status.value,
                    "reason": reason,
                },
            )

            await self.uow.commit()

            return Return.ok(
                AccountStatusResponse(
                    id=str(user.id),
                    email=user.email,
                    username=user.username,
                    account_status=user.account_status.value,
                    deactivated_at=user.deactivated_at,
                    deactivation_reason=user.deactivation_reason,
                    sessions_revoked=sessions_revoked,
                )
            )
