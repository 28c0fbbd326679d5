from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PasswordHistoryEntry, PasswordHistoryResponse


class GetPasswordHistoryUseCase:
    """Lists when the password was changed, newest first. Hashes stay private."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[PasswordHistoryResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            entries = [
                PasswordHistoryEntry(changed_at=entry["changed_at"])
                for entry in (user.password_history or [])
                if "changed_at" in entry
            ]

            return Return.ok(
                PasswordHistoryResponse(
                    password_history=entries,
                    last_password_change=user.last_password_change,
                )
            )
