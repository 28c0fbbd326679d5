"""
Change Password Use Case

Verifies the current password and enforces password-history reuse rules.
"""

from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.password_hasher import hash_password, verify_password
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import ActivityAction
from .dtos import ChangePasswordResponse


class ChangePasswordUseCase:
    """
    Use case for changing a user's password.

    Business Rules:
    - Current password must match the stored hash
    - New password must not match any entry in the password history, whose
      first entry is the current password (bcrypt hashes are salted, so each
      entry is checked with checkpw; no set lookup)
    - New hash is prepended to the history, which keeps the newest
      PASSWORD_HISTORY_SIZE entries
    - last_password_change is updated and PASSWORD_CHANGED is recorded
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[ChangePasswordResponse]:
        """
        Execute change password use case.

        Args:
            user_id: User UUID from JWT
            current_password: Password the user currently logs in with
            new_password: Requested new password

        Returns:
            Result with ChangePasswordResponse, or Error(USER_NOT_FOUND |
            INVALID_CREDENTIALS | PASSWORD_REUSED)
        """
        history_size = ApplicationConfig.PASSWORD_HISTORY_SIZE

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not verify_password(current_password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Current password is incorrect")
                )

            history = list(user.password_history or [])
            # history[0] is the current hash; accounts without history only have that
            previous_hashes = [entry["hash"] for entry in history] or [user.password_hash]
            for previous_hash in previous_hashes:
                if verify_password(new_password, previous_hash):
                    return Return.err(
                        Error(
                            "PASSWORD_REUSED",
                            f"New password cannot be the same as any of your "
                            f"last {history_size} passwords",
                        )
                    )

            new_hash = hash_password(new_password)
            now = utc_now()

            # Assign a new list so the JSON column is flagged dirty
            user.password_history = [
                {"hash": new_hash, "changed_at": now.isoformat()}
            ] + history[: history_size - 1]
            user.password_hash = new_hash
            user.last_password_change = now
            await self.uow.users.update(user)

            await SecurityService(self.uow).track_activity(
                user.id, ActivityAction.password_changed
            )

            await self.uow.commit()

            return Return.ok(
                ChangePasswordResponse(message="Password updated successfully")
            )
