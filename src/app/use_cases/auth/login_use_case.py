"""
Login Use Case

Handles credential verification with failed-attempt lockout and returns JWT tokens.
"""

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.api.utils.jwt import issue_tokens
from src.app.services.password_hasher import burn_password_check, verify_password
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AccountStatus, ActivityAction
from .dtos import AuthResponse, LoginCommand, UserSummary

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password fail identically (no user enumeration)
    - Every failure is recorded; repeated failures lock the account
    - A locked account is rejected before the password is checked
    - Suspended/deactivated accounts are rejected after the password check
    - Creates new session with refresh token
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: LoginCommand) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with email, password and client info

        Returns:
            Result with AuthResponse, or Error(INVALID_CREDENTIALS |
            ACCOUNT_LOCKED | ACCOUNT_INACTIVE)
        """
        async with self.uow:
            security = SecurityService(self.uow)

            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                # Keep timing close to the wrong-password path
                burn_password_check(command.password)
                await security.record_failed_login(
                    command.email, command.ip_address, command.user_agent
                )
                await self.uow.commit()
                return Return.err(INVALID_CREDENTIALS)

            if await security.is_account_locked(user.id):
                return Return.err(
                    Error(
                        "ACCOUNT_LOCKED",
                        "Account is locked due to too many failed attempts. "
                        "Please try again later.",
                    )
                )

            if not verify_password(command.password, user.password_hash):
                await security.record_failed_login(
                    command.email, command.ip_address, command.user_agent
                )
                await self.uow.commit()
                return Return.err(INVALID_CREDENTIALS)

            if user.account_status in (AccountStatus.suspended, AccountStatus.deactivated):
                return Return.err(
                    Error("ACCOUNT_INACTIVE", f"User account is {user.account_status.value}")
                )

            role = await self.uow.roles.get_by_id(user.role_id)

            user.last_login_at = utc_now()
            await self.uow.users.update(user)

            access_token, refresh_token = issue_tokens(user.id, user.role_id)
            await security.create_session(
                user.id, refresh_token, command.ip_address, command.user_agent
            )
            await security.track_activity(
                user.id,
                ActivityAction.user_logged_in,
                {"username": user.username},
                command.ip_address,
                command.user_agent,
            )

            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    access_token=access_token,
                    refresh_token=refresh_token,
                    user=UserSummary(
                        id=str(user.id),
                        email=user.email,
                        username=user.username,
                        role=role.name if role else ApplicationConfig.DEFAULT_ROLE_NAME,
                        company_id=str(user.company_id),
                    ),
                )
            )
