"""
Refresh Token Use Case

Handles JWT token refresh with single-use refresh token rotation.
"""

from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.api.utils.jwt import REFRESH_TOKEN_TYPE, issue_tokens, verify_jwt
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityAction
from .dtos import AuthResponse, RefreshTokenCommand, UserSummary

INVALID_TOKEN = Error("INVALID_TOKEN", "Invalid refresh token")


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Token must verify against the refresh secret and carry type=refresh
    - A live session must hold the token; rotation deletes it, so each
      refresh token works once
    - Of concurrent refreshes with one token, only the one whose delete
      removed the session row proceeds
    - Bad signature, expiry, unknown user, used or missing session all
      fail with the same INVALID_TOKEN
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RefreshTokenCommand) -> Result[AuthResponse]:
        """
        Execute refresh token use case.

        Args:
            command: RefreshTokenCommand with the token to rotate

        Returns:
            Result with AuthResponse containing new tokens, or Error(INVALID_TOKEN)
        """
        payload = verify_jwt(command.refresh_token, REFRESH_TOKEN_TYPE)
        if payload is None:
            return Return.err(INVALID_TOKEN)

        async with self.uow:
            security = SecurityService(self.uow)

            user = await self.uow.users.get_by_id(UUID(payload["user_id"]))
            if user is None:
                return Return.err(INVALID_TOKEN)

            session = await security.get_live_session(command.refresh_token)
            if session is None or session.user_id != user.id:
                return Return.err(INVALID_TOKEN)

            # The delete is the claim on the token: a concurrent refresh that
            # already removed the row leaves nothing to delete here
            claimed = await security.invalidate_session(command.refresh_token)
            if claimed.is_err():
                return Return.err(INVALID_TOKEN)

            role = await self.uow.roles.get_by_id(user.role_id)

            access_token, refresh_token = issue_tokens(user.id, user.role_id)
            await security.create_session(
                user.id, refresh_token, command.ip_address, command.user_agent
            )
            await security.track_activity(
                user.id,
                ActivityAction.token_refreshed,
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
