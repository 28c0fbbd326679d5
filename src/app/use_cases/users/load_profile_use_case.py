"""
Load Profile Use Case

Loads the current account, its role and company from JWT claims.
"""

from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ProfileResponse


class LoadProfileUseCase:
    """
    Use case for loading the current user's profile.

    Business Rules:
    - JWT payload provides user_id
    - User must exist
    - Role and company are resolved for display; a missing role shows as
      DEFAULT_ROLE_NAME
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            role = await self.uow.roles.get_by_id(user.role_id)
            company = await self.uow.companies.get_by_id(user.company_id)

            return Return.ok(
                ProfileResponse(
                    id=str(user.id),
                    email=user.email,
                    username=user.username,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    role=role.name if role else ApplicationConfig.DEFAULT_ROLE_NAME,
                    company_id=str(user.company_id),
                    company_name=company.name if company else None,
                    account_status=user.account_status.value,
                    last_login_at=user.last_login_at,
                )
            )
