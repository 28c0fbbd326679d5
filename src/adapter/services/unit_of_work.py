from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.activity_repository import ActivityRepository
from src.adapter.repositories.company_repository import CompanyRepository
from src.adapter.repositories.failed_login_attempt_repository import (
    FailedLoginAttemptRepository,
)
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # All repositories share the one request-scoped session
        self.users = UserRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.companies = CompanyRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.failed_login_attempts = FailedLoginAttemptRepository(self.session)
        self.activities = ActivityRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
