from abc import ABC, abstractmethod

from src.app.repositories.activity_repository import IActivityRepository
from src.app.repositories.company_repository import ICompanyRepository
from src.app.repositories.failed_login_attempt_repository import (
    IFailedLoginAttemptRepository,
)
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    roles: IRoleRepository
    companies: ICompanyRepository
    sessions: ISessionRepository
    failed_login_attempts: IFailedLoginAttemptRepository
    activities: IActivityRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
