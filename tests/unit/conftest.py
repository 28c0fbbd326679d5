import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.roles = MagicMock()
    uow.roles.get_by_id = AsyncMock(return_value=None)
    uow.roles.get_by_name = AsyncMock(return_value=None)

    uow.companies = MagicMock()
    uow.companies.create = AsyncMock(side_effect=lambda company: company)
    uow.companies.get_by_id = AsyncMock(return_value=None)

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.get_by_token = AsyncMock(return_value=None)
    uow.sessions.get_active_by_user_id = AsyncMock(return_value=[])
    uow.sessions.delete_by_token = AsyncMock(return_value=False)
    uow.sessions.delete_all_by_user_id = AsyncMock(return_value=0)
    uow.sessions.delete_expired = AsyncMock(return_value=0)

    uow.failed_login_attempts = MagicMock()
    uow.failed_login_attempts.create = AsyncMock(side_effect=lambda attempt: attempt)
    uow.failed_login_attempts.count_by_user_since = AsyncMock(return_value=0)
    uow.failed_login_attempts.delete_older_than = AsyncMock(return_value=0)

    uow.activities = MagicMock()
    uow.activities.create = AsyncMock(side_effect=lambda activity: activity)
    uow.activities.get_by_user_id = AsyncMock(return_value=[])

    return uow
