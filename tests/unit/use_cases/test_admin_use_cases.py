from uuid import uuid4

import pytest

from src.app.use_cases.admin import (
    CleanupSecurityRecordsUseCase,
    UpdateAccountStatusUseCase,
)
from src.domain.entities import AccountStatus
from tests.fixtures.factories import make_user


@pytest.mark.asyncio
async def test_suspend_revokes_sessions(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.sessions.delete_all_by_user_id.return_value = 2

    result = await UpdateAccountStatusUseCase(mock_uow).execute(
        user.id, "suspended", "Policy violation"
    )

    assert result.is_ok()
    assert result.value.account_status == "suspended"
    assert result.value.sessions_revoked == 2
    assert user.deactivation_reason == "Policy violation"
    activity = mock_uow.activities.create.call_args[0][0]
    assert activity.action == "ACCOUNT_STATUS_CHANGED"
    assert activity.activity_metadata["from"] == "active"
    assert activity.activity_metadata["to"] == "suspended"


@pytest.mark.asyncio
async def test_deactivate_stamps_time(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    result = await UpdateAccountStatusUseCase(mock_uow).execute(user.id, "deactivated")

    assert result.is_ok()
    assert user.deactivated_at is not None
    mock_uow.sessions.delete_all_by_user_id.assert_awaited_once_with(user.id)


@pytest.mark.asyncio
async def test_reactivate_clears_lock_fields(mock_uow):
    user = make_user(locked_minutes_ago=1)
    mock_uow.users.get_by_id.return_value = user

    result = await UpdateAccountStatusUseCase(mock_uow).execute(user.id, "active")

    assert result.is_ok()
    assert user.account_status == AccountStatus.active
    assert user.deactivated_at is None
    assert user.deactivation_reason is None
    mock_uow.sessions.delete_all_by_user_id.assert_not_called()


@pytest.mark.asyncio
async def test_locked_is_not_assignable(mock_uow):
    result = await UpdateAccountStatusUseCase(mock_uow).execute(uuid4(), "locked")

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_status_for_unknown_user(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await UpdateAccountStatusUseCase(mock_uow).execute(uuid4(), "suspended")

    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_cleanup_reports_counts(mock_uow):
    mock_uow.sessions.delete_expired.return_value = 4
    mock_uow.failed_login_attempts.delete_older_than.return_value = 7

    result = await CleanupSecurityRecordsUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.expired_sessions == 4
    assert result.value.failed_attempts == 7
    mock_uow.commit.assert_awaited_once()
