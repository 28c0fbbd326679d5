from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.security_service import SecurityService
from src.domain.base import utc_now
from src.domain.entities import AccountStatus, Session
from tests.fixtures.factories import make_user


@pytest.mark.asyncio
async def test_failed_login_below_threshold_does_not_lock(mock_uow):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user
    mock_uow.failed_login_attempts.count_by_user_since.return_value = 4

    locked = await SecurityService(mock_uow).record_failed_login(user.email)

    assert locked is False
    assert user.account_status == AccountStatus.active
    mock_uow.failed_login_attempts.create.assert_awaited_once()
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_failed_login_counts_within_lockout_window(mock_uow):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    before = utc_now()
    await SecurityService(mock_uow).record_failed_login(user.email)

    user_id, since = mock_uow.failed_login_attempts.count_by_user_since.call_args[0]
    assert user_id == user.id
    assert before - timedelta(minutes=15, seconds=1) < since <= utc_now() - timedelta(minutes=15)


@pytest.mark.asyncio
async def test_failed_login_at_threshold_locks(mock_uow):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user
    mock_uow.failed_login_attempts.count_by_user_since.return_value = 5

    locked = await SecurityService(mock_uow).record_failed_login(
        user.email, "10.0.0.1", "pytest"
    )

    assert locked is True
    assert user.account_status == AccountStatus.locked
    assert user.deactivated_at is not None
    mock_uow.users.update.assert_awaited_once_with(user)
    activity = mock_uow.activities.create.call_args[0][0]
    assert activity.action == "ACCOUNT_LOCKED"
    assert activity.ip_address == "10.0.0.1"


@pytest.mark.asyncio
async def test_already_locked_account_is_not_relocked(mock_uow):
    """Further failures during a lock do not extend it"""
    user = make_user(locked_minutes_ago=5)
    started = user.deactivated_at
    mock_uow.users.get_by_email.return_value = user
    mock_uow.failed_login_attempts.count_by_user_since.return_value = 6

    locked = await SecurityService(mock_uow).record_failed_login(user.email)

    assert locked is False
    assert user.deactivated_at == started
    mock_uow.activities.create.assert_not_called()


@pytest.mark.asyncio
async def test_is_account_locked_within_window(mock_uow):
    user = make_user(locked_minutes_ago=14)
    mock_uow.users.get_by_id.return_value = user

    assert await SecurityService(mock_uow).is_account_locked(user.id) is True
    assert user.account_status == AccountStatus.locked
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_is_account_locked_auto_unlocks(mock_uow):
    user = make_user(locked_minutes_ago=16)
    mock_uow.users.get_by_id.return_value = user

    assert await SecurityService(mock_uow).is_account_locked(user.id) is False
    assert user.account_status == AccountStatus.active
    assert user.deactivated_at is None
    assert user.deactivation_reason is None
    mock_uow.users.update.assert_awaited_once_with(user)


@pytest.mark.asyncio
async def test_is_account_locked_unknown_or_active(mock_uow):
    service = SecurityService(mock_uow)

    mock_uow.users.get_by_id.return_value = None
    assert await service.is_account_locked(uuid4()) is False

    mock_uow.users.get_by_id.return_value = make_user()
    assert await service.is_account_locked(uuid4()) is False


@pytest.mark.asyncio
async def test_create_session_sets_expiry(mock_uow):
    user_id = uuid4()

    session = await SecurityService(mock_uow).create_session(
        user_id, "token-1", "10.0.0.1", "pytest"
    )

    assert session.user_id == user_id
    assert session.token == "token-1"
    remaining = session.expires_at - utc_now()
    assert timedelta(hours=23, minutes=59) < remaining <= timedelta(hours=24)
    mock_uow.sessions.delete_by_token.assert_awaited_once_with("token-1")


@pytest.mark.asyncio
async def test_invalidate_missing_session(mock_uow):
    mock_uow.sessions.delete_by_token.return_value = False

    result = await SecurityService(mock_uow).invalidate_session("nope")

    assert result.is_err()
    assert result.error.code == "SESSION_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_live_session_ignores_expired(mock_uow):
    mock_uow.sessions.get_by_token.return_value = Session(
        user_id=uuid4(), token="old", expires_at=utc_now() - timedelta(seconds=1)
    )

    assert await SecurityService(mock_uow).get_live_session("old") is None


@pytest.mark.asyncio
async def test_cleanup_uses_retention_cutoff(mock_uow):
    mock_uow.sessions.delete_expired.return_value = 1
    mock_uow.failed_login_attempts.delete_older_than.return_value = 2

    counts = await SecurityService(mock_uow).cleanup_expired_records()

    assert counts == {"expired_sessions": 1, "failed_attempts": 2}
    cutoff = mock_uow.failed_login_attempts.delete_older_than.call_args[0][0]
    assert cutoff <= utc_now() - timedelta(hours=24)
    mock_uow.commit.assert_not_called()
