from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from src.app.use_cases.auth import LogoutUseCase


@pytest.mark.asyncio
async def test_logout_deletes_session(mock_uow):
    mock_uow.sessions.delete_by_token.return_value = True

    result = await LogoutUseCase(mock_uow).execute("refresh-token")

    assert result.is_ok()
    mock_uow.sessions.delete_by_token.assert_awaited_once_with("refresh-token")
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_logout_unknown_token_is_success(mock_uow):
    mock_uow.sessions.delete_by_token.return_value = False

    result = await LogoutUseCase(mock_uow).execute("already-gone")

    assert result.is_ok()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_logout_store_failure_is_success(mock_uow):
    """A database error while deleting the session is logged, not raised"""
    mock_uow.sessions.delete_by_token = AsyncMock(
        side_effect=OperationalError("DELETE", {}, Exception("db down"))
    )

    result = await LogoutUseCase(mock_uow).execute("some-token")

    assert result.is_ok()
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_logout_commit_failure_is_success(mock_uow):
    mock_uow.sessions.delete_by_token.return_value = True
    mock_uow.commit = AsyncMock(
        side_effect=OperationalError("COMMIT", {}, Exception("db down"))
    )

    result = await LogoutUseCase(mock_uow).execute("some-token")

    assert result.is_ok()
    mock_uow.rollback.assert_awaited_once()
