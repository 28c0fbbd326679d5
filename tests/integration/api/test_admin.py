from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.base import utc_now
from src.domain.entities import FailedLoginAttempt, Session, User
from tests.fixtures.api_helpers import ADMIN_HEADERS, API, login, register


async def _set_status(client, user_id, status, reason=None, headers=ADMIN_HEADERS):
    return await client.patch(
        f"{API}/admin/users/{user_id}/status",
        json={"status": status, "reason": reason},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_suspend_and_reactivate(client: AsyncClient):
    """
    Given a registered account with an open session
    When an operator suspends it
    Then its sessions are removed and correct logins get ACCOUNT_INACTIVE
    When the operator reactivates it
    Then the account can log in again
    """
    data = (await register(client)).json()["data"]
    user_id = data["user"]["id"]

    response = await _set_status(client, user_id, "suspended", "Under review")
    assert response.status_code == 200
    body = response.json()["data"]
    assert body["account_status"] == "suspended"
    assert body["deactivation_reason"] == "Under review"
    assert body["sessions_revoked"] == 1

    refresh = await client.post(
        f"{API}/auth/refresh", json={"refresh_token": data["refresh_token"]}
    )
    assert refresh.status_code == 401

    blocked = await login(client)
    assert blocked.status_code == 403
    assert blocked.json()["code"] == "ACCOUNT_INACTIVE"

    wrong = await login(client, password="WrongPass1")
    assert wrong.status_code == 401
    assert wrong.json()["code"] == "INVALID_CREDENTIALS"

    response = await _set_status(client, user_id, "active")
    assert response.status_code == 200
    assert response.json()["data"]["deactivation_reason"] is None

    assert (await login(client)).status_code == 200


@pytest.mark.asyncio
async def test_deactivate(client: AsyncClient, db_session):
    data = (await register(client)).json()["data"]

    response = await _set_status(client, data["user"]["id"], "deactivated", "Left company")

    assert response.status_code == 200
    assert response.json()["data"]["deactivated_at"] is not None
    user = (await db_session.exec(select(User))).one()
    assert user.deactivation_reason == "Left company"


@pytest.mark.asyncio
async def test_status_requires_admin_key(client: AsyncClient):
    data = (await register(client)).json()["data"]

    missing = await _set_status(client, data["user"]["id"], "suspended", headers={})
    assert missing.status_code == 401

    wrong = await _set_status(
        client, data["user"]["id"], "suspended", headers={"X-Admin-API-Key": "nope"}
    )
    assert wrong.status_code == 401
    assert wrong.json()["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_status_unknown_user(client: AsyncClient):
    response = await _set_status(client, uuid4(), "suspended")

    assert response.status_code == 404
    assert response.json()["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_status_locked_not_assignable(client: AsyncClient):
    data = (await register(client)).json()["data"]

    response = await _set_status(client, data["user"]["id"], "locked")

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_cleanup_security_records(client: AsyncClient, db_session):
    """
    Given an expired session and a failed attempt older than the retention window
    When the cleanup runs
    Then both are deleted and live records are kept
    """
    data = (await register(client)).json()["data"]
    user = (await db_session.exec(select(User))).one()
    db_session.add(
        Session(
            user_id=user.id,
            token="expired-token",
            expires_at=utc_now() - timedelta(minutes=1),
        )
    )
    db_session.add(
        FailedLoginAttempt(
            email=user.email,
            user_id=user.id,
            created_at=utc_now() - timedelta(hours=25),
        )
    )
    await db_session.commit()
    await login(client, password="WrongPass1")

    response = await client.post(f"{API}/admin/security/cleanup", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json()["data"] == {"expired_sessions": 1, "failed_attempts": 1}

    sessions = (await db_session.exec(select(Session))).all()
    assert [s.token for s in sessions] == [data["refresh_token"]]
    attempts = (await db_session.exec(select(FailedLoginAttempt))).all()
    assert len(attempts) == 1


@pytest.mark.asyncio
async def test_cleanup_requires_admin_key(client: AsyncClient):
    response = await client.post(f"{API}/admin/security/cleanup")

    assert response.status_code == 401
