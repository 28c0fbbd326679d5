import pytest
from httpx import AsyncClient

from tests.fixtures.api_helpers import API, bearer, register


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient):
    tokens = (await register(client)).json()["data"]

    response = await client.get(f"{API}/me", headers=bearer(tokens["access_token"]))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["username"] == "alice"
    assert data["first_name"] == "Alice"
    assert data["role"] == "USER"
    assert data["company_name"] == "Alice's Company"
    assert data["account_status"] == "active"


@pytest.mark.asyncio
async def test_me_requires_token(client: AsyncClient):
    response = await client.get(f"{API}/me")

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_me_rejects_refresh_token(client: AsyncClient):
    tokens = (await register(client)).json()["data"]

    response = await client.get(f"{API}/me", headers=bearer(tokens["refresh_token"]))

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
