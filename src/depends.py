from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import ACCESS_TOKEN_TYPE, verify_jwt

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify the access token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id, role_id

    Raises:
        ClientError: 401 if token is missing, invalid, expired or not an access token
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Authentication required"), status_code=401
        )

    payload = verify_jwt(credentials.credentials, ACCESS_TOKEN_TYPE)

    if payload is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"), status_code=401
        )

    return payload


def get_client_info(request: Request) -> dict:
    """Client IP and user agent of the current request"""
    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }
