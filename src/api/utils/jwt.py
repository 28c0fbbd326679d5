import secrets
from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def generate_access_token(user_id: UUID, role_id: UUID) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        role_id: Role UUID

    Returns:
        JWT token string signed with JWT_SECRET (short expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "role_id": str(role_id),
        "type": ACCESS_TOKEN_TYPE,
        "exp": now + timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES),
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def generate_refresh_token(user_id: UUID) -> str:
    """
    Generate JWT refresh token

    The random jti keeps two tokens issued in the same second distinct,
    which the unique session token column depends on.

    Args:
        user_id: User UUID

    Returns:
        JWT token string signed with JWT_REFRESH_SECRET (long expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "type": REFRESH_TOKEN_TYPE,
        "jti": secrets.token_urlsafe(16),
        "exp": now + timedelta(days=ApplicationConfig.JWT_REFRESH_EXPIRES_DAYS),
        "iat": now,
    }
    return jwt.encode(
        payload,
        ApplicationConfig.JWT_REFRESH_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )


def issue_tokens(user_id: UUID, role_id: UUID) -> tuple[str, str]:
    """Mint an (access_token, refresh_token) pair"""
    return generate_access_token(user_id, role_id), generate_refresh_token(user_id)


def verify_jwt(token: str, token_type: str = ACCESS_TOKEN_TYPE) -> Optional[dict]:
    """
    Verify and decode JWT token

    The secret is chosen by token_type, so an access token never verifies
    as a refresh token and vice versa.

    Args:
        token: JWT token string
        token_type: "access" or "refresh"

    Returns:
        Decoded payload dict or None if signature, expiry or payload is invalid
    """
    secret = (
        ApplicationConfig.JWT_REFRESH_SECRET
        if token_type == REFRESH_TOKEN_TYPE
        else ApplicationConfig.JWT_SECRET
    )
    try:
        payload = jwt.decode(token, secret, algorithms=[ApplicationConfig.JWT_ALGORITHM])
    except JWTError:
        return None

    if payload.get("type") != token_type:
        return None
    try:
        UUID(str(payload.get("user_id")))
    except ValueError:
        return None
    return payload
