"""
Operator authentication for the /admin routes.

Account status changes and the security-record sweep are not reachable with
user JWTs; callers present the shared X-Admin-API-Key instead.
"""

import secrets
from typing import Optional

from fastapi import Header, status

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError


def _unauthorized(code: str, message: str) -> ClientError:
    return ClientError(Error(code, message), status_code=status.HTTP_401_UNAUTHORIZED)


async def verify_admin_api_key(
    x_admin_api_key: Optional[str] = Header(None, alias="X-Admin-API-Key"),
) -> bool:
    """
    Check the X-Admin-API-Key header against ADMIN_API_KEY.

    Raises:
        ClientError: 401 UNAUTHORIZED if the header is absent,
            401 INVALID_API_KEY if it does not match
    """
    if not x_admin_api_key:
        raise _unauthorized("UNAUTHORIZED", "Admin API key required")

    # Constant-time comparison
    if not secrets.compare_digest(
        x_admin_api_key.encode("utf-8"), ApplicationConfig.ADMIN_API_KEY.encode("utf-8")
    ):
        raise _unauthorized("INVALID_API_KEY", "Invalid admin API key")

    return True
