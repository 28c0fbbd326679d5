"""
Admin API Routes - System Administration Endpoints

These endpoints are for operators and internal schedulers.
Authentication is via Admin API Key, not user JWTs.
"""

from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    AccountStatusResponse,
    CleanupSecurityRecordsResponse,
    CleanupSecurityRecordsUseCase,
    UpdateAccountStatusUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class UpdateAccountStatusRequest(BaseModel):
    """Account status change payload"""

    status: Literal["active", "suspended", "deactivated"]
    reason: Optional[str] = Field(None, max_length=255)


@router.patch(
    "/users/{user_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[AccountStatusResponse],
    dependencies=[Depends(verify_admin_api_key)],
)
async def update_account_status(
    user_id: UUID,
    request: UpdateAccountStatusRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Account Status

    Suspending or deactivating an account also deletes all of its sessions.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_STATUS
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: USER_NOT_FOUND
    """
    use_case = UpdateAccountStatusUseCase(uow)
    result = await use_case.execute(user_id, request.status, request.reason)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVALID_STATUS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return ApiResponse(data=result.value)


@router.post(
    "/security/cleanup",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[CleanupSecurityRecordsResponse],
    dependencies=[Depends(verify_admin_api_key)],
)
async def cleanup_security_records(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Cleanup Security Records

    Deletes expired sessions and failed login attempts older than the
    retention window. Meant to be called periodically by a scheduler.

    Requires: X-Admin-API-Key header
    """
    use_case = CleanupSecurityRecordsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value)
