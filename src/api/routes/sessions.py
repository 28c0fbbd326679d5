from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    ListSessionsUseCase,
    RevokeSessionsResponse,
    RevokeSessionsUseCase,
    SessionInfo,
)
from src.depends import get_client_info, get_current_user, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[SessionInfo]],
)
async def list_sessions(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Active Sessions

    Returns the caller's unexpired sessions, newest first. Tokens are not exposed.
    """
    use_case = ListSessionsUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value)


@router.post(
    "/revoke-all",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[RevokeSessionsResponse],
)
async def revoke_all_sessions(
    http_request: Request,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke All Sessions

    Deletes every session of the caller (sign out everywhere). Useful for:
    - Security incidents (account compromise)
    - Lost devices

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: Account no longer exists
    """
    use_case = RevokeSessionsUseCase(uow)
    result = await use_case.revoke_all(
        UUID(current_user["user_id"]), **get_client_info(http_request)
    )

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(data=result.value)
