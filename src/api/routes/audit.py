"""
Audit API Routes

Handles activity log retrieval endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ServerError
from src.api.schemas import ApiResponse
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import ActivitiesResponse, GetActivitiesUseCase
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/activities", tags=["Audit"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[ActivitiesResponse],
)
async def get_activities(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of activities to return"),
    offset: int = Query(0, ge=0, description="Number of activities to skip"),
):
    """
    Get Activities

    Returns the caller's security activity log, newest first.

    Query Parameters:
        - limit: Maximum number of activities to return (1-100, default 50)
        - offset: Number of activities to skip

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    use_case = GetActivitiesUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), limit, offset)

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value)
