from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GetPasswordHistoryUseCase,
    LoadProfileUseCase,
    PasswordHistoryResponse,
    ProfileResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ApiResponse[ProfileResponse])
async def get_me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User

    Returns the account, role and company behind the access token.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: Account no longer exists
    """
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(data=result.value)


class ChangePasswordRequest(BaseModel):
    """Change password HTTP request payload"""

    current_password: str = Field(..., description="Current password")
    new_password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post(
    "/users/me/change-password",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[ChangePasswordResponse],
)
async def change_password(
    request: ChangePasswordRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Password

    Raises:
        - 400 Bad Request: Current password incorrect, or new password was
          one of the recent passwords
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: Account no longer exists
    """
    use_case = ChangePasswordUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), request.current_password, request.new_password
    )

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_CREDENTIALS", "PASSWORD_REUSED"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(data=result.value)


@router.get(
    "/users/me/password-history",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[PasswordHistoryResponse],
)
async def get_password_history(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Password change timestamps, newest first"""
    use_case = GetPasswordHistoryUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(data=result.value)
