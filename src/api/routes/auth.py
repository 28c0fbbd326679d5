from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse, MessageData
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    LoginCommand,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenCommand,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from src.depends import get_client_info, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class ClientInfoMixin(BaseModel):
    """Optional client details; defaults to what the connection reports"""

    ip_address: Optional[str] = Field(None, max_length=64)
    user_agent: Optional[str] = Field(None, max_length=512)

    def client_info(self, request: Request) -> dict:
        info = get_client_info(request)
        return {
            "ip_address": self.ip_address or info["ip_address"],
            "user_agent": self.user_agent or info["user_agent"],
        }


class RegisterRequest(ClientInfoMixin):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    username: str = Field(..., min_length=3, max_length=100, description="Unique username")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[AuthResponse],
)
async def register(
    request: RegisterRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Registration

    Creates the account, a default single-member company and a session.
    Returns JWT access token and refresh token.

    Raises:
        - 409 Conflict: Email or username already exists
        - 422 Unprocessable Entity: Invalid input
        - 500 Internal Server Error: Default role missing or server error
    """
    command = RegisterCommand(
        email=request.email,
        username=request.username,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        **request.client_info(http_request),
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in (
            "EMAIL_ALREADY_EXISTS",
            "USERNAME_ALREADY_EXISTS",
            "USER_ALREADY_EXISTS",
        ):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        if error.code == "SESSION_CREATE_FAILED":
            raise ServerError(
                error,
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                expose_message=True,
            )
        raise ServerError(error)

    return ApiResponse(data=result.value)


class LoginRequest(ClientInfoMixin):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post(
    "/login", status_code=status.HTTP_200_OK, response_model=ApiResponse[AuthResponse]
)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Login

    Authenticates user and returns JWT tokens.

    Raises:
        - 401 Unauthorized: Invalid credentials or account locked
        - 403 Forbidden: Account suspended or deactivated
        - 500 Internal Server Error: Server error
    """
    command = LoginCommand(
        email=request.email,
        password=request.password,
        **request.client_info(http_request),
    )

    use_case = LoginUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_CREDENTIALS", "ACCOUNT_LOCKED"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ACCOUNT_INACTIVE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return ApiResponse(data=result.value)


class RefreshRequest(ClientInfoMixin):
    """Refresh token HTTP request payload"""

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post(
    "/refresh", status_code=status.HTTP_200_OK, response_model=ApiResponse[AuthResponse]
)
async def refresh(
    request: RefreshRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Refresh JWT Token

    Rotates the refresh token: the presented token stops working.

    Raises:
        - 401 Unauthorized: Invalid, expired, or already-used refresh token
        - 500 Internal Server Error: Server error
    """
    command = RefreshTokenCommand(
        refresh_token=request.refresh_token,
        **request.client_info(http_request),
    )

    use_case = RefreshTokenUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return ApiResponse(data=result.value)


class LogoutRequest(BaseModel):
    """Logout HTTP request payload"""

    refresh_token: str = Field(..., description="Refresh token to invalidate")


@router.post(
    "/logout", status_code=status.HTTP_200_OK, response_model=ApiResponse[MessageData]
)
async def logout(request: LogoutRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Logout

    Invalidates the session behind the refresh token. Always succeeds.
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=MessageData(message="Logged out successfully"))
