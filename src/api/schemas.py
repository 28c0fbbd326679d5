"""
Response envelope shared by all routes.

Success: {"status": "success", "data": ...}
Error:   {"status": "error", "code": ..., "message": ...}
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope"""

    status: Literal["success"] = "success"
    data: T


class ErrorResponse(BaseModel):
    """Error envelope"""

    status: Literal["error"] = "error"
    code: str
    message: str


class MessageData(BaseModel):
    message: str
