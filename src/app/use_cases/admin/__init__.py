"""Admin use cases for system administration operations."""

from .update_account_status_use_case import (
    AccountStatusResponse,
    UpdateAccountStatusUseCase,
)
from .cleanup_security_records_use_case import (
    CleanupSecurityRecordsResponse,
    CleanupSecurityRecordsUseCase,
)

__all__ = [
    "UpdateAccountStatusUseCase",
    "AccountStatusResponse",
    "CleanupSecurityRecordsUseCase",
    "CleanupSecurityRecordsResponse",
]
