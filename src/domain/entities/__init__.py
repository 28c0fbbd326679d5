"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AccountStatus, ActivityAction

# Export all entities
from .role import Role
from .company import Company
from .user import User
from .session import Session
from .failed_login_attempt import FailedLoginAttempt
from .activity import Activity

__all__ = [
    # Enums
    "AccountStatus",
    "ActivityAction",
    # Entities
    "Role",
    "Company",
    "User",
    "Session",
    "FailedLoginAttempt",
    "Activity",
]
