"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AccountStatus(str, Enum):
    """User account status (mutually exclusive)"""

    active = "active"
    suspended = "suspended"
    deactivated = "deactivated"
    locked = "locked"


class ActivityAction(str, Enum):
    """Security-relevant actions recorded in the activity log"""

    user_registered = "USER_REGISTERED"
    user_logged_in = "USER_LOGGED_IN"
    token_refreshed = "TOKEN_REFRESHED"
    password_changed = "PASSWORD_CHANGED"
    account_locked = "ACCOUNT_LOCKED"
    account_status_changed = "ACCOUNT_STATUS_CHANGED"
    sessions_revoked = "SESSIONS_REVOKED"
