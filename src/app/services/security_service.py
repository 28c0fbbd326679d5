"""
Security Service

Account-security primitives shared by the auth use cases: failed-login
tracking with lazy lockout, session storage and the activity log.

Runs inside the caller's UnitOfWork and never commits; the calling use case
owns the transaction boundary.
"""

import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional
from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import (
    AccountStatus,
    Activity,
    ActivityAction,
    FailedLoginAttempt,
    Session,
)

logger = logging.getLogger(__name__)

LOCKOUT_REASON = "Too many failed login attempts"


class SecurityService:
    """
    Failed-attempt tracker, session store and activity writer.

    Business Rules:
    - Every failed login is recorded, even for unknown emails
    - MAX_FAILED_LOGIN_ATTEMPTS failures inside the trailing lockout window
      lock an active account
    - A lock expires LOCKOUT_DURATION_MINUTES after it started; the first
      check after that clears it (no background job)
    - Session tokens are unique; creating a session replaces a stale row
      holding the same token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def lockout_duration(self) -> timedelta:
        return timedelta(minutes=ApplicationConfig.LOCKOUT_DURATION_MINUTES)

    # ------------------------------------------------------------------
    # Failed-attempt tracking
    # ------------------------------------------------------------------

    async def record_failed_login(
        self,
        email: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> bool:
        """
        Record a failed login and lock the account if the threshold is reached.

        Args:
            email: Email the login was attempted with
            ip_address: Client IP (optional)
            user_agent: Client user agent (optional)

        Returns:
            True if this failure transitioned the account to locked
        """
        user = await self.uow.users.get_by_email(email)

        # The row is written before the count so it is part of it
        await self.uow.failed_login_attempts.create(
            FailedLoginAttempt(
                email=email,
                user_id=user.id if user else None,
                ip_address=ip_address,
                user_agent=user_agent,
            )
        )

        if user is None:
            return False

        since = utc_now() - self.lockout_duration
        recent_attempts = await self.uow.failed_login_attempts.count_by_user_since(
            user.id, since
        )

        if recent_attempts < ApplicationConfig.MAX_FAILED_LOGIN_ATTEMPTS:
            return False

        # Suspended/deactivated accounts keep their status
        if user.account_status != AccountStatus.active:
            return False

        user.account_status = AccountStatus.locked
        user.deactivated_at = utc_now()
        user.deactivation_reason = LOCKOUT_REASON
        await self.uow.users.update(user)

        await self.track_activity(
            user.id,
            ActivityAction.account_locked,
            {"failed_attempts": recent_attempts},
            ip_address,
            user_agent,
        )
        logger.warning(
            f"Account {user.id} locked after {recent_attempts} failed login attempts"
        )
        return True

    async def is_account_locked(self, user_id: UUID) -> bool:
        """
        Check whether an account is currently locked.

        Clears the lock fields when the lockout window has elapsed.
        """
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            return False

        if user.account_status != AccountStatus.locked or user.deactivated_at is None:
            return False

        lockout_end = user.deactivated_at + self.lockout_duration
        if utc_now() < lockout_end:
            return True

        user.account_status = AccountStatus.active
        user.deactivated_at = None
        user.deactivation_reason = None
        await self.uow.users.update(user)
        logger.info(f"Account {user_id} automatically unlocked")
        return False

    # ------------------------------------------------------------------
    # Session store
    # ------------------------------------------------------------------

    async def create_session(
        self,
        user_id: UUID,
        token: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Session:
        """Persist a session for token, replacing any row with the same token"""
        await self.uow.sessions.delete_by_token(token)

        session = Session(
            user_id=user_id,
            token=token,
            ip_address=ip_address,
            user_agent=user_agent,
            expires_at=utc_now() + timedelta(hours=ApplicationConfig.SESSION_EXPIRY_HOURS),
        )
        return await self.uow.sessions.create(session)

    async def get_live_session(self, token: str) -> Optional[Session]:
        """Session holding token, or None if absent or expired"""
        session = await self.uow.sessions.get_by_token(token)
        if session is None or session.expires_at <= utc_now():
            return None
        return session

    async def list_sessions(self, user_id: UUID) -> List[Session]:
        """Active sessions for a user, newest first"""
        return await self.uow.sessions.get_active_by_user_id(user_id, utc_now())

    async def invalidate_session(self, token: str) -> Result[None]:
        """Delete exactly the session holding token"""
        deleted = await self.uow.sessions.delete_by_token(token)
        if not deleted:
            return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))
        return Return.ok(None)

    async def invalidate_all_sessions(self, user_id: UUID) -> int:
        """Delete every session of a user. Returns the number removed."""
        return await self.uow.sessions.delete_all_by_user_id(user_id)

    async def cleanup_expired_records(self) -> Dict[str, int]:
        """
        Sweep expired sessions and failed attempts past the retention window.

        Intended to be triggered periodically by an external scheduler.
        """
        now = utc_now()
        expired_sessions = await self.uow.sessions.delete_expired(now)
        cutoff = now - timedelta(hours=ApplicationConfig.FAILED_ATTEMPT_RETENTION_HOURS)
        old_attempts = await self.uow.failed_login_attempts.delete_older_than(cutoff)
        return {"expired_sessions": expired_sessions, "failed_attempts": old_attempts}

    # ------------------------------------------------------------------
    # Activity log
    # ------------------------------------------------------------------

    async def track_activity(
        self,
        user_id: UUID,
        action: ActivityAction,
        metadata: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Activity:
        """Append an activity record"""
        activity = Activity(
            user_id=user_id,
            action=action.value,
            activity_metadata=metadata,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return await self.uow.activities.create(activity)
