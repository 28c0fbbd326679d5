import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.api.utils.jwt import issue_tokens
from src.app.services.password_hasher import hash_password
from src.app.services.security_service import SecurityService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import ActivityAction, Company, User
from .dtos import AuthResponse, RegisterCommand, UserSummary

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (tokens + account summary)

    Business Logic:
    1. Reject duplicate email, then duplicate username
    2. Resolve the default role (missing role is a configuration error)
    3. Hash password with bcrypt
    4. Create a single-member default company
    5. Create User bound to role + company, password history seeded
    6. Commit steps 4-5 in one transaction
    7. Issue tokens, create Session, append USER_REGISTERED activity
       (separate commit, retried with a fresh token pair on database errors)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated registration data

        Returns:
            Result[AuthResponse], or Error(EMAIL_ALREADY_EXISTS |
            USERNAME_ALREADY_EXISTS | USER_ALREADY_EXISTS |
            DEFAULT_ROLE_NOT_FOUND | SESSION_CREATE_FAILED)
        """
        async with self.uow:
            if await self.uow.users.get_by_email(command.email):
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            if await self.uow.users.get_by_username(command.username):
                return Return.err(
                    Error("USERNAME_ALREADY_EXISTS", "Username already taken")
                )

            role = await self.uow.roles.get_by_name(ApplicationConfig.DEFAULT_ROLE_NAME)
            if role is None:
                logger.error(
                    f"Default role '{ApplicationConfig.DEFAULT_ROLE_NAME}' not found"
                )
                return Return.err(
                    Error("DEFAULT_ROLE_NOT_FOUND", "Default role not found")
                )

            password_hash = hash_password(command.password)
            now = utc_now()

            try:
                company = await self.uow.companies.create(
                    Company(
                        name=f"{command.first_name}'s Company",
                        identifier=command.username.upper(),
                        is_active=True,
                    )
                )

                user = await self.uow.users.create(
                    User(
                        email=command.email,
                        username=command.username,
                        password_hash=password_hash,
                        first_name=command.first_name,
                        last_name=command.last_name,
                        role_id=role.id,
                        company_id=company.id,
                        password_history=[
                            {"hash": password_hash, "changed_at": now.isoformat()}
                        ],
                        last_password_change=now,
                    )
                )

                # Account, company and role assignment land together
                await self.uow.commit()
            except IntegrityError:
                # Lost a race against a concurrent registration
                await self.uow.rollback()
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "Email or username already registered")
                )

            # Rollback expires loaded instances, so keep plain values from here on
            user_id = user.id
            role_id = role.id
            summary = UserSummary(
                id=str(user.id),
                email=user.email,
                username=user.username,
                role=role.name,
                company_id=str(company.id),
            )

            security = SecurityService(self.uow)
            attempts = max(1, ApplicationConfig.SESSION_CREATE_ATTEMPTS)
            for attempt in range(1, attempts + 1):
                access_token, refresh_token = issue_tokens(user_id, role_id)
                try:
                    await security.create_session(
                        user_id, refresh_token, command.ip_address, command.user_agent
                    )
                    await security.track_activity(
                        user_id,
                        ActivityAction.user_registered,
                        {"username": command.username},
                        command.ip_address,
                        command.user_agent,
                    )
                    await self.uow.commit()
                    break
                except SQLAlchemyError as exc:
                    await self.uow.rollback()
                    logger.warning(
                        f"Session creation for new user {user_id} failed "
                        f"(attempt {attempt}/{attempts}): {exc.__class__.__name__}"
                    )
            else:
                return Return.err(
                    Error(
                        "SESSION_CREATE_FAILED",
                        "Account created but session could not be opened; please log in",
                    )
                )

            return Return.ok(
                AuthResponse(
                    access_token=access_token,
                    refresh_token=refresh_token,
                    user=summary,
                )
            )
