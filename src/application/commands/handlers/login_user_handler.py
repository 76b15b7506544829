"""Login handler.

Flow:
1. Validate that username and password are present
2. Find credential record by username (dummy derivation when absent)
3. Check expiry (ACCOUNT_EXPIRED regardless of the password)
4. Check account status (disabled collapses to invalid credentials)
5. Verify password
6. Create session
7. Return Success(LoginResult)

Every failure other than expiry collapses to INVALID_CREDENTIALS; the
internal reason is logged only.

Architecture:
- Application layer ONLY imports from domain and core
- Store and password service are injected via protocols
"""

from collections.abc import Callable
from datetime import UTC, datetime

from src.application.commands.auth_commands import LoginResult, LoginUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    CredentialRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    SessionStoreProtocol,
)


class LoginError:
    """Internal login failure reasons (logged, never returned)."""

    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"
    ACCOUNT_DISABLED = "account_disabled"
    ACCOUNT_EXPIRED = "account_expired"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class LoginUserHandler:
    """Handler for LoginUser command."""

    def __init__(
        self,
        credential_repo: CredentialRepository,
        password_service: PasswordHashingProtocol,
        session_store: SessionStoreProtocol,
        logger: LoggerProtocol,
        *,
        session_max_age: int,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            credential_repo: Credential record lookups.
            password_service: Password verification.
            session_store: Session creation.
            logger: Structured logger.
            session_max_age: Session cookie lifetime in seconds.
            clock: Returns the current UTC time.
        """
        self._credential_repo = credential_repo
        self._password_service = password_service
        self._session_store = session_store
        self._logger = logger
        self._session_max_age = session_max_age
        self._clock = clock

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, DomainError]:
        """Handle login command.

        Args:
            cmd: LoginUser command.

        Returns:
            Success(LoginResult) on successful login.
            Failure(ValidationError): MISSING_FIELDS.
            Failure(AuthenticationError): INVALID_CREDENTIALS or ACCOUNT_EXPIRED.
            Failure(DomainError): Store failure (credential lookup or session
                creation).
        """
        username = (cmd.username or "").strip()
        password = cmd.password or ""

        # Step 1: Validate input
        if not username or not password:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.MISSING_FIELDS,
                    message="username and password are required",
                    field="password" if username else "username",
                )
            )

        # Step 2: Find credential record
        lookup = await self._credential_repo.find_by_username(username)
        match lookup:
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=record):
                pass

        if record is None:
            self._password_service.verify(password, None)
            return self._reject(username, LoginError.USER_NOT_FOUND)

        # Step 3: Check expiry
        if record.is_expired(self._clock()):
            self._logger.warning(
                "login_failed", username=username, reason=LoginError.ACCOUNT_EXPIRED
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_EXPIRED,
                    message="Account expired",
                    reason=LoginError.ACCOUNT_EXPIRED,
                )
            )

        # Step 4: Check account status
        if not record.is_active():
            return self._reject(username, LoginError.ACCOUNT_DISABLED)

        # Step 5: Verify password
        if not self._password_service.verify(password, record.password_hash):
            return self._reject(username, LoginError.WRONG_PASSWORD)

        # Step 6: Create session
        created = await self._session_store.create(record.username, record.roles)
        match created:
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=session):
                pass

        self._logger.info("login_succeeded", username=record.username)

        # Step 7: Return Success
        return Success(
            value=LoginResult(
                username=record.username,
                roles=session.roles,
                session_token=session.token,
                max_age=self._session_max_age,
            )
        )

    def _reject(self, username: str, reason: str) -> Failure[AuthenticationError]:
        self._logger.warning("login_failed", username=username, reason=reason)
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message="Invalid credentials",
                reason=reason,
            )
        )
