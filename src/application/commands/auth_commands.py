"""Authentication commands (CQRS write operations).

Commands are immutable (frozen=True) and keyword-only (kw_only=True).
Handlers execute the logic and return Result types.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange a username and password for a session.

    Attributes:
        username: Account name as submitted (trimmed by the handler).
        password: Plaintext password (never logged).

    Example:
        >>> command = LoginUser(username="acme", password="s3cret")
        >>> result = await handler.handle(command)
        >>> # Returns Success(LoginResult) or Failure(error)
    """

    username: str | None
    password: str | None


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response from a successful login.

    This is a response DTO, not a command.

    Attributes:
        username: Authenticated account.
        roles: Role snapshot stored with the session.
        session_token: Value for the session cookie.
        max_age: Session cookie lifetime in seconds.
    """

    username: str
    roles: tuple[str, ...]
    session_token: str
    max_age: int


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """End the caller's session.

    Attributes:
        session_token: Session cookie value (None when absent).
    """

    session_token: str | None
