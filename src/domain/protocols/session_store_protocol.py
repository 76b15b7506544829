"""Session store protocol.

Sessions are immutable: created on login, read on every guarded request,
deleted on logout, and expired by TTL. There is no update operation, so
concurrent requests cannot race on a read-modify-write.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import Session


class SessionStoreProtocol(Protocol):
    """Durable session store (port).

    Key Pattern:
        - session:{token} -> session JSON (store TTL = session TTL)
    """

    async def create(
        self, username: str, roles: tuple[str, ...]
    ) -> Result[Session, DomainError]:
        """Create and persist a new session with a fresh random token.

        Args:
            username: Owning account.
            roles: Role snapshot taken at login.

        Returns:
            Success(Session) with token and expiry, or Failure if the store
            could not persist it.
        """
        ...

    async def lookup(self, token: str | None) -> Session | None:
        """Find a live session.

        Args:
            token: Session token from the credential carrier (may be None).

        Returns:
            Session if present and not expired, None otherwise. A record
            found in the store but past its own ``expires_at`` is None.
        """
        ...

    async def destroy(self, token: str | None) -> None:
        """Delete a session. Idempotent: absent tokens are not an error."""
        ...
