"""Session domain entity.

Pure business logic, no framework dependencies.

A session is the server-side proof of a successful login, keyed by an
unguessable random token that the caller holds in an httpOnly cookie.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class Session:
    """Authenticated session with an absolute expiry.

    Business Rules:
        - Sessions are immutable once created (no sliding refresh).
        - A session is dead once ``expires_at`` has passed, even if the
          store has not purged it yet.
        - Roles are a snapshot taken at login; they are not re-read from the
          credential record on later requests.

    Attributes:
        token: Opaque random lookup key (also the cookie value).
        username: Owning account.
        roles: Roles at login time.
        created_at: Creation instant (UTC).
        expires_at: Absolute expiry instant (UTC).
    """

    token: str
    username: str
    roles: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the session is logically dead.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if ``expires_at`` is at or before ``now``.
        """
        now = now or datetime.now(UTC)
        return self.expires_at <= now

    def __repr__(self) -> str:
        # The token is a bearer credential: never print it whole
        return (
            f"Session(token='{self.token[:4]}...', username={self.username!r}, "
            f"expires_at={self.expires_at.isoformat()})"
        )
