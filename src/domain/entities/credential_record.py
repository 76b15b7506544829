"""Credential record domain entity.

Pure business logic, no framework dependencies.

A credential record is created out-of-band by the provisioning tool and is
read-only to the service: login and logout never mutate it.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums import AccountStatus
from src.domain.value_objects import PasswordHash, Quota


@dataclass(frozen=True, slots=True, kw_only=True)
class CredentialRecord:
    """Stored account identity plus password-verification material.

    Business Rules:
        - A DISABLED record never authenticates.
        - A record whose ``expires`` instant has passed is expired, regardless
          of password correctness.
        - A record without ``expires`` never expires.

    Attributes:
        username: Unique account key.
        password_hash: Self-describing PBKDF2 hash.
        roles: Capability tags (snapshotted into sessions at login).
        quota: Informational plan limits.
        expires: Expiry instant (UTC) or None.
        status: Lifecycle flag.

    Example:
        >>> record = CredentialRecord(
        ...     username="acme",
        ...     password_hash=PasswordHash.from_encoded(encoded),
        ...     expires=datetime(2099, 12, 31, tzinfo=UTC),
        ... )
        >>> record.is_expired()
        False
    """

    username: str
    password_hash: PasswordHash
    roles: tuple[str, ...] = ()
    quota: Quota = field(default_factory=Quota)
    expires: datetime | None = None
    status: AccountStatus = AccountStatus.ACTIVE

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the record's expiry instant has passed.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if the record has an expiry in the past.
        """
        if self.expires is None:
            return False
        now = now or datetime.now(UTC)
        return self.expires < now

    def is_active(self) -> bool:
        """Check whether the record's status allows authentication."""
        return self.status is AccountStatus.ACTIVE
