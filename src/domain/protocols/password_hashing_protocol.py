"""Password hashing protocol for domain layer.

Infrastructure provides the PBKDF2 implementation
(Pbkdf2PasswordService).
"""

from typing import Protocol

from src.domain.value_objects import PasswordHash


class PasswordHashingProtocol(Protocol):
    """Password derivation and verification interface.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self._password_service = password_service

        is_valid = self._password_service.verify(password, record.password_hash)
    """

    def derive(
        self, password: str, salt: bytes, iterations: int, digest: str
    ) -> bytes:
        """Derive a key from a password (pure, deterministic).

        Raises:
            ValueError: If the digest is unsupported or iterations < 1.
        """
        ...

    def verify(self, password: str, password_hash: PasswordHash | None) -> bool:
        """Check a password against a stored hash.

        Returns:
            True if the password matches, False on any mismatch or unusable
            hash (unsupported digest, bad parameters). Never raises.

        Note:
            Comparison is constant-time.
        """
        ...

    def hash_password(
        self,
        password: str,
        *,
        iterations: int | None = None,
        digest: str | None = None,
    ) -> PasswordHash:
        """Hash a new password with a random salt (provisioning)."""
        ...
