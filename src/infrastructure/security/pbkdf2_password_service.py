"""PBKDF2 password hashing service (adapter).

Implements PasswordHashingProtocol with PBKDF2-HMAC from ``cryptography``.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Injected via dependency container

Security:
    - Salted, iterated, fixed-length derivation
    - Digest, iteration count and salt are read from each record, so the
      cost can be raised for new records without breaking old ones
    - Constant-time comparison of derived keys
    - Unknown users are verified against a dummy hash so timing does not
      reveal whether an account exists

Compatibility:
    Records produced by ``pbkdf2Sync(password, salt, 120000, 32, "sha256")``
    verify unchanged.
"""

import secrets

from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from src.domain.value_objects import PasswordHash

_DIGESTS: dict[str, type[hashes.HashAlgorithm]] = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}

DEFAULT_KEY_LENGTH = 32
DEFAULT_SALT_BYTES = 16


class Pbkdf2PasswordService:
    """PBKDF2 password derivation and verification.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()

        # Provisioning
        password_hash = password_service.hash_password("s3cret")
        password_hash.encode()  # "pbkdf2$sha256$120000$...$..."

        # Login
        password_service.verify("s3cret", password_hash)  # True
    """

    def __init__(self, iterations: int = 120_000, digest: str = "sha256") -> None:
        """Initialize PBKDF2 password service.

        Args:
            iterations: Iteration count for newly hashed passwords.
            digest: HMAC digest for newly hashed passwords.

        Raises:
            ValueError: If iterations < 1 or the digest is unsupported.
        """
        if iterations < 1:
            msg = "PBKDF2 iterations must be positive"
            raise ValueError(msg)
        if digest.lower() not in _DIGESTS:
            msg = f"Unsupported PBKDF2 digest: {digest}"
            raise ValueError(msg)

        self._iterations = iterations
        self._digest = digest.lower()
        # Verified against when the username does not exist
        self._dummy_hash = self.hash_password(secrets.token_urlsafe(16))

    def derive(
        self,
        password: str,
        salt: bytes,
        iterations: int,
        digest: str,
        length: int = DEFAULT_KEY_LENGTH,
    ) -> bytes:
        """Derive a key from a password.

        Pure and deterministic: identical inputs always give identical output.

        Args:
            password: Plaintext password (UTF-8 encoded before derivation).
            salt: Salt bytes.
            iterations: PBKDF2 iteration count.
            digest: HMAC digest name.
            length: Output length in bytes.

        Returns:
            Derived key bytes.

        Raises:
            ValueError: If the digest is unsupported or iterations < 1.
        """
        algorithm = _DIGESTS.get(digest.lower())
        if algorithm is None:
            raise ValueError(f"Unsupported PBKDF2 digest: {digest}")
        if iterations < 1:
            raise ValueError("PBKDF2 iterations must be positive")

        kdf = PBKDF2HMAC(
            algorithm=algorithm(),
            length=length,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(password.encode("utf-8"))

    def verify(self, password: str, password_hash: PasswordHash | None) -> bool:
        """Verify a plaintext password against a stored hash.

        Args:
            password: Plaintext password.
            password_hash: Stored hash, or None when the user does not exist.

        Returns:
            True if the password matches, False otherwise.

        Note:
            - Constant-time comparison
            - Returns False for unusable hashes (no exceptions)
            - With None, still performs one derivation and returns False
        """
        if password_hash is None:
            self._check(password, self._dummy_hash)
            return False
        return self._check(password, password_hash)

    def hash_password(
        self,
        password: str,
        *,
        iterations: int | None = None,
        digest: str | None = None,
    ) -> PasswordHash:
        """Hash a plaintext password with a fresh random salt.

        Args:
            password: Plaintext password.
            iterations: Override the configured iteration count.
            digest: Override the configured digest.

        Returns:
            PasswordHash holding every derivation parameter.

        Example:
            >>> service = Pbkdf2PasswordService(iterations=1000)
            >>> a = service.hash_password("pw")
            >>> b = service.hash_password("pw")
            >>> a.derived_key != b.derived_key  # Different salts
            True
        """
        rounds = iterations or self._iterations
        digest_name = (digest or self._digest).lower()
        salt = secrets.token_bytes(DEFAULT_SALT_BYTES)
        return PasswordHash(
            digest=digest_name,
            iterations=rounds,
            salt=salt,
            derived_key=self.derive(password, salt, rounds, digest_name),
        )

    def _check(self, password: str, password_hash: PasswordHash) -> bool:
        try:
            candidate = self.derive(
                password,
                password_hash.salt,
                password_hash.iterations,
                password_hash.digest,
                length=len(password_hash.derived_key),
            )
        except ValueError:
            # Unsupported digest or bad parameters: fail securely
            return False
        return constant_time.bytes_eq(candidate, password_hash.derived_key)
