"""Self-describing password hash value object.

A credential record stores the derived key together with every parameter
used to derive it, so verification reproduces the exact derivation and the
cost can be raised for new records without invalidating old ones.

Encoded form (written by the provisioning tool):

    pbkdf2$<digest>$<iterations>$<base64 salt>$<base64 derived key>

Legacy records keep ``salt``, ``hash`` and ``iterations`` as separate
fields with an implied SHA-256 digest; ``from_legacy`` reads those.
"""

import base64
import binascii
from dataclasses import dataclass

ALGORITHM = "pbkdf2"
LEGACY_DIGEST = "sha256"


def _b64decode(value: str) -> bytes:
    """Decode standard or URL-safe base64, tolerating missing padding."""
    cleaned = value.strip().replace("-", "+").replace("_", "/")
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned, validate=True)


def _b64encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordHash:
    """PBKDF2 derivation parameters plus the derived key.

    Attributes:
        digest: HMAC digest name (sha256, sha512, ...).
        iterations: PBKDF2 iteration count.
        salt: Random salt bytes.
        derived_key: Expected PBKDF2 output.

    Example:
        >>> ph = PasswordHash.from_encoded("pbkdf2$sha256$1000$c2FsdA==$a2V5")
        >>> ph.iterations
        1000
        >>> ph.encode()
        'pbkdf2$sha256$1000$c2FsdA==$a2V5'
    """

    digest: str
    iterations: int
    salt: bytes
    derived_key: bytes

    @classmethod
    def from_encoded(cls, encoded: str) -> "PasswordHash":
        """Parse the ``pbkdf2$digest$iterations$salt$key`` form.

        Args:
            encoded: Encoded hash string.

        Returns:
            PasswordHash: Parsed value object.

        Raises:
            ValueError: If the string is not a well-formed PBKDF2 hash.
        """
        parts = encoded.split("$")
        if len(parts) != 5 or parts[0] != ALGORITHM:
            raise ValueError("Not a pbkdf2 hash string")
        _, digest, iterations, salt, derived_key = parts
        return cls._build(digest, iterations, salt, derived_key)

    @classmethod
    def from_legacy(
        cls, *, salt: str, derived_key: str, iterations: int | str
    ) -> "PasswordHash":
        """Build from the legacy split fields (SHA-256 implied).

        Raises:
            ValueError: If any field is malformed.
        """
        return cls._build(LEGACY_DIGEST, iterations, salt, derived_key)

    @classmethod
    def _build(
        cls, digest: str, iterations: int | str, salt: str, derived_key: str
    ) -> "PasswordHash":
        try:
            rounds = int(iterations)
            salt_bytes = _b64decode(salt)
            key_bytes = _b64decode(derived_key)
        except (TypeError, ValueError, binascii.Error) as e:
            raise ValueError(f"Malformed pbkdf2 parameters: {e}") from e
        if not key_bytes:
            raise ValueError("Empty derived key")
        return cls(
            digest=digest.strip().lower(),
            iterations=rounds,
            salt=salt_bytes,
            derived_key=key_bytes,
        )

    def encode(self) -> str:
        """Return the ``pbkdf2$digest$iterations$salt$key`` form."""
        return "$".join(
            [
                ALGORITHM,
                self.digest,
                str(self.iterations),
                _b64encode(self.salt),
                _b64encode(self.derived_key),
            ]
        )

    def __repr__(self) -> str:
        # Keep key material out of logs and tracebacks
        return f"PasswordHash(digest={self.digest!r}, iterations={self.iterations})"
