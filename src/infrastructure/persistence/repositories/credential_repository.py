"""Redis-backed credential repository.

Credential records are provisioned out-of-band (see ``src.core.make_user``)
and stored as JSON under ``user:{username}``. The service only reads them.

Stored shapes accepted:

    {"username": "acme", "role": "user", "quota": {"max_pages": 10, "max_files": 100},
     "expires": "2099-12-31", "status": "active",
     "hash": "pbkdf2$sha256$120000$<salt>$<key>"}

    {"username": "acme", "roles": ["user"], "salt": "<b64>", "hash": "<b64>",
     "iterations": 120000, "expires": "2099-12-31"}
"""

from datetime import UTC, datetime
from typing import Any

import structlog

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import CredentialRecord
from src.domain.enums import AccountStatus
from src.domain.value_objects import PasswordHash, Quota
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.enums import InfrastructureErrorCode

logger = structlog.get_logger(__name__)


class RedisCredentialRepository:
    """Credential store on top of RedisAdapter.

    Implements CredentialRepository (structural typing). ``save`` is used by
    the provisioning tool only; request handlers depend on the protocol,
    which exposes lookups alone.
    """

    def __init__(self, redis_adapter: RedisAdapter, keys: CacheKeys) -> None:
        """Initialize repository.

        Args:
            redis_adapter: RedisAdapter instance.
            keys: Key layout.
        """
        self._redis = redis_adapter
        self._keys = keys

    async def find_by_username(
        self, username: str
    ) -> Result[CredentialRecord | None, DomainError]:
        """Look up a credential record.

        Args:
            username: Account key.

        Returns:
            Success(CredentialRecord) if present and decodable.
            Success(None) if absent, not JSON or otherwise corrupted (logged).
            Failure(CacheError) if Redis failed.
        """
        result = await self._redis.get_json(self._keys.user(username))

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=data):
                try:
                    return Success(value=credential_record_from_dict(data, username))
                except (KeyError, TypeError, ValueError, AttributeError) as e:
                    logger.warning(
                        "credential_record_corrupted",
                        username=username,
                        error=str(e),
                    )
                    return Success(value=None)
            case Failure(error=err) if (
                err.infrastructure_code is InfrastructureErrorCode.SERIALIZATION_ERROR
            ):
                logger.warning(
                    "credential_record_corrupted", username=username, error=str(err)
                )
                return Success(value=None)
            case Failure(error=err):
                logger.error("credential_lookup_failed", username=username, error=str(err))
                return Failure(error=err)

    async def save(self, record: CredentialRecord) -> Result[bool, DomainError]:
        """Write a credential record (provisioning only).

        Args:
            record: Record to store (overwrites any existing record).

        Returns:
            Success(True) when written, or Failure(CacheError).
        """
        return await self._redis.set_json(
            self._keys.user(record.username), credential_record_to_dict(record)
        )


def credential_record_from_dict(
    data: dict[str, Any], username: str | None = None
) -> CredentialRecord:
    """Map a stored record to the domain entity.

    Args:
        data: Decoded JSON record.
        username: Key the record was stored under (fallback for ``username``).

    Returns:
        CredentialRecord.

    Raises:
        KeyError, TypeError, ValueError: If the record is malformed.
    """
    encoded = data["hash"]
    if isinstance(encoded, str) and encoded.startswith("pbkdf2$"):
        password_hash = PasswordHash.from_encoded(encoded)
    else:
        password_hash = PasswordHash.from_legacy(
            salt=data["salt"],
            derived_key=encoded,
            iterations=data["iterations"],
        )

    roles = data.get("roles")
    if roles is None:
        roles = [data["role"]] if data.get("role") else []
    elif isinstance(roles, str):
        roles = [roles]

    return CredentialRecord(
        username=str(data.get("username") or username),
        password_hash=password_hash,
        roles=tuple(str(role) for role in roles),
        quota=Quota.from_dict(data.get("quota")),
        expires=_parse_expires(data.get("expires")),
        status=AccountStatus.parse(data.get("status")),
    )


def credential_record_to_dict(record: CredentialRecord) -> dict[str, Any]:
    """Map the domain entity to the stored JSON shape."""
    data: dict[str, Any] = {
        "username": record.username,
        "roles": list(record.roles),
        "quota": record.quota.to_dict(),
        "status": record.status.value,
        "hash": record.password_hash.encode(),
    }
    if record.roles:
        data["role"] = record.roles[0]
    if record.expires is not None:
        midnight = record.expires.time() == datetime.min.time()
        data["expires"] = (
            record.expires.date().isoformat() if midnight else record.expires.isoformat()
        )
    return data


def _parse_expires(value: Any) -> datetime | None:
    """Parse an ISO date or datetime; naive values are UTC."""
    if value in (None, ""):
        return None
    parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
