"""Redis-backed session store.

Key Pattern:
    - session:{token} -> {"username": ..., "roles": [...], "iat": <epoch>, "exp": <epoch>}

The Redis TTL is set to the session TTL so expired sessions are purged by the
store, but lookups also check the record's own ``exp`` against the clock:
TTL granularity and clock skew must never extend a session.

Fail-open on lookup: a Redis error reads as "no session" and the caller falls
back to trial mode. Create fails closed (login returns an error).
"""

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import structlog

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Session
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.errors import CacheError

logger = structlog.get_logger(__name__)

# Session TTL default (30 days in seconds)
DEFAULT_SESSION_TTL = 30 * 24 * 60 * 60

# Attempts at finding an unused token before giving up
_MAX_TOKEN_ATTEMPTS = 3


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RedisSessionStore:
    """Session store on top of RedisAdapter.

    Implements SessionStoreProtocol (structural typing).

    Attributes:
        _redis: RedisAdapter instance.
        _keys: Key layout.
        _ttl_seconds: Absolute session lifetime.
        _token_bytes: Random bytes per token.
        _clock: Current-time source (injectable for tests).
    """

    def __init__(
        self,
        redis_adapter: RedisAdapter,
        keys: CacheKeys,
        *,
        ttl_seconds: int = DEFAULT_SESSION_TTL,
        token_bytes: int = 24,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize session store.

        Args:
            redis_adapter: RedisAdapter instance.
            keys: Key layout.
            ttl_seconds: Session lifetime in seconds.
            token_bytes: Entropy per token (at least 24 bytes).
            clock: Returns the current UTC time.

        Raises:
            ValueError: If ttl_seconds is not positive or token_bytes < 24.
        """
        if ttl_seconds <= 0:
            raise ValueError("Session TTL must be positive")
        if token_bytes < 24:
            raise ValueError("Session tokens need at least 24 bytes of entropy")
        self._redis = redis_adapter
        self._keys = keys
        self._ttl_seconds = ttl_seconds
        self._token_bytes = token_bytes
        self._clock = clock

    async def create(
        self, username: str, roles: tuple[str, ...]
    ) -> Result[Session, DomainError]:
        """Create and persist a new session.

        The record is written with SET NX so a live session can never be
        overwritten; on a collision a new token is drawn.

        Args:
            username: Owning account.
            roles: Role snapshot.

        Returns:
            Success(Session) or Failure(CacheError).
        """
        now = self._clock()
        expires_at = now + timedelta(seconds=self._ttl_seconds)

        for _ in range(_MAX_TOKEN_ATTEMPTS):
            session = Session(
                token=secrets.token_urlsafe(self._token_bytes),
                username=username,
                roles=tuple(roles),
                created_at=now,
                expires_at=expires_at,
            )
            result = await self._redis.set_json(
                self._keys.session(session.token),
                self._to_dict(session),
                ttl=self._ttl_seconds,
                only_if_absent=True,
            )
            match result:
                case Success(value=True):
                    logger.info(
                        "session_created",
                        username=username,
                        expires_at=expires_at.isoformat(),
                    )
                    return Success(value=session)
                case Success(value=False):
                    logger.warning("session_token_collision", username=username)
                case Failure(error=err):
                    logger.error("session_create_failed", username=username, error=str(err))
                    return Failure(error=err)

        return Failure(
            error=CacheError(
                code=ErrorCode.CACHE_ERROR,
                message="Could not allocate a unique session token",
            )
        )

    async def lookup(self, token: str | None) -> Session | None:
        """Find a live session.

        Args:
            token: Session token (None or empty reads as absent).

        Returns:
            Session if present, decodable and not expired; None otherwise.
        """
        if not token:
            return None

        result = await self._redis.get_json(self._keys.session(token))

        match result:
            case Success(value=None):
                return None
            case Success(value=data):
                try:
                    session = self._from_dict(token, data)
                except (KeyError, TypeError, ValueError, OverflowError) as e:
                    logger.warning("session_record_corrupted", error=str(e))
                    return None
            case Failure(error=err):
                # Fail open: caller continues without a session
                logger.warning("session_lookup_failed", error=str(err))
                return None

        if session.is_expired(self._clock()):
            logger.info("session_expired", username=session.username)
            return None
        return session

    async def destroy(self, token: str | None) -> None:
        """Delete a session. Absent or empty tokens are a no-op.

        Args:
            token: Session token.
        """
        if not token:
            return

        result = await self._redis.delete(self._keys.session(token))

        match result:
            case Success(value=True):
                logger.info("session_destroyed")
            case Success(value=False):
                logger.debug("session_destroy_absent")
            case Failure(error=err):
                logger.warning("session_destroy_failed", error=str(err))

    @staticmethod
    def _to_dict(session: Session) -> dict[str, Any]:
        return {
            "username": session.username,
            "roles": list(session.roles),
            "iat": int(session.created_at.timestamp()),
            "exp": int(session.expires_at.timestamp()),
        }

    @staticmethod
    def _from_dict(token: str, data: dict[str, Any]) -> Session:
        expires_at = datetime.fromtimestamp(int(data["exp"]), tz=UTC)
        issued = data.get("iat")
        created_at = (
            datetime.fromtimestamp(int(issued), tz=UTC)
            if issued is not None
            else expires_at - timedelta(seconds=DEFAULT_SESSION_TTL)
        )
        return Session(
            token=token,
            username=str(data["username"]),
            roles=tuple(str(role) for role in data.get("roles") or ()),
            created_at=created_at,
            expires_at=expires_at,
        )
