"""Redis adapter for the durable key-value store.

Wraps the async Redis client and maps Redis exceptions to CacheError so the
stores built on top of it work with Result types instead of exceptions.

Architecture:
- Returns Result types for all operations
- Redis-specific exceptions never leave this module
- Stores decide per use case whether a failure fails open or closed
"""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


class RedisAdapter:
    """Result-returning wrapper around ``redis.asyncio.Redis``.

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
            if value is None:
                return Success(value=None)
            decoded = value.decode("utf-8") if isinstance(value, bytes) else value
            return Success(value=decoded)
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    f"Failed to get key '{key}' from cache",
                    key,
                    e,
                )
            )

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        """Get JSON object from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with parsed dict if found, None if not found, or CacheError
            (including values that are not a JSON object).
        """
        result = await self.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError as e:
                    return Failure(
                        error=self._error(
                            InfrastructureErrorCode.SERIALIZATION_ERROR,
                            f"Failed to parse JSON for key '{key}'",
                            key,
                            e,
                        )
                    )
                if not isinstance(parsed, dict):
                    return Failure(
                        error=CacheError(
                            code=ErrorCode.CACHE_ERROR,
                            infrastructure_code=InfrastructureErrorCode.SERIALIZATION_ERROR,
                            message=f"Value for key '{key}' is not a JSON object",
                            details={"key": key},
                        )
                    )
                return Success(value=parsed)
            case Failure(error=err):
                return Failure(error=err)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
        *,
        only_if_absent: bool = False,
    ) -> Result[bool, CacheError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to store.
            ttl: Time to live in seconds (None = no expiration).
            only_if_absent: Only write when the key does not exist (SET NX).

        Returns:
            Result with True if written, False if skipped because the key
            already existed (only with ``only_if_absent``), or CacheError.
        """
        try:
            written = await self._redis.set(key, value, ex=ttl, nx=only_if_absent)
            return Success(value=bool(written))
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.CACHE_SET_ERROR,
                    f"Failed to set key '{key}' in cache",
                    key,
                    e,
                )
            )

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
        *,
        only_if_absent: bool = False,
    ) -> Result[bool, CacheError]:
        """Set JSON value in Redis.

        Args:
            key: Cache key.
            value: Dict to store (JSON serialized).
            ttl: Time to live in seconds (None = no expiration).
            only_if_absent: Only write when the key does not exist (SET NX).

        Returns:
            Result with True if written, False if skipped, or CacheError.
        """
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.SERIALIZATION_ERROR,
                    f"Failed to serialize value for key '{key}'",
                    key,
                    e,
                )
            )
        return await self.set(key, serialized, ttl, only_if_absent=only_if_absent)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
            return Success(value=deleted_count > 0)
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    f"Failed to delete key '{key}' from cache",
                    key,
                    e,
                )
            )

    @staticmethod
    def _error(
        infrastructure_code: InfrastructureErrorCode,
        message: str,
        key: str,
        exc: Exception,
    ) -> CacheError:
        return CacheError(
            code=ErrorCode.CACHE_ERROR,
            infrastructure_code=infrastructure_code,
            message=message,
            details={"key": key, "error": str(exc), "type": type(exc).__name__},
        )
