"""Cache infrastructure package.

Architecture:
- RedisAdapter: Result-returning wrapper around redis.asyncio
- CacheKeys: Key layout for credential and session records
- Use src.core.container.get_cache() for dependency injection
"""

from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "RedisAdapter",
]
