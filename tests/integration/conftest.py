"""Shared fixtures for integration tests.

Stores run against fakeredis (in-memory Redis emulation) through the real
RedisAdapter, so key layout, TTLs and SET NX behave as in production.
"""

import fakeredis.aioredis
import pytest_asyncio

from src.infrastructure.cache import CacheKeys, RedisAdapter


@pytest_asyncio.fixture
async def fakeredis_client():
    """Create fakeredis client for store testing.

    Returns:
        fakeredis.aioredis.FakeRedis instance with string responses.
    """
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest_asyncio.fixture
async def redis_adapter(fakeredis_client) -> RedisAdapter:
    return RedisAdapter(redis_client=fakeredis_client)


@pytest_asyncio.fixture
async def cache_keys() -> CacheKeys:
    return CacheKeys()
