"""Repository dependency factories.

Both stores sit on the shared RedisAdapter, so they are app-scoped
singletons like the adapter itself.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_cache, get_cache_keys

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        RedisCredentialRepository,
        RedisSessionStore,
    )


@lru_cache()
def get_credential_repository() -> "RedisCredentialRepository":
    """Get credential repository (``user:{username}`` records)."""
    from src.infrastructure.persistence.repositories import RedisCredentialRepository

    return RedisCredentialRepository(get_cache(), get_cache_keys())


@lru_cache()
def get_session_store() -> "RedisSessionStore":
    """Get session store (``session:{token}`` records)."""
    from src.infrastructure.persistence.repositories import RedisSessionStore

    return RedisSessionStore(
        get_cache(),
        get_cache_keys(),
        ttl_seconds=settings.session_ttl_seconds,
        token_bytes=settings.session_token_bytes,
    )
