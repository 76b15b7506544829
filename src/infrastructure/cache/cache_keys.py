"""Cache key construction utilities.

Centralized key construction for everything the service keeps in Redis.
Keys follow ``[{prefix}:]{resource}:{id}``; the default empty prefix keeps
the bare ``user:`` / ``session:`` layout that provisioned records use.

Usage:
    from src.infrastructure.cache.cache_keys import CacheKeys

    keys = CacheKeys(prefix=settings.cache_key_prefix)
    keys.user("acme")        # "user:acme"
    keys.session(token)      # "session:<token>"
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Optional namespace prefix (empty = no prefix).
    """

    prefix: str = ""

    def _key(self, *parts: str) -> str:
        joined = ":".join(parts)
        return f"{self.prefix}:{joined}" if self.prefix else joined

    def user(self, username: str) -> str:
        """Credential record key.

        Pattern: [{prefix}:]user:{username}
        """
        return self._key("user", username)

    def session(self, token: str) -> str:
        """Session record key.

        Pattern: [{prefix}:]session:{token}
        """
        return self._key("session", token)
