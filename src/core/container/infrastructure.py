"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Redis client (connection pool) and RedisAdapter
- Key layout
- Logging (structlog console/JSON)
- Password hashing (PBKDF2)
- Trial token codec (HS256)
- Extraction gateway (OpenAI Responses API)
- Cookie carrier (session and trial cookie names, Secure flag)

Every factory reads ``settings`` once; components themselves take plain
constructor arguments.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from src.domain.protocols.extraction_protocol import ExtractionGatewayProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.trial_token_protocol import TrialTokenProtocol
    from src.infrastructure.cache import CacheKeys, RedisAdapter
    from src.presentation.api.v1.cookies import CookieCarrier


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_redis_client() -> "Redis":
    """Get Redis client singleton (app-scoped).

    The connection pool is shared across the application and closed in the
    application lifespan.

    Returns:
        redis.asyncio.Redis client (responses decoded to str).
    """
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
        socket_keepalive=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_cache() -> "RedisAdapter":
    """Get cache adapter singleton (app-scoped).

    Returns:
        RedisAdapter wrapping the shared Redis client.

    Usage:
        # Presentation Layer (FastAPI Depends)
        cache: RedisAdapter = Depends(get_cache)
    """
    from src.infrastructure.cache import RedisAdapter

    return RedisAdapter(redis_client=get_redis_client())


@lru_cache()
def get_cache_keys() -> "CacheKeys":
    """Get key layout singleton (``user:{username}``, ``session:{token}``)."""
    from src.infrastructure.cache import CacheKeys

    return CacheKeys(prefix=settings.cache_key_prefix)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns Pbkdf2PasswordService configured with the provisioning defaults
    (iterations and digest for new hashes; stored records carry their own).
    """
    from src.infrastructure.security import Pbkdf2PasswordService

    return Pbkdf2PasswordService(
        iterations=settings.pbkdf2_iterations,
        digest=settings.pbkdf2_digest,
    )


@lru_cache()
def get_trial_token_service() -> "TrialTokenProtocol":
    """Get trial token service singleton (app-scoped).

    Returns TrialTokenService signing with ``TRIAL_SECRET_KEY``.
    """
    from src.infrastructure.security import TrialTokenService

    return TrialTokenService(
        settings.trial_secret_key,
        ttl_seconds=settings.trial_ttl_seconds,
    )


@lru_cache()
def get_extraction_gateway() -> "ExtractionGatewayProtocol":
    """Get extraction gateway singleton (app-scoped).

    The gateway holds configuration only; an HTTP client is opened per call.
    """
    from src.infrastructure.extraction import OpenAIExtractionGateway

    return OpenAIExtractionGateway(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model=settings.openai_model,
        timeout=settings.extraction_timeout_seconds,
        max_text_chars=settings.max_doc_text_chars,
    )


@lru_cache()
def get_cookie_carrier() -> "CookieCarrier":
    """Get session/trial cookie carrier singleton (app-scoped)."""
    from src.presentation.api.v1.cookies import CookieCarrier

    return CookieCarrier(
        session_name=settings.session_cookie_name,
        trial_name=settings.trial_cookie_name,
        secure=settings.cookie_secure,
    )
