"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_cache, get_login_handler, ...

The container is organized into modules by concern:
- infrastructure: settings, Redis, logging, password hashing, trial tokens,
  gateway, cookie carrier
- repositories: Credential repository and session store
- auth_handlers: Login/logout handler factories
- extraction_handlers: Access guard and extraction handler factories
"""

# Settings
from src.core.config import get_settings

# Infrastructure services
from src.core.container.infrastructure import (
    get_cache,
    get_cache_keys,
    get_cookie_carrier,
    get_extraction_gateway,
    get_logger,
    get_password_service,
    get_redis_client,
    get_trial_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_credential_repository,
    get_session_store,
)

# Auth handlers
from src.core.container.auth_handlers import get_login_handler, get_logout_handler

# Extraction handlers
from src.core.container.extraction_handlers import (
    get_access_guard,
    get_extract_invoice_handler,
)

__all__ = [
    # Infrastructure
    "get_cache",
    "get_cache_keys",
    "get_cookie_carrier",
    "get_extraction_gateway",
    "get_logger",
    "get_password_service",
    "get_redis_client",
    "get_settings",
    "get_trial_token_service",
    # Repositories
    "get_credential_repository",
    "get_session_store",
    # Auth handlers
    "get_login_handler",
    "get_logout_handler",
    # Extraction handlers
    "get_access_guard",
    "get_extract_invoice_handler",
]
