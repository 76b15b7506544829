"""
Main FastAPI application entry point.

Wires middleware, exception handlers and routers:
- CORSMiddleware: single configured origin, credentials allowed
- TraceMiddleware: X-Trace-Id per request
- UnhandledErrorMiddleware: 500 server_error body for unexpected exceptions
- /api routers (login, logout, extract) and system routes (/, /health)

Run:
    uvicorn src.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_logger, get_redis_client
from src.presentation.api.middleware.error_middleware import UnhandledErrorMiddleware
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import api_router
from src.presentation.api.v1.errors import register_exception_handlers
from src.presentation.routers import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: configure logging
    - Shutdown: close the Redis connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    if get_redis_client.cache_info().currsize:
        await get_redis_client().aclose()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Invoice extraction with login sessions and an anonymous trial quota",
    version=settings.app_version,
    docs_url="/docs" if settings.is_development else None,
    redoc_url=None,
    debug=settings.debug,
    lifespan=lifespan,
)

# Unexpected exceptions become 500 bodies inside the CORS layer
app.add_middleware(UnhandledErrorMiddleware)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# CORS: one origin, cookies allowed (added last so it wraps everything)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.allowed_origin],
    allow_credentials=True,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    max_age=86400,
)

# Register global exception handlers
register_exception_handlers(app)

# Routers
app.include_router(api_router)
app.include_router(system_router)
