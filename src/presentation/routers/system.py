"""System router for non-API endpoints.

Root and health endpoints. Both are side-effect free.
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

system_router = APIRouter(tags=["System"])


@system_router.get("/", response_class=PlainTextResponse)
async def root() -> PlainTextResponse:
    """Point callers at the extraction endpoint (405)."""
    return PlainTextResponse(
        "Use POST /api/extract",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
    )


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check for the hosting platform.

    Returns:
        dict[str, str]: Health status indicator.
    """
    return {"status": "healthy"}
