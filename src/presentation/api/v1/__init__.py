"""API routers.

Endpoints:
    POST /api/login    - Create session
    POST /api/logout   - Destroy session
    POST /api/extract  - Invoice extraction (session or trial)
"""

from fastapi import APIRouter

from src.presentation.api.v1.auth import router as auth_router
from src.presentation.api.v1.extract import router as extract_router

# Combined router under the public /api prefix
api_router = APIRouter(prefix="/api")

api_router.include_router(auth_router)
api_router.include_router(extract_router)

__all__ = ["api_router", "auth_router", "extract_router"]
