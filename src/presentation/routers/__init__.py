"""Non-API routers (root, health)."""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
