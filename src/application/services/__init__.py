"""Application services shared by command handlers."""

from src.application.services.access_guard import (
    AccessDecision,
    AccessGuard,
    Authorized,
    Rejected,
)

__all__ = ["AccessDecision", "AccessGuard", "Authorized", "Rejected"]
