"""Core errors package.

Usage:
    from src.core.errors import DomainError, ValidationError, QuotaError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    QuotaError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "AuthenticationError",
    "QuotaError",
]
