"""Core shared kernel.

Foundational pieces used by every layer:
- Result types for railway-oriented programming
- Base error classes and machine-readable error codes
- Settings and the dependency container

The core module has NO dependencies on other application layers.
"""

from src.core.errors import (
    AuthenticationError,
    DomainError,
    QuotaError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "QuotaError",
    "Result",
    "Success",
    "ValidationError",
]
