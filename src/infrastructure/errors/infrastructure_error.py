"""Infrastructure layer error types.

Infrastructure errors represent failures of external systems (here: Redis).

Architecture:
- Infrastructure catches exceptions and maps them to DomainError subclasses
- Errors flow as data inside Result types, never raised
- InfrastructureErrorCode keeps the internal cause for logging
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Public ErrorCode.
        message: Human-readable message.
        infrastructure_code: Internal infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Key-value store errors.

    Wraps Redis exceptions.

    Attributes:
        code: Public ErrorCode (CACHE_ERROR).
        message: Human-readable message.
        infrastructure_code: Cache-specific error code.
        details: Additional context (key, operation, original error).
    """

    pass
