"""Common error classes shared by all layers.

Error Types:
- ValidationError: Request input is missing or malformed
- AuthenticationError: Login failed (public reason is collapsed)
- QuotaError: Trial quota exhausted or trial page limit exceeded

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.MISSING_FIELDS,
        message="username and password are required",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure.

    ``code`` is always one of the two public outcomes
    (INVALID_CREDENTIALS or ACCOUNT_EXPIRED). ``reason`` keeps the internal
    cause for logging and is never sent to the caller.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        reason: Internal failure reason (user_not_found, wrong_password, ...).
        details: Additional context.
    """

    reason: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class QuotaError(DomainError):
    """Quota failure, recoverable by logging in.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        hint: Short instruction shown to the caller.
        details: Additional context.
    """

    hint: str | None = None
