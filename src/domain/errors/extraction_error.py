"""Extraction (upstream model API) error types.

Returned by the extraction gateway inside ``Failure``. The presentation layer
maps UPSTREAM_ERROR to 502 and UPSTREAM_TIMEOUT to 504.

Usage:
    from src.domain.errors import ExtractionError

    return Failure(error=ExtractionError(
        code=ErrorCode.UPSTREAM_ERROR,
        message="Extraction API returned 500",
        upstream_status=500,
        upstream_body="...",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ExtractionError(DomainError):
    """Failure of the single outbound extraction call.

    Attributes:
        code: UPSTREAM_ERROR or UPSTREAM_TIMEOUT.
        message: Human-readable message.
        upstream_status: HTTP status returned upstream, if any.
        upstream_body: Truncated upstream body for diagnostics.
        details: Additional context.
    """

    upstream_status: int | None = None
    upstream_body: str | None = None
