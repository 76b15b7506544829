"""Error response builder.

Converts domain errors into the flat JSON error body:

    {"error": "<code>", "hint": "...", "detail": "..."}

``hint`` is present for quota errors, ``detail`` for input, upstream and
internal errors. Authentication errors carry the public code only.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
    STATUS_BY_CODE: ErrorCode -> HTTP status table
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, QuotaError
from src.domain.errors import ExtractionError
from src.presentation.api.middleware.trace_middleware import get_trace_id

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.MISSING_FIELDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TOO_MANY_PAGES: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_DOCUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_EXPIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.TRIAL_EXHAUSTED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.TRIAL_ONE_PAGE_ONLY: status.HTTP_403_FORBIDDEN,
    ErrorCode.UPSTREAM_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.UPSTREAM_TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    ErrorCode.CACHE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Internal codes never leave the process under their own name
_PUBLIC_CODE: dict[ErrorCode, ErrorCode] = {
    ErrorCode.CACHE_ERROR: ErrorCode.SERVER_ERROR,
}


class ErrorResponseBuilder:
    """Build JSON error responses from domain errors.

    Example:
        >>> error = QuotaError(
        ...     code=ErrorCode.TRIAL_EXHAUSTED,
        ...     message="Trial limit reached",
        ...     hint="Trial limit reached. Please login to continue.",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(error)
        >>> response.status_code
        429
    """

    @staticmethod
    def from_domain_error(error: DomainError) -> JSONResponse:
        """Convert a DomainError to a JSON response.

        Args:
            error: Failure value from a handler.

        Returns:
            JSONResponse with the mapped status code.
        """
        status_code = STATUS_BY_CODE.get(
            error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        public_code = _PUBLIC_CODE.get(error.code, error.code)
        content: dict[str, Any] = {"error": public_code.value}

        match error:
            case QuotaError(hint=hint) if hint:
                content["hint"] = hint
            case AuthenticationError():
                pass
            case ExtractionError():
                content["detail"] = error.upstream_body or error.message
                if error.upstream_status is not None:
                    content["upstream_status"] = error.upstream_status
            case _:
                content["detail"] = error.message

        return ErrorResponseBuilder.build(status_code, content)

    @staticmethod
    def from_code(
        code: ErrorCode, status_code: int, detail: str | None = None
    ) -> JSONResponse:
        """Build a response from a bare code (framework-level errors)."""
        content: dict[str, Any] = {"error": code.value}
        if detail:
            content["detail"] = detail
        return ErrorResponseBuilder.build(status_code, content)

    @staticmethod
    def build(status_code: int, content: dict[str, Any]) -> JSONResponse:
        trace_id = get_trace_id()
        return JSONResponse(
            status_code=status_code,
            content=content,
            headers={"X-Trace-Id": trace_id} if trace_id else None,
        )
