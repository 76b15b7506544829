"""Global exception handlers for FastAPI application.

- Unhandled exceptions -> 500 {"error": "server_error", "detail": ...}
- Request validation (malformed JSON, wrong types) -> 400 bad_request
- Starlette HTTP exceptions (unknown route, wrong method, bad multipart)
  -> {"error": "not_found" | "method_not_allowed" | "bad_request"}

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.core.enums import ErrorCode
from src.presentation.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)

_CODE_BY_STATUS: dict[int, ErrorCode] = {
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
}


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse (500 Internal Server Error)
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return ErrorResponseBuilder.from_code(
        ErrorCode.SERVER_ERROR,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc) or type(exc).__name__,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a single public code: bad_request."""
    errors = exc.errors()
    detail = str(errors[0].get("msg")) if errors else "Malformed request"
    return ErrorResponseBuilder.from_code(
        ErrorCode.BAD_REQUEST, status.HTTP_400_BAD_REQUEST, detail=detail
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Map framework HTTP errors onto the flat error body."""
    code = _CODE_BY_STATUS.get(exc.status_code)
    if code is not None:
        return ErrorResponseBuilder.from_code(code, exc.status_code)
    if exc.status_code < 500:
        code = ErrorCode.BAD_REQUEST
    else:
        code = ErrorCode.SERVER_ERROR
    return ErrorResponseBuilder.from_code(code, exc.status_code, detail=str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(Exception, generic_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
