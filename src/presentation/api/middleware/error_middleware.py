"""Catch-all for unexpected exceptions.

Registered innermost so the 500 response passes back through TraceMiddleware
and CORSMiddleware. Responses built by Starlette's ServerErrorMiddleware
carry no CORS headers.
"""

from __future__ import annotations

from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.presentation.api.v1.errors.exception_handlers import (
    generic_exception_handler,
)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn any exception raised below it into a 500 server_error body."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await generic_exception_handler(request, exc)
