"""Error responses and global exception handlers."""

from src.presentation.api.v1.errors.error_response_builder import (
    STATUS_BY_CODE,
    ErrorResponseBuilder,
)
from src.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["STATUS_BY_CODE", "ErrorResponseBuilder", "register_exception_handlers"]
