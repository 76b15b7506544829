"""HTTP request/response schemas (pydantic)."""

from src.schemas.auth_schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
)
from src.schemas.invoice_schemas import InvoiceResponse

__all__ = [
    "ErrorResponse",
    "InvoiceResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
]
