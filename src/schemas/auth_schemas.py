"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/login   - Create session
    POST /api/logout  - Destroy session
"""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    Both fields are optional at the schema level so a missing field is
    reported as ``missing_fields`` by the handler rather than as a
    malformed body.
    """

    username: str | None = Field(
        default=None,
        description="Account name (surrounding whitespace ignored)",
        examples=["acme"],
    )
    password: str | None = Field(
        default=None,
        description="Account password",
        examples=["s3cret"],
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "acme", "password": "s3cret"}}
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login (session cookie is set)."""

    ok: bool = Field(default=True)
    username: str = Field(..., description="Authenticated account")


# =============================================================================
# Logout
# =============================================================================


class LogoutResponse(BaseModel):
    """Response schema for logout (always 200)."""

    ok: bool = Field(default=True)


# =============================================================================
# Errors
# =============================================================================


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""

    error: str = Field(..., description="Machine-readable error code")
    hint: str | None = Field(default=None, description="What the caller can do")
    detail: str | None = Field(default=None, description="Diagnostic detail")
