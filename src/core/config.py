"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables. The
Settings instance is built once and handed to components at construction
time by the dependency container; nothing below the container reads the
environment.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Secrets (API key, trial signing key) have no defaults

Usage:
    from src.core.config import settings

    origin = settings.allowed_origin
    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_SUPPORTED_DIGESTS = {"sha1", "sha256", "sha384", "sha512"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Invoice Extractor",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Durable key-value store (credentials and sessions)
    redis_url: str = Field(
        description="Redis connection URL (e.g., redis://host:port/db)",
    )
    cache_key_prefix: str = Field(
        default="",
        description="Optional namespace prefix for user:/session: keys",
    )

    # CORS configuration
    allowed_origin: str = Field(
        description="Single browser origin allowed to call the API with credentials",
    )

    # Extraction API
    openai_api_key: str = Field(
        description="API key for the extraction model provider",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the extraction model API",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Model used for invoice extraction",
    )
    extraction_timeout_seconds: float = Field(
        default=60.0,
        description="Upper bound for a single extraction call in seconds",
    )
    max_doc_text_chars: int = Field(
        default=10_000,
        description="Raw document text is truncated to this many characters",
    )

    # Sessions
    session_ttl_days: int = Field(
        default=30,
        description="Absolute session lifetime in days (no sliding refresh)",
    )
    session_token_bytes: int = Field(
        default=24,
        description="Random bytes of entropy per session token",
    )

    # Trial quota
    trial_secret_key: str = Field(
        description="HMAC key used to sign the trial counter cookie (>= 32 chars)",
    )
    trial_limit: int = Field(
        default=3,
        description="Anonymous extractions allowed before login is required",
    )
    trial_ttl_days: int = Field(
        default=7,
        description="Lifetime of the trial counter cookie in days",
    )
    trial_max_pages: int = Field(
        default=1,
        description="Pages (images) allowed per anonymous extraction",
    )

    # Payload limits
    max_pages: int = Field(
        default=10,
        description="Hard ceiling on pages (images) per extraction in any mode",
    )
    max_form_part_bytes: int = Field(
        default=20 * 1024 * 1024,
        description="Largest single multipart field accepted (one page data URL)",
    )

    # Cookies (credential carriers)
    session_cookie_name: str = Field(
        default="sess",
        description="Cookie carrying the session token",
    )
    trial_cookie_name: str = Field(
        default="trial",
        description="Cookie carrying the signed trial counter",
    )
    cookie_secure: bool = Field(
        default=True,
        description="Mark cookies Secure (required by browsers for SameSite=None)",
    )

    # Password hashing (provisioning defaults; verification reads the record)
    pbkdf2_iterations: int = Field(
        default=120_000,
        description="PBKDF2 iterations for newly provisioned records",
    )
    pbkdf2_digest: str = Field(
        default="sha256",
        description="PBKDF2 HMAC digest for newly provisioned records",
    )

    model_config = SettingsConfigDict(
        # env_file handled by the deployment (not coupled to specific environment)
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("allowed_origin", "openai_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("trial_secret_key")
    @classmethod
    def validate_trial_secret_key(cls, v: str) -> str:
        """
        Require a signing key of at least 256 bits.

        Args:
            v: Signing key.

        Returns:
            str: Validated signing key.

        Raises:
            ValueError: If the key is shorter than 32 characters.
        """
        if len(v) < 32:
            raise ValueError("trial_secret_key must be at least 32 characters")
        return v

    @field_validator("session_token_bytes")
    @classmethod
    def validate_session_token_bytes(cls, v: int) -> int:
        """
        Session tokens need at least 24 bytes of entropy.

        Raises:
            ValueError: If fewer than 24 bytes are configured.
        """
        if v < 24:
            raise ValueError("session_token_bytes must be at least 24")
        return v

    @field_validator(
        "session_ttl_days",
        "trial_limit",
        "trial_ttl_days",
        "trial_max_pages",
        "max_pages",
        "max_form_part_bytes",
        "pbkdf2_iterations",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """
        Reject zero and negative limits.

        Raises:
            ValueError: If the value is not positive.
        """
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("extraction_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        The extraction call must always be bounded.

        Raises:
            ValueError: If the timeout is not positive.
        """
        if v <= 0:
            raise ValueError("extraction_timeout_seconds must be positive")
        return v

    @field_validator("pbkdf2_digest")
    @classmethod
    def validate_digest(cls, v: str) -> str:
        """
        Normalize and check the PBKDF2 digest name.

        Raises:
            ValueError: If the digest is not supported.
        """
        digest = v.lower()
        if digest not in _SUPPORTED_DIGESTS:
            raise ValueError(f"pbkdf2_digest must be one of {sorted(_SUPPORTED_DIGESTS)}")
        return digest

    # Derived values
    @property
    def session_ttl_seconds(self) -> int:
        """Session lifetime in seconds."""
        return self.session_ttl_days * 24 * 60 * 60

    @property
    def trial_ttl_seconds(self) -> int:
        """Trial cookie lifetime in seconds."""
        return self.trial_ttl_days * 24 * 60 * 60

    # Environment check
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env


# Global settings instance (singleton pattern)
settings = get_settings()
