"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging: every call is a short event name plus
key-value context. Request handlers bind ``trace_id`` once and log through
the bound logger.

Security:
    - NEVER log passwords, session tokens, trial tokens or image data URLs.
    - Usernames are fine; internal failure reasons are logged, not returned.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("login_succeeded", username=username)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return a new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...
