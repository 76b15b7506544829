"""Console logging adapter.

Writes structured logs to stdout using structlog:
- Development: human-readable console renderer with colors
- Testing/CI/Production: one JSON object per line (stdout is collected by
  the hosting platform)

Implements LoggerProtocol structurally; no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_structlog(*, use_json: bool, level: str = "INFO") -> None:
    """Configure the process-wide structlog pipeline.

    Module-level loggers (``structlog.get_logger(__name__)``) in the
    infrastructure layer go through the same pipeline once this has run.

    Args:
        use_json: JSON output when True, colored console output when False.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json (bool): JSON lines when True, colored console when False.
        level (str): Minimum level name.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        configure_structlog(use_json=use_json, level=level)
        self._logger = structlog.get_logger("invoice_extractor")

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error with optional exception details.

        Args:
            message (str): Event name.
            error (Exception | None): Exception; adds error_type and error_message.
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter with bound context (original unchanged)."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
