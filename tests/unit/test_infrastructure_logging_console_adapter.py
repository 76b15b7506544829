"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- Level methods forward event names and context
- error() folds exception details into the context
- bind() returns a new adapter
- configure_structlog() picks the renderer and level filter

structlog is patched, so no real pipeline is configured.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_structlog,
)

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("login_succeeded", username="acme")

            getattr(mock_logger, level).assert_called_once_with(
                "login_succeeded", username="acme"
            )

    def test_error_with_exception_adds_type_and_message(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("unhandled_exception", error=RuntimeError("boom"), path="/x")

            mock_logger.error.assert_called_once_with(
                "unhandled_exception",
                path="/x",
                error_type="RuntimeError",
                error_message="boom",
            )

    def test_error_without_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error("extraction_failed", error_code="upstream_error")

            mock_logger.error.assert_called_once_with(
                "extraction_failed", error_code="upstream_error"
            )

    def test_bind_returns_new_adapter(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="t-1")
            bound.info("extraction_started")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(trace_id="t-1")
            bound_logger.info.assert_called_once_with("extraction_started")
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConfigureStructlog:
    """Test pipeline configuration."""

    def test_json_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            configure_structlog(use_json=True, level="WARNING")

            kwargs = mock_structlog.configure.call_args.kwargs
            assert (
                kwargs["processors"][-1]
                is mock_structlog.processors.JSONRenderer.return_value
            )
            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.WARNING
            )

    def test_console_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            configure_structlog(use_json=False)

            kwargs = mock_structlog.configure.call_args.kwargs
            assert (
                kwargs["processors"][-1]
                is mock_structlog.dev.ConsoleRenderer.return_value
            )
            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.INFO
            )

    def test_unknown_level_defaults_to_info(self):
        with patch(STRUCTLOG) as mock_structlog:
            configure_structlog(use_json=True, level="chatty")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.INFO
            )
