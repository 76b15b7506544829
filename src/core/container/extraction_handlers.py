"""Extraction handler dependency factories.

Request-scoped access guard and ExtractInvoice handler.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import (
    get_extraction_gateway,
    get_logger,
    get_trial_token_service,
)
from src.core.container.repositories import get_session_store
from src.application.services import AccessGuard
from src.domain.protocols import (
    ExtractionGatewayProtocol,
    LoggerProtocol,
    SessionStoreProtocol,
    TrialTokenProtocol,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import ExtractInvoiceHandler


def get_access_guard(
    session_store: SessionStoreProtocol = Depends(get_session_store),
    trial_tokens: TrialTokenProtocol = Depends(get_trial_token_service),
    logger: LoggerProtocol = Depends(get_logger),
) -> AccessGuard:
    """Get access guard (request-scoped) with configured quotas."""
    return AccessGuard(
        session_store=session_store,
        trial_tokens=trial_tokens,
        logger=logger,
        trial_limit=settings.trial_limit,
        trial_max_pages=settings.trial_max_pages,
        max_pages=settings.max_pages,
    )


def get_extract_invoice_handler(
    access_guard: AccessGuard = Depends(get_access_guard),
    gateway: ExtractionGatewayProtocol = Depends(get_extraction_gateway),
    logger: LoggerProtocol = Depends(get_logger),
) -> "ExtractInvoiceHandler":
    """Get ExtractInvoice command handler (request-scoped)."""
    from src.application.commands.handlers import ExtractInvoiceHandler

    return ExtractInvoiceHandler(
        access_guard=access_guard,
        gateway=gateway,
        logger=logger,
    )
