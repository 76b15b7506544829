"""Extraction gateway protocol.

The external document-understanding API is a black box:
``extract(images, text) -> JSON object | ExtractionError``.
"""

from typing import Any, Protocol

from src.core.result import Result
from src.domain.errors import ExtractionError


class ExtractionGatewayProtocol(Protocol):
    """Outbound structured-extraction call (port)."""

    async def extract(
        self, images: list[str], text: str
    ) -> Result[dict[str, Any], ExtractionError]:
        """Run one extraction.

        Args:
            images: Page images as data URLs.
            text: Raw document text (may be empty).

        Returns:
            Success(dict) with the invoice JSON object.
            Failure(ExtractionError) with UPSTREAM_ERROR or UPSTREAM_TIMEOUT.
        """
        ...
