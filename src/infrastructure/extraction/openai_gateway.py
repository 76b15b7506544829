"""Extraction gateway for the OpenAI Responses API.

Implements ExtractionGatewayProtocol. One outbound call per extraction,
never retried; every call is bounded by a timeout.

Endpoint:
    POST {base_url}/responses

Error mapping:
    - httpx.TimeoutException or the overall deadline -> UPSTREAM_TIMEOUT
    - connection errors, non-2xx status, malformed body -> UPSTREAM_ERROR
      (upstream status and a truncated body are kept for diagnostics)
"""

import asyncio
import json
from typing import Any

import httpx
import structlog

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import ExtractionError
from src.infrastructure.extraction.invoice_schema import (
    SYSTEM_PROMPT,
    USER_INSTRUCTIONS,
    response_format,
)

logger = structlog.get_logger(__name__)

# Upstream bodies are truncated to this many characters in error details
_MAX_ERROR_BODY = 2000


class OpenAIExtractionGateway:
    """HTTP client for structured invoice extraction.

    Thread-safe: uses an httpx.AsyncClient per call (no shared state).

    Attributes:
        base_url: API base URL.
        model: Model name.
        timeout: Request timeout in seconds.

    Example:
        >>> gateway = OpenAIExtractionGateway(api_key="sk-...", timeout=60.0)
        >>> result = await gateway.extract(["data:image/png;base64,..."], "")
        >>> match result:
        ...     case Success(value=invoice):
        ...         print(invoice["amounts"]["total_amount"])
        ...     case Failure(error=error):
        ...         print(error.code.value)
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        timeout: float = 60.0,
        max_text_chars: int = 10_000,
    ) -> None:
        """Initialize extraction gateway.

        Args:
            api_key: Bearer API key.
            base_url: API base URL.
            model: Model name.
            timeout: Deadline for the whole call in seconds (connect, upload
                and download together).
            max_text_chars: Raw text is truncated to this many characters.

        Raises:
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            msg = "Extraction timeout must be positive"
            raise ValueError(msg)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = timeout
        self._max_text_chars = max_text_chars

    async def extract(
        self, images: list[str], text: str
    ) -> Result[dict[str, Any], ExtractionError]:
        """Run one structured extraction.

        Args:
            images: Page images as data URLs.
            text: Raw document text (may be empty).

        Returns:
            Success(dict): Invoice JSON object.
            Failure(ExtractionError): UPSTREAM_TIMEOUT or UPSTREAM_ERROR.
        """
        logger.debug(
            "extraction_request_started",
            image_count=len(images),
            text_chars=len(text),
            model=self._model,
        )

        try:
            async with (
                asyncio.timeout(self._timeout),
                httpx.AsyncClient(timeout=self._timeout) as client,
            ):
                response = await client.post(
                    f"{self._base_url}/responses",
                    headers=self._build_headers(),
                    json=self.build_payload(images, text),
                )
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.warning("extraction_api_timeout", error=str(e) or "deadline")
            return Failure(
                error=ExtractionError(
                    code=ErrorCode.UPSTREAM_TIMEOUT,
                    message=f"Extraction API did not respond within {self._timeout:g}s",
                )
            )
        except httpx.RequestError as e:
            logger.warning("extraction_api_connection_error", error=str(e))
            return Failure(
                error=ExtractionError(
                    code=ErrorCode.UPSTREAM_ERROR,
                    message=f"Failed to connect to extraction API: {e}",
                )
            )

        return self._handle_response(response)

    def build_payload(self, images: list[str], text: str) -> dict[str, Any]:
        """Build the Responses API request body.

        Args:
            images: Page images as data URLs.
            text: Raw document text.

        Returns:
            JSON-serializable request body.
        """
        content: list[dict[str, Any]] = [
            {"type": "input_text", "text": USER_INSTRUCTIONS}
        ]
        content.extend({"type": "input_image", "image_url": image} for image in images)
        if text.strip():
            content.append(
                {
                    "type": "input_text",
                    "text": "Raw extracted text:\n" + text[: self._max_text_chars],
                }
            )

        return {
            "model": self._model,
            "temperature": 0,
            "input": [
                {
                    "role": "system",
                    "content": [{"type": "input_text", "text": SYSTEM_PROMPT}],
                },
                {"role": "user", "content": content},
            ],
            "text": {"format": response_format()},
        }

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _handle_response(
        self, response: httpx.Response
    ) -> Result[dict[str, Any], ExtractionError]:
        """Map the upstream response to a Result."""
        if not response.is_success:
            body = response.text[:_MAX_ERROR_BODY]
            logger.warning(
                "extraction_api_error_status",
                status_code=response.status_code,
            )
            return Failure(
                error=ExtractionError(
                    code=ErrorCode.UPSTREAM_ERROR,
                    message=f"Extraction API error: {response.status_code}",
                    upstream_status=response.status_code,
                    upstream_body=body,
                )
            )

        try:
            data = response.json()
            output_text = _output_text(data)
            invoice = json.loads(output_text)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("extraction_api_malformed_response", error=str(e))
            return self._malformed(response, str(e))

        if not isinstance(invoice, dict):
            return self._malformed(response, "Model output is not a JSON object")

        return Success(value=invoice)

    @staticmethod
    def _malformed(response: httpx.Response, reason: str) -> Failure[ExtractionError]:
        return Failure(
            error=ExtractionError(
                code=ErrorCode.UPSTREAM_ERROR,
                message=f"Malformed extraction response: {reason}",
                upstream_status=response.status_code,
                upstream_body=response.text[:_MAX_ERROR_BODY],
            )
        )


def _output_text(data: Any) -> str:
    """Pull the model's text output out of a Responses API body.

    Prefers the ``output_text`` convenience field, then the first text part
    of ``output[*].content[*]``.

    Raises:
        ValueError: If the body carries no text output.
    """
    if not isinstance(data, dict):
        raise ValueError("Response body is not a JSON object")

    output_text = data.get("output_text")
    if isinstance(output_text, str) and output_text:
        return output_text

    for item in data.get("output") or []:
        for part in item.get("content") or []:
            text = part.get("text")
            if isinstance(text, str) and text:
                return text

    raise ValueError("Response carries no text output")
