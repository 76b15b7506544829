"""Integration tests for OpenAIExtractionGateway with mocked HTTP.

The outbound call is intercepted by pytest-httpx, so request shape and error
mapping are exercised through the real httpx client.
"""

import asyncio
import json

import httpx
import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.extraction import OpenAIExtractionGateway
from src.infrastructure.extraction.invoice_schema import SCHEMA_ID

BASE_URL = "https://api.test.local/v1"
ENDPOINT = f"{BASE_URL}/responses"
PAGE = "data:image/png;base64,iVBORw0KGgo="
INVOICE = {
    "seller": {
        "company_name": "Acme Traders",
        "gstin": "27AAAAA0000A1Z5",
        "address": None,
    },
    "invoice": {"number": "INV-42", "date": "05-03-2025", "transaction_id": None},
    "taxes": [
        {"type": "CGST", "rate_percent": 9, "amount": 9.0},
        {"type": "SGST", "rate_percent": 9, "amount": 9.0},
    ],
    "amounts": {"taxable_amount": 100.0, "total_amount": 118.0},
}


@pytest.fixture
def gateway() -> OpenAIExtractionGateway:
    return OpenAIExtractionGateway(
        api_key="sk-test",
        base_url=BASE_URL + "/",
        model="gpt-test",
        timeout=5.0,
        max_text_chars=20,
    )


@pytest.mark.integration
class TestExtractionSuccess:
    """Test successful responses."""

    async def test_output_text_field(self, gateway, httpx_mock):
        httpx_mock.add_response(
            method="POST", url=ENDPOINT, json={"output_text": json.dumps(INVOICE)}
        )

        result = await gateway.extract([PAGE], "")

        assert result == Success(value=INVOICE)

    async def test_output_content_parts(self, gateway, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            url=ENDPOINT,
            json={
                "output": [
                    {"type": "reasoning", "content": []},
                    {
                        "type": "message",
                        "content": [{"type": "output_text", "text": json.dumps(INVOICE)}],
                    },
                ]
            },
        )

        result = await gateway.extract([PAGE], "")

        assert isinstance(result, Success)
        assert result.value["amounts"]["total_amount"] == 118.0

    async def test_request_shape(self, gateway, httpx_mock):
        httpx_mock.add_response(
            method="POST", url=ENDPOINT, json={"output_text": json.dumps(INVOICE)}
        )

        await gateway.extract([PAGE, PAGE], "Tax Invoice No INV-42 Total 118.00")

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer sk-test"
        body = json.loads(request.content)
        assert body["model"] == "gpt-test"
        assert body["temperature"] == 0
        assert body["text"]["format"]["type"] == "json_schema"
        assert body["text"]["format"]["name"] == SCHEMA_ID
        assert body["text"]["format"]["strict"] is True
        system, user = body["input"]
        assert system["role"] == "system"
        parts = user["content"]
        assert [p["type"] for p in parts] == [
            "input_text",
            "input_image",
            "input_image",
            "input_text",
        ]
        assert parts[1]["image_url"] == PAGE
        assert parts[-1]["text"] == "Raw extracted text:\nTax Invoice No INV-4"

    def test_blank_text_adds_no_text_part(self, gateway):
        payload = gateway.build_payload([PAGE], "   ")

        types = [p["type"] for p in payload["input"][1]["content"]]
        assert types == ["input_text", "input_image"]

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            OpenAIExtractionGateway(api_key="sk-test", timeout=0)


@pytest.mark.integration
class TestExtractionFailures:
    """Test error mapping."""

    async def test_error_status_carries_upstream_details(self, gateway, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            url=ENDPOINT,
            status_code=429,
            text='{"error": {"message": "Rate limit"}}',
        )

        result = await gateway.extract([PAGE], "")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.UPSTREAM_ERROR
        assert result.error.upstream_status == 429
        assert "Rate limit" in result.error.upstream_body

    async def test_error_body_truncated(self, gateway, httpx_mock):
        httpx_mock.add_response(
            method="POST", url=ENDPOINT, status_code=500, text="x" * 5000
        )

        result = await gateway.extract([PAGE], "")

        assert len(result.error.upstream_body) == 2000

    async def test_timeout(self, gateway, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = await gateway.extract([PAGE], "")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.UPSTREAM_TIMEOUT

    async def test_slow_upstream_hits_overall_deadline(self, httpx_mock):
        gateway = OpenAIExtractionGateway(
            api_key="sk-test", base_url=BASE_URL, timeout=0.05
        )

        async def stall(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json={"output_text": json.dumps(INVOICE)})

        httpx_mock.add_callback(stall)

        result = await gateway.extract([PAGE], "")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.UPSTREAM_TIMEOUT

    async def test_connection_error(self, gateway, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("refused"))

        result = await gateway.extract([PAGE], "")

        assert result.error.code is ErrorCode.UPSTREAM_ERROR
        assert result.error.upstream_status is None

    @pytest.mark.parametrize(
        "body",
        [
            {"output_text": "not json at all"},
            {"output_text": "[1, 2, 3]"},
            {"output": []},
            {"unexpected": True},
        ],
    )
    async def test_malformed_body(self, gateway, httpx_mock, body):
        httpx_mock.add_response(method="POST", url=ENDPOINT, json=body)

        result = await gateway.extract([PAGE], "")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.UPSTREAM_ERROR
        assert result.error.upstream_status == 200

    async def test_non_json_body(self, gateway, httpx_mock):
        httpx_mock.add_response(method="POST", url=ENDPOINT, text="<html>oops</html>")

        result = await gateway.extract([PAGE], "")

        assert result.error.code is ErrorCode.UPSTREAM_ERROR
        assert result.error.upstream_body == "<html>oops</html>"
