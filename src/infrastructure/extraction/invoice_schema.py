"""Invoice extraction schema and prompts.

The schema is sent as a strict structured-output format, so every leaf is
present in the response and nullable when the source document does not
show it.
"""

from typing import Any

SCHEMA_ID = "invoice_v1"

TAX_TYPES = ("CGST", "SGST", "IGST", "CESS", "OTHER")


def _nullable(kind: str) -> dict[str, Any]:
    return {"type": [kind, "null"]}


def _object(properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "additionalProperties": False,
        "properties": properties,
        "required": list(properties),
    }


INVOICE_JSON_SCHEMA: dict[str, Any] = _object(
    {
        "seller": _object(
            {
                "company_name": _nullable("string"),
                "gstin": _nullable("string"),
                "address": _nullable("string"),
            }
        ),
        "invoice": _object(
            {
                "number": _nullable("string"),
                "date": _nullable("string"),  # DD-MM-YYYY
                "transaction_id": _nullable("string"),
            }
        ),
        "taxes": {
            "type": "array",
            "items": _object(
                {
                    "type": {"type": "string", "enum": list(TAX_TYPES)},
                    "rate_percent": _nullable("number"),
                    "amount": _nullable("number"),
                }
            ),
        },
        "amounts": _object(
            {
                "taxable_amount": _nullable("number"),
                "total_amount": _nullable("number"),
            }
        ),
    }
)

SYSTEM_PROMPT = """You are an expert invoice parser for Indian GST invoices.
Return ONLY a JSON object that strictly matches the provided JSON schema.
- If a field is not present, set it to null (do not guess).
- Normalize date to DD-MM-YYYY when possible.
- 'seller.company_name' is the SELLER/ISSUER (not the buyer).
- Extract all tax lines (CGST/SGST/IGST/... with rate and amount).
- Choose the grand total for total_amount.
- No text outside the JSON."""

USER_INSTRUCTIONS = """Parse the attached invoice content (images) into the schema.
Prefer explicit labels; if absent, infer from layout, headers, or letterhead.
If multiple totals exist, return the grand total (post-tax). Use null for missing fields."""


def response_format() -> dict[str, Any]:
    """Structured-output format block for the Responses API."""
    return {
        "type": "json_schema",
        "name": SCHEMA_ID,
        "schema": INVOICE_JSON_SCHEMA,
        "strict": True,
    }
