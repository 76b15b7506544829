"""Invoice extraction response schemas.

Documents the extraction result for OpenAPI. Mirrors the strict
``invoice_v1`` JSON schema sent to the extraction API: every leaf is
nullable, and missing values come back as null.
"""

from typing import Literal

from pydantic import BaseModel, Field

TaxType = Literal["CGST", "SGST", "IGST", "CESS", "OTHER"]


class Seller(BaseModel):
    company_name: str | None = None
    gstin: str | None = Field(default=None, description="15-character GSTIN")
    address: str | None = None


class InvoiceDetails(BaseModel):
    number: str | None = None
    date: str | None = Field(default=None, description="Invoice date as printed")
    transaction_id: str | None = None


class TaxLine(BaseModel):
    type: TaxType
    rate_percent: float | None = None
    amount: float | None = None


class Amounts(BaseModel):
    taxable_amount: float | None = None
    total_amount: float | None = None


class InvoiceResponse(BaseModel):
    """Structured invoice returned by POST /api/extract."""

    seller: Seller
    invoice: InvoiceDetails
    taxes: list[TaxLine] = Field(default_factory=list)
    amounts: Amounts
