"""Extraction commands (CQRS write operations).

Extraction is a command because a trial caller's quota changes: the
handler returns the next trial token for the response to carry.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, kw_only=True)
class ExtractInvoice:
    """Extract structured invoice data from page images and/or raw text.

    Attributes:
        images: Page images as data URLs (order preserved).
        text: Raw document text (may be empty).
        session_token: Session cookie value, if any.
        trial_token: Trial cookie value, if any.
    """

    images: list[str] = field(default_factory=list)
    text: str = ""
    session_token: str | None = None
    trial_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class ExtractionOutcome:
    """Response from a successful extraction.

    Attributes:
        invoice: Invoice JSON as returned by the extraction API.
        trial_token: Incremented trial token to set (trial callers only).
        trial_max_age: Trial cookie lifetime in seconds.
    """

    invoice: dict[str, Any]
    trial_token: str | None = None
    trial_max_age: int | None = None
