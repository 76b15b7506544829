"""Machine-readable error codes.

The enum values are the exact strings returned to callers in the ``error``
field of every failure response, so they are part of the public contract.

Categories:
- Input errors (MISSING_FIELDS, BAD_REQUEST, TOO_MANY_PAGES, EMPTY_DOCUMENT)
- Authentication errors (INVALID_CREDENTIALS, ACCOUNT_EXPIRED)
- Quota errors (TRIAL_EXHAUSTED, TRIAL_ONE_PAGE_ONLY)
- Upstream errors (UPSTREAM_ERROR, UPSTREAM_TIMEOUT)
- Infrastructure errors (CACHE_ERROR, SERVER_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes returned to callers."""

    # Input errors
    MISSING_FIELDS = "missing_fields"
    BAD_REQUEST = "bad_request"
    TOO_MANY_PAGES = "too_many_pages"
    EMPTY_DOCUMENT = "empty_document"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_EXPIRED = "account_expired"

    # Quota errors
    TRIAL_EXHAUSTED = "trial_exhausted"
    TRIAL_ONE_PAGE_ONLY = "trial_one_page_only"

    # Upstream (extraction API) errors
    UPSTREAM_ERROR = "upstream_error"
    UPSTREAM_TIMEOUT = "upstream_timeout"

    # Infrastructure errors
    CACHE_ERROR = "cache_error"
    SERVER_ERROR = "server_error"
