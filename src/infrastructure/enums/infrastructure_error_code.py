"""Infrastructure-specific error codes.

Internal codes for tracking infrastructure failures. They are mapped to the
public ErrorCode before reaching a caller.

Categories:
- Cache errors (CACHE_*)
- Serialization errors (SERIALIZATION_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Cache errors
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"

    # Serialization errors
    SERIALIZATION_ERROR = "serialization_error"
