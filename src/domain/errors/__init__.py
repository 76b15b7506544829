"""Domain errors package.

Usage:
    from src.domain.errors import ExtractionError
"""

from src.domain.errors.extraction_error import ExtractionError

__all__ = ["ExtractionError"]
