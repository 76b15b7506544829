"""Domain entities."""

from src.domain.entities.credential_record import CredentialRecord
from src.domain.entities.session import Session

__all__ = ["CredentialRecord", "Session"]
