"""Credential repository protocol (read side of the credential store).

Records are written out-of-band by the provisioning tool; the service only
ever looks them up by username.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import CredentialRecord


class CredentialRepository(Protocol):
    """Read-only credential store.

    Key Pattern:
        - user:{username} -> credential record JSON

    Example:
        >>> class RedisCredentialRepository:
        ...     async def find_by_username(self, username: str):
        ...         ...
    """

    async def find_by_username(
        self, username: str
    ) -> Result[CredentialRecord | None, DomainError]:
        """Look up a credential record.

        Args:
            username: Account key.

        Returns:
            Success(CredentialRecord) if present and well-formed.
            Success(None) if absent or undecodable.
            Failure(DomainError) if the store itself failed.
        """
        ...
