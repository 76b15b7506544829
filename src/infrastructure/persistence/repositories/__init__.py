"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the store protocols defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.credential_repository import (
    RedisCredentialRepository,
)
from src.infrastructure.persistence.repositories.session_repository import (
    RedisSessionStore,
)

__all__ = [
    "RedisCredentialRepository",
    "RedisSessionStore",
]
