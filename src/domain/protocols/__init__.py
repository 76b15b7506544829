"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance
(structural typing).

Usage:
    from src.domain.protocols import PasswordHashingProtocol, SessionStoreProtocol
"""

from src.domain.protocols.credential_repository import CredentialRepository
from src.domain.protocols.extraction_protocol import ExtractionGatewayProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.session_store_protocol import SessionStoreProtocol
from src.domain.protocols.trial_token_protocol import TrialTokenProtocol

__all__ = [
    "CredentialRepository",
    "ExtractionGatewayProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "SessionStoreProtocol",
    "TrialTokenProtocol",
]
