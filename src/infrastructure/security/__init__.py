"""Security infrastructure adapters.

- Password hashing and verification (PBKDF2-HMAC)
- Signed trial counter tokens (HS256 JWT)
"""

from src.infrastructure.security.pbkdf2_password_service import Pbkdf2PasswordService
from src.infrastructure.security.trial_token_service import TrialTokenService

__all__ = [
    "Pbkdf2PasswordService",
    "TrialTokenService",
]
