"""Domain enums.

Available Enums:
    - AccountStatus: Credential record lifecycle (active, disabled)
    - AccessMode: How an extraction request was authorized (session, trial)
"""

from src.domain.enums.access_mode import AccessMode
from src.domain.enums.account_status import AccountStatus

__all__ = [
    "AccessMode",
    "AccountStatus",
]
