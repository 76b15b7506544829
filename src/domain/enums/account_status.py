"""Credential record lifecycle states.

Usage:
    from src.domain.enums import AccountStatus

    if record.status is AccountStatus.ACTIVE:
        ...
"""

from enum import Enum


class AccountStatus(str, Enum):
    """Credential record lifecycle states.

    String Enum:
        Inherits from str so values round-trip through the stored JSON.

    States:
        ACTIVE: Record may authenticate.
        DISABLED: Record must never authenticate.
    """

    ACTIVE = "active"
    DISABLED = "disabled"

    @classmethod
    def parse(cls, value: object) -> "AccountStatus":
        """Parse a stored status value.

        A missing value means ACTIVE (records provisioned before status
        existed). Any unrecognised value is treated as DISABLED.

        Args:
            value: Raw status from the stored record.

        Returns:
            AccountStatus: Parsed status.
        """
        if value is None:
            return cls.ACTIVE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DISABLED
