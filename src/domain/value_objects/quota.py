"""Account quota value object (informational limits from the credential record)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class Quota:
    """Per-account limits recorded at provisioning time.

    Only the global page ceiling is enforced by the access guard; these
    numbers are carried for display and for external enforcement.

    Attributes:
        max_pages: Pages per extraction allowed by the plan.
        max_files: Files allowed by the plan.
    """

    max_pages: int = 10
    max_files: int = 100

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Quota":
        """Read a stored quota mapping, falling back to defaults per field."""
        if not data:
            return cls()
        defaults = cls()
        return cls(
            max_pages=int(data.get("max_pages", defaults.max_pages)),
            max_files=int(data.get("max_files", defaults.max_files)),
        )

    def to_dict(self) -> dict[str, int]:
        return {"max_pages": self.max_pages, "max_files": self.max_files}
