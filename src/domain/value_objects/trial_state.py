"""Trial state value object.

The anonymous trial counter is owned by the caller (carried in a signed
cookie) and never persisted server-side. This value object holds the pure
counting rules; encoding and signing live in the infrastructure layer.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrialState:
    """Number of anonymous extractions already consumed.

    Attributes:
        count: Non-negative number of consumed trial uses.

    Example:
        >>> state = TrialState.empty()
        >>> state.incremented().incremented().count
        2
        >>> TrialState(3).exceeded(limit=3)
        True
    """

    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("Trial count cannot be negative")

    @classmethod
    def empty(cls) -> "TrialState":
        """Trial state of a caller with no (or an unreadable) trial cookie."""
        return cls(0)

    def exceeded(self, limit: int) -> bool:
        """Return True when no trial uses remain (``count >= limit``)."""
        return self.count >= limit

    def incremented(self) -> "TrialState":
        """Return the state after one more trial use."""
        return TrialState(self.count + 1)
