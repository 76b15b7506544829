"""Trial token protocol: codec between TrialState and the signed cookie value."""

from typing import Protocol

from src.domain.value_objects import TrialState


class TrialTokenProtocol(Protocol):
    """Encode/decode the caller-held trial counter.

    The token is tamper-guarded (signed) but remains caller-owned: a caller
    can always drop it and start again from zero.
    """

    def read(self, token: str | None) -> TrialState:
        """Decode a trial token.

        Returns:
            The carried TrialState; absent, malformed, badly signed or
            expired tokens all read as ``TrialState.empty()``.
        """
        ...

    def issue(self, state: TrialState) -> str:
        """Encode a TrialState into a fresh signed token."""
        ...

    @property
    def ttl_seconds(self) -> int:
        """Token lifetime in seconds (also the cookie Max-Age)."""
        ...
