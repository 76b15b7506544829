"""Signed trial counter token service (adapter).

Implements TrialTokenProtocol using PyJWT with HMAC-SHA256.

The anonymous trial counter lives in the caller's ``trial`` cookie. The
value is a compact JWT so that the count cannot be edited without the
server key; it can still be dropped (the caller then starts again at zero),
which is why the trial limit is advisory and not a security boundary.

Claims:
    - cnt: Number of consumed trial uses
    - iat: Issued at (epoch seconds)
    - exp: Expires at (issued + trial TTL)
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt
import structlog
from jwt.exceptions import InvalidTokenError

from src.domain.value_objects import TrialState

logger = structlog.get_logger(__name__)

# Trial cookie lifetime default (7 days in seconds)
DEFAULT_TRIAL_TTL = 7 * 24 * 60 * 60


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TrialTokenService:
    """Encode/decode the caller-held trial counter.

    Usage:
        from src.core.container import get_trial_token_service

        trial_tokens = get_trial_token_service()
        state = trial_tokens.read(request.cookies.get("trial"))
        token = trial_tokens.issue(state.incremented())
    """

    def __init__(
        self,
        secret_key: str,
        *,
        ttl_seconds: int = DEFAULT_TRIAL_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize trial token service.

        Args:
            secret_key: HMAC-SHA256 signing key (at least 32 bytes).
            ttl_seconds: Token lifetime in seconds.
            clock: Returns the current UTC time.

        Raises:
            ValueError: If secret_key is too short or ttl_seconds not positive.
        """
        if len(secret_key) < 32:
            msg = "Trial token secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if ttl_seconds <= 0:
            msg = "Trial token TTL must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._algorithm = "HS256"

    @property
    def ttl_seconds(self) -> int:
        """Token lifetime in seconds (also used as cookie Max-Age)."""
        return self._ttl_seconds

    def read(self, token: str | None) -> TrialState:
        """Decode a trial token.

        Fail-open: absent, malformed, badly signed, expired or negative
        tokens all read as an empty trial state, so new visitors get the
        trial.

        Args:
            token: Raw cookie value (may be None).

        Returns:
            TrialState carried by the token.
        """
        if not token:
            return TrialState.empty()

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "require": ["cnt", "exp"],
                    # Expiry is checked against the injected clock below
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)
            if expires_at <= self._clock():
                return TrialState.empty()
            return TrialState(int(payload["cnt"]))
        except (InvalidTokenError, TypeError, ValueError, OverflowError) as e:
            logger.debug("trial_token_unreadable", error_type=type(e).__name__)
            return TrialState.empty()

    def issue(self, state: TrialState) -> str:
        """Encode a trial state into a fresh signed token.

        Args:
            state: Trial state to carry.

        Returns:
            Compact JWT string.
        """
        now = self._clock()
        payload = {
            "cnt": state.count,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self._ttl_seconds)).timestamp()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token
