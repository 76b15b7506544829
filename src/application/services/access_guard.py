"""Access guard for the extraction endpoint.

Decides, per request, whether a caller may run an extraction and under
which page quota:

1. SessionCheck: a live session authorizes with the global page ceiling.
2. TrialCheck: otherwise the trial counter is read; an exhausted trial is
   rejected, anything else authorizes one page and carries the next count.
3. Payload validation for authorized callers:
   - no images and no text -> EMPTY_DOCUMENT (400)
   - more images than the ceiling (any mode) -> TOO_MANY_PAGES (400)
   - trial mode and more than one image -> TRIAL_ONE_PAGE_ONLY (403)

Nothing is persisted. A decision never mutates the caller's carriers; the
next trial token is only produced on request via ``next_trial_token``.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError, QuotaError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Session
from src.domain.enums import AccessMode
from src.domain.protocols import (
    LoggerProtocol,
    SessionStoreProtocol,
    TrialTokenProtocol,
)
from src.domain.value_objects import TrialState

TRIAL_EXHAUSTED_HINT = "Trial limit reached. Please login to continue."


@dataclass(frozen=True, slots=True, kw_only=True)
class Authorized:
    """Caller may proceed.

    Attributes:
        mode: SESSION or TRIAL.
        max_pages: Page ceiling for this request.
        session: Live session (session mode only).
        next_trial: Trial state to hand back on success (trial mode only).
    """

    mode: AccessMode
    max_pages: int
    session: Session | None = None
    next_trial: TrialState | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Rejected:
    """Caller may not proceed; no carrier changes."""

    error: QuotaError


type AccessDecision = Authorized | Rejected


class AccessGuard:
    """Compose the session store and trial counter into one decision.

    Example:
        >>> decision = await guard.evaluate(session_token, trial_token)
        >>> match decision:
        ...     case Rejected(error=error):
        ...         return Failure(error=error)
        ...     case Authorized() as authorized:
        ...         guard.validate_payload(authorized, image_count=1, has_text=False)
    """

    def __init__(
        self,
        session_store: SessionStoreProtocol,
        trial_tokens: TrialTokenProtocol,
        logger: LoggerProtocol,
        *,
        trial_limit: int = 3,
        trial_max_pages: int = 1,
        max_pages: int = 10,
    ) -> None:
        """Initialize access guard.

        Args:
            session_store: Session lookups.
            trial_tokens: Trial counter codec.
            logger: Structured logger.
            trial_limit: Trial uses allowed per caller.
            trial_max_pages: Page ceiling for trial requests.
            max_pages: Global page ceiling.
        """
        self._session_store = session_store
        self._trial_tokens = trial_tokens
        self._logger = logger
        self._trial_limit = trial_limit
        self._trial_max_pages = trial_max_pages
        self._max_pages = max_pages

    async def evaluate(
        self, session_token: str | None, trial_token: str | None
    ) -> AccessDecision:
        """Run SessionCheck then TrialCheck.

        Args:
            session_token: Session cookie value.
            trial_token: Trial cookie value.

        Returns:
            Authorized(session), Authorized(trial) or Rejected.
        """
        session = await self._session_store.lookup(session_token)
        if session is not None:
            return Authorized(
                mode=AccessMode.SESSION,
                max_pages=self._max_pages,
                session=session,
            )

        trial = self._trial_tokens.read(trial_token)
        if trial.exceeded(self._trial_limit):
            self._logger.info("trial_exhausted", trial_count=trial.count)
            return Rejected(
                error=QuotaError(
                    code=ErrorCode.TRIAL_EXHAUSTED,
                    message="Trial limit reached",
                    hint=TRIAL_EXHAUSTED_HINT,
                )
            )

        return Authorized(
            mode=AccessMode.TRIAL,
            max_pages=self._trial_max_pages,
            next_trial=trial.incremented(),
        )

    def validate_payload(
        self, decision: Authorized, *, image_count: int, has_text: bool
    ) -> Result[None, DomainError]:
        """Check the request body against the decision's quota.

        The global ceiling is checked before the trial page limit, so an
        oversized request is reported as TOO_MANY_PAGES in every mode.

        Args:
            decision: Authorized decision from ``evaluate``.
            image_count: Number of page images submitted.
            has_text: Whether non-blank raw text was submitted.

        Returns:
            Success(None) or Failure(ValidationError | QuotaError).
        """
        if image_count == 0 and not has_text:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EMPTY_DOCUMENT,
                    message="Provide at least one page image or document text",
                    field="images_dataurl[]",
                )
            )

        if image_count > self._max_pages:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.TOO_MANY_PAGES,
                    message=f"At most {self._max_pages} pages per request",
                    field="images_dataurl[]",
                    details={"max_pages": self._max_pages, "pages": image_count},
                )
            )

        if decision.mode is AccessMode.TRIAL and image_count > decision.max_pages:
            return Failure(
                error=QuotaError(
                    code=ErrorCode.TRIAL_ONE_PAGE_ONLY,
                    message="Trial requests are limited to one page",
                    hint="Login to extract multi-page invoices.",
                    details={"max_pages": decision.max_pages, "pages": image_count},
                )
            )

        return Success(value=None)

    def next_trial_token(self, decision: Authorized) -> str | None:
        """Encode the trial state to attach to a successful response.

        Returns:
            Signed trial token in trial mode, None in session mode.
        """
        if decision.next_trial is None:
            return None
        return self._trial_tokens.issue(decision.next_trial)

    @property
    def trial_max_age(self) -> int:
        """Trial cookie lifetime in seconds."""
        return self._trial_tokens.ttl_seconds
