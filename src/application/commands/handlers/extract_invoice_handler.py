"""Extract invoice handler.

Flow:
1. Evaluate access (session, then trial)
2. Validate payload against the decision's quota
3. Call the extraction gateway (single attempt)
4. Return Success(ExtractionOutcome) with the next trial token, if any

Rejections and upstream failures return before any trial token is
produced, so a trial use is only charged when the caller gets a result.
"""

from src.application.commands.extract_commands import ExtractInvoice, ExtractionOutcome
from src.application.services.access_guard import AccessGuard, Authorized, Rejected
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import ExtractionGatewayProtocol, LoggerProtocol


class ExtractInvoiceHandler:
    """Handler for ExtractInvoice command."""

    def __init__(
        self,
        access_guard: AccessGuard,
        gateway: ExtractionGatewayProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            access_guard: Per-request access decision.
            gateway: Extraction API client.
            logger: Structured logger.
        """
        self._access_guard = access_guard
        self._gateway = gateway
        self._logger = logger

    async def handle(self, cmd: ExtractInvoice) -> Result[ExtractionOutcome, DomainError]:
        """Handle extraction command.

        Args:
            cmd: ExtractInvoice command.

        Returns:
            Success(ExtractionOutcome) with the invoice JSON.
            Failure(QuotaError): TRIAL_EXHAUSTED or TRIAL_ONE_PAGE_ONLY.
            Failure(ValidationError): TOO_MANY_PAGES or EMPTY_DOCUMENT.
            Failure(ExtractionError): UPSTREAM_ERROR or UPSTREAM_TIMEOUT.
        """
        # Step 1: Evaluate access
        decision = await self._access_guard.evaluate(cmd.session_token, cmd.trial_token)
        match decision:
            case Rejected(error=error):
                return Failure(error=error)
            case Authorized():
                pass

        # Step 2: Validate payload
        validation = self._access_guard.validate_payload(
            decision,
            image_count=len(cmd.images),
            has_text=bool(cmd.text.strip()),
        )
        if isinstance(validation, Failure):
            self._logger.info(
                "extraction_rejected",
                mode=decision.mode.value,
                code=validation.error.code.value,
                pages=len(cmd.images),
            )
            return validation

        username = decision.session.username if decision.session else None
        self._logger.info(
            "extraction_started",
            mode=decision.mode.value,
            username=username,
            pages=len(cmd.images),
            text_chars=len(cmd.text),
        )

        # Step 3: Call extraction gateway
        result = await self._gateway.extract(cmd.images, cmd.text)
        match result:
            case Failure(error=err):
                self._logger.warning(
                    "extraction_failed",
                    mode=decision.mode.value,
                    code=err.code.value,
                    upstream_status=err.upstream_status,
                )
                return Failure(error=err)
            case Success(value=invoice):
                pass

        # Step 4: Attach next trial state
        trial_token = self._access_guard.next_trial_token(decision)
        self._logger.info(
            "extraction_succeeded",
            mode=decision.mode.value,
            username=username,
            trial_count=decision.next_trial.count if decision.next_trial else None,
        )
        return Success(
            value=ExtractionOutcome(
                invoice=invoice,
                trial_token=trial_token,
                trial_max_age=self._access_guard.trial_max_age if trial_token else None,
            )
        )
