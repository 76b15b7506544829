"""Extraction router.

Endpoints:
    POST /api/extract - Structured invoice extraction (session or trial)

Body: multipart/form-data (or urlencoded) with repeated ``images_dataurl[]``
fields (one data URL per page, in page order) and an optional ``doc_text``.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.extract_commands import ExtractInvoice
from src.application.commands.handlers import ExtractInvoiceHandler
from src.core.config import Settings
from src.core.container import (
    get_cookie_carrier,
    get_extract_invoice_handler,
    get_settings,
)
from src.core.result import Failure, Success
from src.presentation.api.v1.cookies import CookieCarrier
from src.presentation.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import ErrorResponse
from src.schemas.invoice_schemas import InvoiceResponse

router = APIRouter(tags=["Extraction"])

IMAGES_FIELD = "images_dataurl[]"
TEXT_FIELD = "doc_text"


@router.post(
    "/extract",
    responses={
        200: {"description": "Extracted invoice", "model": InvoiceResponse},
        400: {"description": "Too many pages or empty document", "model": ErrorResponse},
        403: {"description": "Trial allows one page only", "model": ErrorResponse},
        429: {"description": "Trial exhausted", "model": ErrorResponse},
        502: {"description": "Extraction API error", "model": ErrorResponse},
        504: {"description": "Extraction API timeout", "model": ErrorResponse},
    },
    summary="Extract invoice",
    description="Extract seller, invoice, tax and amount fields from page images and/or text.",
)
async def extract_invoice(
    request: Request,
    handler: ExtractInvoiceHandler = Depends(get_extract_invoice_handler),
    cookies: CookieCarrier = Depends(get_cookie_carrier),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Run one extraction.

    The form is parsed here rather than through FastAPI ``Form`` parameters
    so that a single page data URL may exceed Starlette's default 1 MB part
    limit.
    """
    async with request.form(max_part_size=settings.max_form_part_bytes) as form:
        images = [
            value
            for value in form.getlist(IMAGES_FIELD)
            if isinstance(value, str) and value
        ]
        text = form.get(TEXT_FIELD)

    result = await handler.handle(
        ExtractInvoice(
            images=images,
            text=text if isinstance(text, str) else "",
            session_token=cookies.session_token(request),
            trial_token=cookies.trial_token(request),
        )
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=outcome):
            response = JSONResponse(content=outcome.invoice)
            if outcome.trial_token and outcome.trial_max_age:
                cookies.set_trial(response, outcome.trial_token, outcome.trial_max_age)
            return response
