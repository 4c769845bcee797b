"""
Contact form endpoint.

Validates a website form submission and relays it to the company inbox
through Resend. Every failure is answered with a JSON body of the form
{"error": "..."}; nothing escapes this handler.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import json
from typing import Optional
import logging

from investdom.core.config import Settings, get_settings
from investdom.core.email_template import build_contact_message, is_valid_email
from investdom.core.mailer import ResendClient
from investdom.models.contact import ContactSubmission

router = APIRouter()
logger = logging.getLogger(__name__)

CONFIG_ERROR = "Błąd konfiguracji serwera"
MISSING_FIELDS_ERROR = "Wszystkie wymagane pola muszą być wypełnione"
INVALID_EMAIL_ERROR = "Niepoprawny format adresu email"
DELIVERY_ERROR = "Nie udało się wysłać wiadomości. Spróbuj ponownie później."
UNEXPECTED_ERROR = "Wystąpił nieoczekiwany błąd serwera"


def error_response(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    content = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@router.post("/contact")
async def submit_contact(request: Request, settings: Settings = Depends(get_settings)):
    """
    Relay a contact form submission by email.

    Returns:
        200 {"success": true, "messageId": ...} when Resend accepted the email,
        400 for missing fields or a malformed address,
        500 for configuration, delivery or unexpected errors.
    """
    try:
        if not settings.resend_api_key:
            logger.error("RESEND_API_KEY is not configured")
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CONFIG_ERROR)

        payload = await request.json()

        try:
            submission = ContactSubmission.model_validate(payload)
        except ValidationError as e:
            logger.info(f"Rejected malformed contact payload: {e.error_count()} error(s)")
            return error_response(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_ERROR)

        if submission.missing_required():
            return error_response(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_ERROR)

        if not is_valid_email(submission.email):
            return error_response(status.HTTP_400_BAD_REQUEST, INVALID_EMAIL_ERROR)

        message = build_contact_message(
            submission,
            sender=settings.sender_email,
            recipient=settings.effective_contact_email,
        )

        resend = ResendClient(
            settings.resend_api_key,
            base_url=settings.resend_api_url,
            timeout=settings.resend_timeout,
        )
        result = await resend.send(message)

        if result.error:
            logger.error(
                "Resend API error: %s",
                json.dumps(result.error.model_dump(), indent=2, ensure_ascii=False),
            )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                DELIVERY_ERROR,
                details=result.error.summary,
            )

        message_id = result.data.id if result.data else None
        logger.info(f"✅ Contact email sent: {message_id}")

        body = {"success": True}
        if message_id is not None:
            body["messageId"] = message_id
        return body

    except Exception as e:
        logger.exception(f"Unexpected error handling contact form: {str(e)}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR)
