"""Send-email API handler.

Validates a JSON request, builds the outbound message and hands it to the
process-wide email sender (SES, or the mock sender in local development).
"""

import base64
import json
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from lambda_email.config import DeliveryMode, Settings, get_settings
from lambda_email.models.email import EmailMessage, EmailRequest, SendEmailResponse
from lambda_email.services.email_service import EmailSender, get_email_sender
from lambda_email.utils.exceptions import MalformedInputError, ProviderError, ValidationError
from lambda_email.utils.responses import bad_request, server_error, success, validation_error

logger = structlog.get_logger()

SUCCESS_MESSAGE = "Email sent successfully"
MOCK_SUCCESS_MESSAGE = "Email sent successfully (MOCKED)"
MOCK_NOTE = "This is a mock response for local development. No actual email was sent."


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle send-email requests.

    Routes:
        POST /send-email
    """
    logger.info(
        "Send email request received",
        method=event.get("httpMethod"),
        path=event.get("path"),
        request_id=getattr(context, "aws_request_id", None),
        has_body=bool(event.get("body")),
    )

    return handle(event, get_email_sender(), get_settings())


def handle(event: dict[str, Any], sender: EmailSender, settings: Settings) -> dict:
    """Validate, build and send one email.

    Args:
        event: API Gateway proxy event.
        sender: Email sender to deliver through.
        settings: Runtime settings.

    Returns:
        API Gateway response dict. Always returned, never raised.
    """
    origin = settings.cors_allowed_origin

    try:
        request = parse_request(event)
    except MalformedInputError as e:
        logger.warning("Invalid JSON body", error=e.error)
        return bad_request(e.message, e.error, cors_origin=origin)
    except ValidationError as e:
        logger.warning("Send email request validation failed", field=e.field, error=e.error)
        return validation_error(e.message, e.error, cors_origin=origin)

    try:
        message = EmailMessage.from_request(request, settings)
        result = sender.send(message)

    except ProviderError as e:
        logger.exception("Failed to send email", error_code=e.code, error=e.message)
        return server_error(e.message, cors_origin=origin)
    except Exception as e:
        logger.exception("Send email handler error", error=str(e))
        return server_error(str(e) or None, cors_origin=origin)

    response = SendEmailResponse(
        message=MOCK_SUCCESS_MESSAGE if result.mocked else SUCCESS_MESSAGE,
        message_id=result.message_id,
        recipient=request.email,
        delivered_to=message.destination if settings.delivery_mode == DeliveryMode.NOTIFY else None,
        note=MOCK_NOTE if result.mocked else None,
    )

    logger.info(
        "Email sent",
        message_id=result.message_id,
        recipient=request.email,
        delivered_to=message.destination,
        mocked=result.mocked,
    )

    return success(response, cors_origin=origin)


def parse_request(event: dict[str, Any]) -> EmailRequest:
    """Parse and validate the request body.

    A missing or ``null`` body is treated as an empty object.

    Args:
        event: API Gateway proxy event.

    Returns:
        EmailRequest with a non-empty ``email``.

    Raises:
        MalformedInputError: If the body is not a JSON object.
        ValidationError: If ``email`` is missing or a field has the wrong type.
    """
    body = _load_body(event)

    if not body.get("email"):
        raise ValidationError(
            message="Email address is required",
            error="Missing email field in request body",
            field="email",
        )

    try:
        return EmailRequest.model_validate(body)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(message="Validation failed", error=problems) from e


def _load_body(event: dict[str, Any]) -> dict[str, Any]:
    body_raw = event.get("body")

    if isinstance(body_raw, dict):
        return body_raw

    if event.get("isBase64Encoded") and body_raw:
        try:
            body_raw = base64.b64decode(body_raw, validate=True).decode("utf-8")
        except ValueError as e:
            raise MalformedInputError(error="Request body is not valid base64-encoded UTF-8") from e

    try:
        body = json.loads(body_raw) if body_raw else {}
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise MalformedInputError() from e

    if body is None:
        return {}
    if not isinstance(body, dict):
        raise MalformedInputError()
    return body
