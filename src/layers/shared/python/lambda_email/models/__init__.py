"""Request, message and response models."""

from lambda_email.models.email import (
    DEFAULT_BODY,
    DEFAULT_SUBJECT,
    EmailMessage,
    EmailRequest,
    SendEmailResponse,
    SendResult,
)

__all__ = [
    "DEFAULT_BODY",
    "DEFAULT_SUBJECT",
    "EmailMessage",
    "EmailRequest",
    "SendEmailResponse",
    "SendResult",
]
