"""Business logic services."""

from lambda_email.services.email_service import (
    EmailSender,
    MockEmailSender,
    SesEmailSender,
    build_email_sender,
    get_email_sender,
)

__all__ = [
    "EmailSender",
    "MockEmailSender",
    "SesEmailSender",
    "build_email_sender",
    "get_email_sender",
]
