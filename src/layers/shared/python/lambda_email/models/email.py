"""Email request and message models."""

from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field

from lambda_email.config import DeliveryMode, Settings
from lambda_email.utils.serialization import safe_dumps

DEFAULT_SUBJECT = "Test Email from Lambda"
DEFAULT_BODY = "This is a test email sent from AWS Lambda using SES."
CHARSET = "UTF-8"


def wrap_html(text: str) -> str:
    """Wrap plain text in a minimal HTML document. Content is not escaped."""
    return f"<html><body><p>{text}</p></body></html>"


class EmailRequest(PydanticBaseModel):
    """Inbound send-email request body.

    Unknown fields are kept so notify-mode bodies can include them.
    """

    model_config = ConfigDict(extra="allow")

    email: str | None = Field(None, description="Recipient address")
    subject: str | None = Field(None, description="Subject line")
    body: str | None = Field(None, description="Plain text body")

    def resolve_subject(self) -> str:
        """Subject with the default applied."""
        return self.subject or DEFAULT_SUBJECT

    def resolve_body(self, settings: Settings) -> str:
        """Body text with the mode-specific default applied."""
        if self.body:
            return self.body

        if settings.delivery_mode == DeliveryMode.NOTIFY:
            dump = safe_dumps(self.model_dump(exclude_unset=True), indent=2)
            return f"Automated notification from {settings.notification_title}:\n\n{dump}"

        return DEFAULT_BODY


class EmailMessage(PydanticBaseModel):
    """Outbound email, immutable once built."""

    model_config = ConfigDict(frozen=True)

    source: str | None
    destination: str
    subject: str
    text_body: str
    html_body: str
    charset: str = CHARSET

    @classmethod
    def from_request(cls, request: EmailRequest, settings: Settings) -> "EmailMessage":
        """Build the outbound message for a validated request.

        Args:
            request: Request with a non-empty ``email``.
            settings: Runtime settings (sender, delivery mode).

        Returns:
            EmailMessage instance.
        """
        if settings.delivery_mode == DeliveryMode.NOTIFY:
            destination = settings.notify_destination or request.email
        else:
            destination = request.email

        text_body = request.resolve_body(settings)

        return cls(
            source=settings.source_email,
            destination=destination,
            subject=request.resolve_subject(),
            text_body=text_body,
            html_body=wrap_html(text_body),
        )


class SendResult(PydanticBaseModel):
    """Outcome of an accepted send."""

    message_id: str
    mocked: bool = False


class SendEmailResponse(PydanticBaseModel):
    """Success response body."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    message_id: str = Field(..., alias="messageId")
    recipient: str
    delivered_to: str | None = Field(None, alias="deliveredTo")
    note: str | None = None
