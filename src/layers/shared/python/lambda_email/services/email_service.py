"""Email sending via Amazon SES.

Two senders share one interface: ``SesEmailSender`` calls SES, and
``MockEmailSender`` fabricates an accepted send for local development.
The choice is made once per process by ``get_email_sender``.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError
from ulid import ULID

from lambda_email.config import Settings, get_settings
from lambda_email.models.email import EmailMessage, SendResult
from lambda_email.utils.exceptions import ProviderError

logger = structlog.get_logger()


def _truncate(text: str, limit: int = 50) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class EmailSender(ABC):
    """Sends a built EmailMessage."""

    @abstractmethod
    def send(self, message: EmailMessage) -> SendResult:
        """Send one message.

        Raises:
            ProviderError: If the send fails.
        """


class SesEmailSender(EmailSender):
    """Sender backed by Amazon SES."""

    def __init__(
        self,
        region_name: str = "us-east-1",
        configuration_set: str | None = None,
        client: Any = None,
    ):
        """Initialize the SES sender.

        Args:
            region_name: AWS region for SES.
            configuration_set: Optional SES configuration set for tracking.
            client: Optional pre-built SES client (for testing).
        """
        self.region_name = region_name
        self.configuration_set = configuration_set
        self._client = client

    @property
    def client(self):
        """Get SES client (lazy initialization).

        Returns:
            Boto3 SES client.
        """
        if self._client is None:
            self._client = boto3.client("ses", region_name=self.region_name)
        return self._client

    def build_request(self, message: EmailMessage) -> dict[str, Any]:
        """Build ``send_email`` keyword arguments for a message."""
        kwargs: dict[str, Any] = {
            "Source": message.source,
            "Destination": {"ToAddresses": [message.destination]},
            "Message": {
                "Subject": {"Data": message.subject, "Charset": message.charset},
                "Body": {
                    "Text": {"Data": message.text_body, "Charset": message.charset},
                    "Html": {"Data": message.html_body, "Charset": message.charset},
                },
            },
        }

        if self.configuration_set:
            kwargs["ConfigurationSetName"] = self.configuration_set

        return kwargs

    def send(self, message: EmailMessage) -> SendResult:
        """Send a message through SES.

        Args:
            message: Message to send.

        Returns:
            SendResult with the SES message id.

        Raises:
            ProviderError: If the sender is not configured or SES rejects the call.
        """
        if not message.source:
            raise ProviderError("Sender email address is not configured", code="SENDER_MISSING")

        logger.info(
            "Sending email",
            to=message.destination,
            from_email=message.source,
            subject=_truncate(message.subject),
        )

        try:
            response = self.client.send_email(**self.build_request(message))

        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            error_message = e.response["Error"]["Message"]

            logger.error(
                "SES send failed",
                error_code=error_code,
                error_message=error_message,
                to=message.destination,
            )

            raise ProviderError(
                error_message or f"SES returned {error_code}",
                code=error_code,
                details={"aws_error": error_message},
            ) from e

        except BotoCoreError as e:
            logger.error("SES request failed", error=str(e), to=message.destination)
            raise ProviderError(str(e), code=type(e).__name__) from e

        logger.info(
            "SES response",
            message_id=response["MessageId"],
            request_id=response.get("ResponseMetadata", {}).get("RequestId"),
        )

        return SendResult(message_id=response["MessageId"])


class MockEmailSender(EmailSender):
    """Sender that logs the message and returns a fabricated id."""

    def send(self, message: EmailMessage) -> SendResult:
        """Pretend to send a message. No network call is made."""
        message_id = f"mock-{ULID()}"

        logger.info(
            "Mock email send",
            message_id=message_id,
            from_email=message.source,
            to=message.destination,
            subject=message.subject,
            body=message.text_body,
        )

        return SendResult(message_id=message_id, mocked=True)


def build_email_sender(settings: Settings) -> EmailSender:
    """Create the sender selected by settings.

    Args:
        settings: Runtime settings.

    Returns:
        MockEmailSender in mock mode, otherwise SesEmailSender.
    """
    if settings.use_mock:
        logger.info("Running in mock mode, SES calls are skipped", stage=settings.stage)
        return MockEmailSender()

    return SesEmailSender(
        region_name=settings.region_name,
        configuration_set=settings.configuration_set,
    )


@lru_cache(maxsize=1)
def get_email_sender() -> EmailSender:
    """Get the process-wide sender, created on first use."""
    return build_email_sender(get_settings())
