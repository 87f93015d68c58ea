"""Runtime settings read from the Lambda environment."""

import os
from enum import Enum
from functools import lru_cache

import structlog
from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field

logger = structlog.get_logger()

_TRUTHY = {"1", "true", "yes", "on"}
_MOCK_STAGES = {"local", "development"}


class DeliveryMode(str, Enum):
    """Who receives the outbound email."""

    RECIPIENT = "recipient"
    NOTIFY = "notify"


class Settings(PydanticBaseModel):
    """Email Lambda settings."""

    model_config = ConfigDict(frozen=True)

    source_email: str | None = Field(None, description="Verified SES sender address")
    region_name: str = Field("us-east-1", description="AWS region for SES")
    configuration_set: str | None = Field(None, description="Optional SES configuration set")
    use_mock: bool = Field(False, description="Fabricate sends instead of calling SES")
    stage: str = "prod"
    delivery_mode: DeliveryMode = DeliveryMode.RECIPIENT
    notify_email: str | None = Field(None, description="Destination in notify mode")
    notification_title: str = "Lambda Email Service"
    cors_allowed_origin: str = "*"

    @property
    def notify_destination(self) -> str | None:
        """Address notify-mode emails are delivered to."""
        return self.notify_email or self.source_email

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Settings instance.
        """
        env = os.environ if environ is None else environ

        stage = env.get("STAGE", "prod")
        use_mock = (
            env.get("USE_MOCK_SES", "").strip().lower() in _TRUTHY
            or stage.lower() in _MOCK_STAGES
        )

        raw_mode = env.get("DELIVERY_MODE", DeliveryMode.RECIPIENT.value).strip().lower()
        try:
            delivery_mode = DeliveryMode(raw_mode)
        except ValueError:
            logger.warning("Unknown delivery mode, using recipient", delivery_mode=raw_mode)
            delivery_mode = DeliveryMode.RECIPIENT

        return cls(
            source_email=env.get("SOURCE_EMAIL") or None,
            region_name=env.get("AWS_REGION") or "us-east-1",
            configuration_set=env.get("SES_CONFIGURATION_SET") or None,
            use_mock=use_mock,
            stage=stage,
            delivery_mode=delivery_mode,
            notify_email=env.get("NOTIFY_EMAIL") or None,
            notification_title=env.get("NOTIFICATION_TITLE") or "Lambda Email Service",
            cors_allowed_origin=env.get("CORS_ALLOWED_ORIGIN") or "*",
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get process-wide settings, read once from the environment."""
    return Settings.from_env()
