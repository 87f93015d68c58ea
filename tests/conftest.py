"""Pytest configuration and fixtures."""

import json
import os

import pytest

# Set environment variables before imports
os.environ["SOURCE_EMAIL"] = "sender@example.com"
os.environ["STAGE"] = "test"
os.environ["AWS_REGION"] = "us-east-1"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ.pop("USE_MOCK_SES", None)
os.environ.pop("DELIVERY_MODE", None)

SOURCE_EMAIL = "sender@example.com"


@pytest.fixture(autouse=True)
def reset_process_state():
    """Drop cached settings and sender so each test reads its own environment."""
    from lambda_email.config import get_settings
    from lambda_email.services.email_service import get_email_sender

    get_settings.cache_clear()
    get_email_sender.cache_clear()
    yield
    get_settings.cache_clear()
    get_email_sender.cache_clear()


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def ses_client(aws_credentials):
    """Create a mocked SES client with a verified sender identity."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        client = boto3.client("ses", region_name="us-east-1")
        client.verify_email_identity(EmailAddress=SOURCE_EMAIL)
        yield client


@pytest.fixture
def settings():
    """Settings for the default recipient delivery mode."""
    from lambda_email.config import Settings

    return Settings(source_email=SOURCE_EMAIL, region_name="us-east-1")


@pytest.fixture
def api_gateway_event():
    """Create a sample API Gateway event."""
    def _create_event(
        body=None,
        method: str = "POST",
        path: str = "/send-email",
        is_base64: bool = False,
    ):
        if body is None or isinstance(body, str):
            raw_body = body
        else:
            raw_body = json.dumps(body)

        return {
            "httpMethod": method,
            "path": path,
            "resource": "/send-email",
            "pathParameters": None,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": is_base64,
            "body": raw_body,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {},
            "requestContext": {},
        }

    return _create_event


class LambdaContext:
    """Mock Lambda context."""

    def __init__(self):
        self.function_name = "test-function"
        self.memory_limit_in_mb = 256
        self.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789:function:test"
        self.aws_request_id = "test-request-id"

    def get_remaining_time_in_millis(self):
        return 30000


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context."""
    return LambdaContext()
