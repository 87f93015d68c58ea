#!/usr/bin/env python3
"""Invoke the send-email handler in-process with the mock sender.

No AWS credentials are needed; SES calls are skipped.

Usage:
    # Run the canned cases
    python scripts/invoke_local.py

    # Invoke with a custom body
    python scripts/invoke_local.py --body '{"email": "test@example.com"}'
"""

import argparse
import json
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# Mock mode must be set before the handler reads settings
os.environ["USE_MOCK_SES"] = "true"
os.environ.setdefault("SOURCE_EMAIL", "local@example.com")

sys.path.insert(0, str(ROOT / "src" / "layers" / "shared" / "python"))
sys.path.insert(0, str(ROOT / "src" / "handlers"))

from api.send_email import handler  # noqa: E402

TEST_CASES = [
    {
        "name": "Valid email request",
        "body": {"email": "test@example.com", "subject": "Test Email", "body": "This is a test email from local development"},
    },
    {
        "name": "Minimal request (only email)",
        "body": {"email": "minimal@example.com"},
    },
    {
        "name": "Invalid request (missing email)",
        "body": {"subject": "No email provided"},
    },
]


def make_event(body: dict | str | None) -> dict:
    """Build an API Gateway proxy event for POST /send-email."""
    return {
        "httpMethod": "POST",
        "path": "/send-email",
        "resource": "/send-email",
        "headers": {"Content-Type": "application/json"},
        "isBase64Encoded": False,
        "body": body if body is None or isinstance(body, str) else json.dumps(body),
    }


def invoke(name: str, body: dict | str | None) -> int:
    """Invoke the handler once and print the result."""
    print(f"\nTest: {name}")
    print(f"Request: {body if isinstance(body, str) else json.dumps(body, indent=2)}")

    result = handler(make_event(body), None)

    print(f"Status: {result['statusCode']}")
    print(f"Response: {json.dumps(json.loads(result['body']), indent=2)}")
    print("-" * 60)
    return result["statusCode"]


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Invoke the send-email handler locally")
    parser.add_argument("--body", help="Raw JSON request body to send instead of the canned cases")
    args = parser.parse_args()

    if args.body is not None:
        status = invoke("Custom request", args.body)
        sys.exit(0 if status < 500 else 1)

    for case in TEST_CASES:
        invoke(case["name"], case["body"])


if __name__ == "__main__":
    main()
