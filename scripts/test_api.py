#!/usr/bin/env python3
"""API Testing Script for the send-email endpoint.

This script POSTs canned requests to a deployed endpoint and checks the
status code of each response. It can be used for manual verification and
debugging after a deploy.

Usage:
    # Set environment variables first
    export API_URL="https://your-api-id.execute-api.us-east-1.amazonaws.com/prod"

    # Run all cases
    python scripts/test_api.py

    # Send to a real inbox
    python scripts/test_api.py --email you@example.com
"""

import argparse
import json
import os
import sys
from typing import Any

import httpx

# Configuration from environment
API_URL = os.environ.get("API_URL", "")


class Colors:
    """ANSI color codes for terminal output."""

    GREEN = "\033[92m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    RESET = "\033[0m"
    BOLD = "\033[1m"


def print_success(msg: str) -> None:
    """Print success message in green."""
    print(f"{Colors.GREEN}[OK]{Colors.RESET} {msg}")


def print_error(msg: str) -> None:
    """Print error message in red."""
    print(f"{Colors.RED}[ERROR]{Colors.RESET} {msg}")


def print_info(msg: str) -> None:
    """Print info message in blue."""
    print(f"{Colors.BLUE}[INFO]{Colors.RESET} {msg}")


def print_header(msg: str) -> None:
    """Print section header."""
    print(f"\n{Colors.BOLD}{'=' * 60}{Colors.RESET}")
    print(f"{Colors.BOLD}{msg}{Colors.RESET}")
    print(f"{Colors.BOLD}{'=' * 60}{Colors.RESET}\n")


def build_cases(email: str) -> list[dict[str, Any]]:
    """Canned requests and the status each should produce."""
    return [
        {
            "name": "Valid email request",
            "body": {"email": email, "subject": "Test Email", "body": "This is a test email from the API tester"},
            "expect_status": 200,
        },
        {
            "name": "Minimal request (only email)",
            "body": {"email": email},
            "expect_status": 200,
        },
        {
            "name": "Invalid request (missing email)",
            "body": {"subject": "No email provided"},
            "expect_status": 400,
        },
    ]


class APITester:
    """API testing utility for the send-email endpoint."""

    def __init__(self, api_url: str):
        """Initialize the API tester.

        Args:
            api_url: Base URL of the API stage.
        """
        self.api_url = api_url.rstrip("/")
        self.client = httpx.Client(timeout=30.0)

    def send(self, body: dict, expect_status: int) -> bool:
        """POST one request body and compare the status code.

        Args:
            body: Request body.
            expect_status: Expected status code.

        Returns:
            True if the status matched.
        """
        url = f"{self.api_url}/send-email"
        try:
            response = self.client.post(url, json=body, headers={"Content-Type": "application/json"})
        except httpx.RequestError as e:
            print_error(f"Request failed: {e}")
            return False

        print(f"  Status: {response.status_code}")
        print(f"  Response: {response.text[:500]}")

        if response.status_code != expect_status:
            print_error(f"Expected {expect_status}, got {response.status_code}")
            return False
        return True

    def run_all(self, email: str) -> bool:
        """Run every canned case."""
        passed = True
        for case in build_cases(email):
            print_info(f"Test: {case['name']}")
            print(f"  Request: {json.dumps(case['body'])}")
            if self.send(case["body"], case["expect_status"]):
                print_success(case["name"])
            else:
                passed = False
        return passed


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Send-email API Testing Script")
    parser.add_argument("--api-url", help="API base URL", default=API_URL)
    parser.add_argument("--email", help="Recipient for the success cases", default="success@simulator.amazonses.com")

    args = parser.parse_args()

    # Validate configuration
    if not args.api_url:
        print_error("API_URL not set. Use --api-url or set API_URL environment variable.")
        sys.exit(1)

    print_header("Send-email API Tester")
    print_info(f"API URL: {args.api_url}")

    tester = APITester(args.api_url)
    success = tester.run_all(args.email)

    # Report result
    print_header("Test Results")
    if success:
        print_success("All tests passed!")
        sys.exit(0)
    else:
        print_error("Some tests failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
