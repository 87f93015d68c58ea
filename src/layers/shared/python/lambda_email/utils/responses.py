"""API response helper functions."""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel as PydanticBaseModel

from lambda_email.config import get_settings


def get_cors_headers(cors_origin: str | None = None) -> dict:
    """Get CORS headers for the given origin.

    Falls back to the process-wide configured origin.
    """
    return {
        "Access-Control-Allow-Origin": cors_origin or get_settings().cors_allowed_origin,
        "Access-Control-Allow-Headers": "Content-Type,Authorization",
        "Access-Control-Allow-Methods": "OPTIONS,POST",
        "Content-Type": "application/json",
    }


def _json_serializer(obj: Any) -> Any:
    """JSON serializer for objects not serializable by default."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, PydanticBaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def _serialize(data: Any) -> str:
    """Serialize data to JSON string."""
    return json.dumps(data, default=_json_serializer)


def success(data: Any, status_code: int = 200, cors_origin: str | None = None) -> dict:
    """Create a successful API response.

    Args:
        data: Response data (dict or Pydantic model).
        status_code: HTTP status code (default 200).
        cors_origin: Access-Control-Allow-Origin value.

    Returns:
        API Gateway response dict.
    """
    if isinstance(data, PydanticBaseModel):
        body = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        body = data

    return {
        "statusCode": status_code,
        "headers": get_cors_headers(cors_origin),
        "body": _serialize(body),
    }


def error(
    message: str,
    status_code: int = 500,
    detail: str | None = None,
    error_code: str | None = None,
    cors_origin: str | None = None,
) -> dict:
    """Create an error API response.

    Args:
        message: Error message suitable for display.
        status_code: HTTP status code.
        detail: Diagnostic detail, returned as the ``error`` field.
        error_code: Machine-readable error code.
        cors_origin: Access-Control-Allow-Origin value.

    Returns:
        API Gateway response dict.
    """
    body: dict[str, Any] = {
        "message": message,
        "error": detail or "Unknown error",
    }

    if error_code:
        body["error_code"] = error_code

    return {
        "statusCode": status_code,
        "headers": get_cors_headers(cors_origin),
        "body": _serialize(body),
    }


def validation_error(message: str, detail: str, cors_origin: str | None = None) -> dict:
    """Create a 400 response for a missing or invalid request field."""
    return error(
        message=message,
        status_code=400,
        detail=detail,
        error_code="VALIDATION_ERROR",
        cors_origin=cors_origin,
    )


def bad_request(message: str, detail: str, cors_origin: str | None = None) -> dict:
    """Create a 400 response for a request body that could not be parsed."""
    return error(
        message=message,
        status_code=400,
        detail=detail,
        error_code="MALFORMED_INPUT",
        cors_origin=cors_origin,
    )


def server_error(
    detail: str | None = None,
    message: str = "Failed to send email",
    cors_origin: str | None = None,
) -> dict:
    """Create a 500 response for a failed send.

    Args:
        detail: Description of the underlying failure, if any.
        message: Display message.
        cors_origin: Access-Control-Allow-Origin value.

    Returns:
        API Gateway response dict.
    """
    return error(
        message=message,
        status_code=500,
        detail=detail or "Unknown error",
        error_code="PROVIDER_ERROR",
        cors_origin=cors_origin,
    )
