"""Utility functions and helpers."""

from lambda_email.utils.exceptions import (
    LambdaEmailError,
    MalformedInputError,
    ProviderError,
    ValidationError,
)
from lambda_email.utils.responses import error, server_error, success, validation_error
from lambda_email.utils.serialization import safe_dumps

__all__ = [
    # Response helpers
    "success",
    "error",
    "server_error",
    "validation_error",
    # Exceptions
    "LambdaEmailError",
    "MalformedInputError",
    "ProviderError",
    "ValidationError",
    # Serialization
    "safe_dumps",
]
