"""Custom exception classes for the email Lambda."""


class LambdaEmailError(Exception):
    """Base exception for all email Lambda errors."""

    def __init__(
        self,
        message: str,
        error: str | None = None,
        error_code: str | None = None,
        status_code: int = 500,
    ):
        """Initialize LambdaEmailError.

        Args:
            message: Human-readable error message.
            error: Diagnostic detail returned alongside the message.
            error_code: Machine-readable error code.
            status_code: HTTP status code for API responses.
        """
        super().__init__(message)
        self.message = message
        self.error = error or message
        self.error_code = error_code or "INTERNAL_ERROR"
        self.status_code = status_code

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API response."""
        return {
            "message": self.message,
            "error": self.error,
            "error_code": self.error_code,
        }


class ValidationError(LambdaEmailError):
    """Raised when a required request field is missing or a field has the wrong type."""

    def __init__(
        self,
        message: str = "Validation failed",
        error: str | None = None,
        field: str | None = None,
    ):
        """Initialize ValidationError.

        Args:
            message: Error message.
            error: Diagnostic detail.
            field: Name of the offending request field.
        """
        self.field = field
        super().__init__(
            message=message,
            error=error,
            error_code="VALIDATION_ERROR",
            status_code=400,
        )


class MalformedInputError(LambdaEmailError):
    """Raised when the request body cannot be parsed."""

    def __init__(
        self,
        message: str = "Invalid request body",
        error: str = "Request body must be a valid JSON object",
    ):
        """Initialize MalformedInputError."""
        super().__init__(
            message=message,
            error=error,
            error_code="MALFORMED_INPUT",
            status_code=400,
        )


class ProviderError(LambdaEmailError):
    """Raised when the email provider call fails."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict | None = None,
    ):
        """Initialize ProviderError.

        Args:
            message: Description of the failure.
            code: Provider or local error code (e.g. SES error code).
            details: Additional error details for logging.
        """
        self.code = code
        self.details = details or {}
        super().__init__(
            message=message,
            error_code="PROVIDER_ERROR",
            status_code=500,
        )
