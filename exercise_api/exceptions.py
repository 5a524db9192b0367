"""Custom exceptions shared by all endpoints."""


class ExerciseAPIError(Exception):
    """Base exception for all Exercise API errors."""

    status_code: int = 500

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class InvalidRequestBodyError(ExerciseAPIError):
    """Raised when a JSON request body cannot be decoded into its schema."""

    status_code = 400

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid request body: {reason}",
            code="INVALID_REQUEST_BODY"
        )
        self.reason = reason


class InvalidParametersError(ExerciseAPIError):
    """Raised when query parameters cannot be parsed."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_PARAMETERS")
