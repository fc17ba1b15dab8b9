"""Application error types mapped to HTTP responses."""

from fastapi import status


class AppError(Exception):
    """Base class for errors with a known HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required request field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """No matching food row exists."""

    status_code = status.HTTP_404_NOT_FOUND


class UpstreamError(AppError):
    """The AI provider call failed."""

    def __init__(self, message: str = "Failed to get response from AI") -> None:
        super().__init__(message)
