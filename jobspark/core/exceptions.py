"""Error taxonomy shared by the service layer and the HTTP boundary."""

from typing import Optional

from fastapi import status


class JobSparkError(Exception):
    """Base error. Carries the HTTP status it maps to at the API boundary."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)


class ValidationError(JobSparkError):
    """Required input is missing."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class UnauthorizedError(JobSparkError):
    """No credential was presented."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized: Token not found"


class ForbiddenError(JobSparkError):
    """A credential was presented but is invalid, expired or tampered."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "Unauthorized: Invalid token"


class NotFoundError(JobSparkError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class ConflictError(JobSparkError):
    """
    Duplicate email on registration.

    Existing clients treat registration of a known email as a success, so
    this maps to 201 rather than 409.
    """

    status_code = status.HTTP_201_CREATED
    message = "User already exists with this email."


class InternalError(JobSparkError):
    """Store or unexpected failure. `detail` holds the underlying message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"
