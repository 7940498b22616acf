# blog_api/core/errors.py
"""
Error taxonomy for the blog API.

Every domain failure is a BlogAPIError subclass carrying the HTTP status and
a stable error code. Stores and services raise these; the exception handlers
registered in main.py render them as {"detail": {"code", "message"}} so the
caller never sees a stack trace.
"""
from fastapi import status


class BlogAPIError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, code: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if code:
            self.code = code

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class ValidationError(BlogAPIError):
    """A field constraint was violated (400, with per-field messages)."""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Validation Error"

    def __init__(self, errors: list[dict] | None = None, message: str | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_detail(self) -> dict:
        detail = super().to_detail()
        detail["errors"] = self.errors
        return detail


class DuplicateEmailError(BlogAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "EMAIL_EXISTS"
    message = "User with this email already exists"


class MalformedIdError(BlogAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_ID"
    message = "Invalid ID format"


class InvalidCredentialsError(BlogAPIError):
    # Same message for unknown email and wrong password
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_INVALID_CREDENTIALS"
    message = "Invalid email or password"


class MissingTokenError(BlogAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_REQUIRED"
    message = "Access token required"


class InvalidTokenError(BlogAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_INVALID_TOKEN"
    message = "Invalid or expired token"


class ForbiddenError(BlogAPIError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    message = "You are not allowed to modify this resource"


class NotFoundError(BlogAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Resource not found"
