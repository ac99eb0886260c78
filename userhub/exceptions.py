"""Custom exceptions for UserHub.

Every business error carries a human-readable message and an optional
details dict. The Flask error handlers in main.py turn them into JSON
responses of the form:

    {"error": {"type": "<ClassName>", "message": "...", "details": {...}}}
"""


class UserHubError(Exception):
    """Base exception for all UserHub errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ResourceNotFound(UserHubError):
    """Requested resource does not exist."""


class ValidationError(UserHubError):
    """Request data failed validation."""


class AuthenticationError(UserHubError):
    """Caller could not be authenticated."""


class InvalidCredentials(AuthenticationError):
    """Unknown email or wrong password.

    Both cases use the same message so the response does not reveal
    which emails are registered.
    """

    def __init__(self, message: str = "Invalid credentials", details: dict | None = None):
        super().__init__(message, details)


class AccountDisabled(AuthenticationError):
    """Account exists but has been deactivated."""

    def __init__(self, message: str = "Account is disabled", details: dict | None = None):
        super().__init__(message, details)


class Forbidden(UserHubError):
    """Authenticated caller is not allowed to act on the resource."""


class DuplicateEmail(UserHubError):
    """A user with the given email already exists."""

    def __init__(self, message: str = "Email already exists", details: dict | None = None):
        super().__init__(message, details)
