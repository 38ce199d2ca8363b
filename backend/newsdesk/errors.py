"""Domain errors and their HTTP mapping."""

from fastapi import status


class NewsdeskError(Exception):
    """Base error carrying a message that is safe to show to the user."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(NewsdeskError):
    """A required-field check failed before any remote call was made."""

    status_code = status.HTTP_400_BAD_REQUEST


class RemoteCallError(NewsdeskError):
    """The store, a webhook or the auth provider failed."""

    status_code = status.HTTP_502_BAD_GATEWAY


class MalformedRecord(NewsdeskError):
    """A row from the store does not match its schema."""

    status_code = status.HTTP_502_BAD_GATEWAY


class NotFound(NewsdeskError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthRequired(NewsdeskError):
    """No valid session; ``login_url`` points back to the requested path."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str, login_url: str | None = None):
        super().__init__(message)
        self.login_url = login_url


class Forbidden(NewsdeskError):
    status_code = status.HTTP_403_FORBIDDEN


class ConfigurationError(NewsdeskError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
