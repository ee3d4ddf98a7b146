from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials do not match. Never says which field was wrong."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class UnauthorizedError(AuthenticationError):
    """Raised for a missing, unknown or expired auth token."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class PersistError(UserError):
    """Raised when the posts file could not be written. The mutation is not committed."""

    def __init__(self, message: str = "Failed to save changes, please retry") -> None:
        super().__init__(message)


class NotificationError(UserError):
    """Raised when a notification channel cannot be reached."""


class StorageError(Exception):
    """Raised by the durable storage on read or write failure."""
