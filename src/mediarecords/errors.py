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


class ValidationError(UserError):
    """Raised when user input fails validation."""


class UpstreamError(Exception):
    """Raised when an external service fails.

    The message is logged but never shown to the user.
    """


class MediaUploadError(UpstreamError):
    """Raised when the media host rejects or fails an upload."""
