from typing import Optional


class TextAPIError(Exception):
    """Base error for every failure raised by the Text API client."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class CredentialsError(TextAPIError):
    """Application ID or application key missing at construction."""


class ParameterError(TextAPIError):
    """Request parameters rejected before anything is sent."""


class RemoteError(TextAPIError):
    """
    The service answered with a non-success status.

    `message` is taken from the `{"error": ...}` envelope when the body has
    that shape, otherwise it is the raw body text.
    """

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(TextAPIError):
    """A success body could not be decoded into the expected model."""

    def __init__(self, message: str = "invalid response"):
        super().__init__(message)


__all__ = [
    "TextAPIError",
    "CredentialsError",
    "ParameterError",
    "RemoteError",
    "InvalidResponseError",
]
