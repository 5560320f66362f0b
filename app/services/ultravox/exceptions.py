"""Errors raised while creating an Ultravox call."""
from typing import Optional


class SessionCreationError(Exception):
    """Base class for every way a call session can fail to come up."""


class ProviderTransportError(SessionCreationError):
    """The Ultravox API could not be reached (DNS, TLS, refused connection)."""


class ProviderTimeoutError(ProviderTransportError):
    """The Ultravox API did not answer within the configured timeout."""


class ProviderResponseError(SessionCreationError):
    """The Ultravox API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Ultravox API request failed with status {status_code}")


class MalformedResponseError(SessionCreationError):
    """The Ultravox API answered 2xx but the body was unusable."""

    def __init__(self, message: str, body: Optional[str] = None):
        self.body = body
        super().__init__(message)


class SessionAbandonedError(SessionCreationError):
    """The caller hung up before the session was created."""
