"""Errors raised by the remote transaction gateway."""

from typing import Optional


class GatewayError(Exception):
    """A call to the remote service failed.

    Attributes:
        status: HTTP status code, or None when no response was received
        server_message: The ``message`` field of the error body, if any
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        server_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.status = status
        self.server_message = server_message


class TransportError(GatewayError):
    """Network failure, non-2xx response or unreadable response body."""


class AuthError(GatewayError):
    """The service rejected the credentials (HTTP 401)."""
