"""Remote transaction service gateway."""

from fintrack.gateway.client import TransactionGateway
from fintrack.gateway.errors import GatewayError, TransportError, AuthError

__all__ = ["TransactionGateway", "GatewayError", "TransportError", "AuthError"]
