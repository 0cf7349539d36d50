"""Abstract key-value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Fixed keys shared by the gateway and the store
TRANSACTIONS_KEY = "transactions"
AUTH_TOKEN_KEY = "authToken"


class KeyValueStorage(ABC):
    """Abstract string key-value storage for fintrack.

    Holds the session token and the mirror of the transaction list.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        pass
