"""Local state storage for fintrack."""

from fintrack.storage.base import KeyValueStorage, TRANSACTIONS_KEY, AUTH_TOKEN_KEY
from fintrack.storage.memory import InMemoryStorage
from fintrack.storage.factories import create_sqlite_storage

__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "create_sqlite_storage",
    "TRANSACTIONS_KEY",
    "AUTH_TOKEN_KEY",
]
