"""Application state store for transactions.

The store is a plain state container. Aggregates are derived on read from
:mod:`fintrack.domain.aggregates` and never written back to state.
"""

import json
from typing import Optional

from fintrack.domain import aggregates
from fintrack.domain.entities import TransactionParameters, ViewRecord
from fintrack.domain.errors import ValidationError
from fintrack.domain.mappers import view_record_from_dict, view_record_to_dict
from fintrack.gateway.client import TransactionGateway
from fintrack.gateway.errors import AuthError, GatewayError
from fintrack.logging_setup import get_logger
from fintrack.storage.base import TRANSACTIONS_KEY, KeyValueStorage

logger = get_logger(__name__)

DEFAULT_CATEGORIES = [
    "Groceries",
    "Transport",
    "Housing",
    "Entertainment",
    "Health",
    "Clothing",
    "Education",
    "Other",
]

LOAD_FAILED = "Failed to load transactions"
CREATE_FAILED = "Failed to create transaction"
DELETE_FAILED = "Failed to delete transaction"


def error_message(error: Exception, fallback: str) -> str:
    """Return the user-facing message for a failed action.

    Authentication failures carry their own message. Otherwise the
    server-provided message wins over the generic fallback.
    """
    if isinstance(error, AuthError):
        return str(error)
    if isinstance(error, GatewayError) and error.server_message:
        return error.server_message
    return fallback


class TransactionStore:
    """Holds the loaded view records and orchestrates gateway calls.

    Every action catches gateway and validation failures at its boundary
    and records them in ``error`` instead of raising.
    """

    def __init__(self, gateway: TransactionGateway, storage: KeyValueStorage):
        """Initialize transaction store.

        Args:
            gateway: Gateway to the remote transaction service
            storage: Storage holding the local mirror
        """
        self.gateway = gateway
        self.storage = storage
        self.transactions: list[ViewRecord] = []
        self.categories: list[str] = list(DEFAULT_CATEGORIES)
        self.loading = False
        self.error: Optional[str] = None
        self.initialized = False

    # Actions

    def initialize(self) -> None:
        """Load transactions once; later calls are no-ops."""
        if self.initialized:
            return

        self.loading = True
        self.error = None
        try:
            self.transactions = self.gateway.list_transactions()
            logger.info("Received %d transactions from API", len(self.transactions))
            self.initialized = True
        except (GatewayError, ValidationError) as e:
            self.error = error_message(e, LOAD_FAILED)
            logger.error("Error loading transactions: %s", e)
        finally:
            self.loading = False

    def load_transactions(self) -> None:
        """Reload transactions, falling back to the mirror on failure."""
        self.loading = True
        self.error = None
        try:
            self.transactions = self.gateway.list_transactions()
            logger.info("Received %d transactions from API", len(self.transactions))
        except (GatewayError, ValidationError) as e:
            self.error = error_message(e, LOAD_FAILED)
            logger.error("Error loading transactions: %s", e)
            self.load_from_mirror()
        finally:
            self.loading = False

    def add_transaction(self, params: TransactionParameters) -> Optional[ViewRecord]:
        """Create a transaction remotely and append it.

        Returns:
            The created record, or None if the request failed
        """
        self.loading = True
        self.error = None
        try:
            record = self.gateway.create_transaction(params)
            self.transactions.append(record)
            self.save_to_mirror()
            return record
        except (GatewayError, ValidationError) as e:
            self.error = error_message(e, CREATE_FAILED)
            logger.error("Error creating transaction: %s", e)
            return None
        finally:
            self.loading = False

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction remotely and locally.

        The local record is removed even when the remote call fails.
        """
        self.loading = True
        self.error = None
        try:
            try:
                self.gateway.delete_transaction(transaction_id)
            except GatewayError as e:
                self.error = error_message(e, DELETE_FAILED)
                logger.error("Error deleting transaction %s: %s", transaction_id, e)
            self.transactions = [t for t in self.transactions if t.id != transaction_id]
            self.save_to_mirror()
        finally:
            self.loading = False

    def save_to_mirror(self) -> None:
        """Write the full transaction list to the local mirror."""
        self.storage.set(
            TRANSACTIONS_KEY,
            json.dumps([view_record_to_dict(t) for t in self.transactions]),
        )

    def load_from_mirror(self) -> None:
        """Replace transactions with the mirror contents, if any.

        A missing mirror leaves state untouched; an unreadable one is logged
        and ignored.
        """
        stored = self.storage.get(TRANSACTIONS_KEY)
        if not stored:
            return
        try:
            self.transactions = [view_record_from_dict(item) for item in json.loads(stored)]
            logger.info("Loaded %d transactions from mirror", len(self.transactions))
        except (ValueError, TypeError, KeyError) as e:
            logger.error("Error loading from mirror: %s", e)

    def clear_error(self) -> None:
        self.error = None

    # Derived state

    @property
    def total_balance(self) -> float:
        return aggregates.total_balance(self.transactions)

    @property
    def income(self) -> float:
        return aggregates.total_income(self.transactions)

    @property
    def expenses(self) -> float:
        return aggregates.total_expenses(self.transactions)

    @property
    def transactions_by_category(self) -> dict[str, float]:
        return aggregates.totals_by_category(self.transactions)

    @property
    def is_loading(self) -> bool:
        return self.loading

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def is_initialized(self) -> bool:
        return self.initialized
