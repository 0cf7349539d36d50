"""Domain model entities for fintrack.

These are pure data classes representing the normalized view of the remote
service's data. Raw payloads never reach the rest of the application; they
are validated by :mod:`fintrack.domain.schema` and converted by
:mod:`fintrack.domain.mappers` first.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class TransactionType(str, Enum):
    """The two kinds of transaction the service knows about."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class ViewRecord:
    """Normalized transaction used for display and aggregation."""

    id: str
    amount: float
    type: str
    category: str
    date: str
    description: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME.value

    @property
    def signed_amount(self) -> float:
        """Amount with expenses negated."""
        return self.amount if self.is_income else -self.amount


@dataclass(frozen=True)
class TransactionParameters:
    """Request body for creating a transaction."""

    amount: float
    type: str
    category: str
    date: str
    description: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent to the service."""
        payload: dict[str, Any] = {
            "amount": self.amount,
            "type": self.type,
            "category": self.category,
            "date": self.date,
        }
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated listing."""

    content: tuple[T, ...]
    total_pages: int
    total_elements: int
    size: int
    number: int


@dataclass(frozen=True)
class Statistics:
    """Server-side aggregates."""

    total_balance: float
    total_income: float
    total_expenses: float
    by_category: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class Summary:
    """Locally derived aggregates over a set of view records."""

    total_balance: float
    total_income: float
    total_expenses: float
    by_category: dict[str, float]
    transaction_count: int
