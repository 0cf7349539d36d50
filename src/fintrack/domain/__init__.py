"""Domain layer for fintrack application."""

from fintrack.domain.entities import (
    ViewRecord,
    TransactionParameters,
    TransactionType,
    Page,
    Statistics,
    Summary,
)
from fintrack.domain.errors import DomainError, ValidationError
from fintrack.domain.mappers import map_to_view_record

__all__ = [
    "ViewRecord",
    "TransactionParameters",
    "TransactionType",
    "Page",
    "Statistics",
    "Summary",
    "DomainError",
    "ValidationError",
    "map_to_view_record",
]
