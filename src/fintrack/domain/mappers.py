"""Mapper functions to convert between wire payloads and domain entities.

This layer is the single trust boundary between the remote service and the
application state: anything that leaves it is a fully validated entity.
"""

from typing import Any, Callable, Mapping

from fintrack.domain import entities as domain
from fintrack.domain import errors
from fintrack.domain.schema import validate_raw_transaction


def map_to_view_record(raw: Any) -> domain.ViewRecord:
    """Validate a raw transaction and project it onto a ViewRecord.

    Args:
        raw: Raw transaction payload ({"id": ..., "parameters": {...}})

    Returns:
        ViewRecord with exactly the known fields; extra parameters are dropped

    Raises:
        ValidationError: If the payload does not satisfy the schema
    """
    parsed = validate_raw_transaction(raw)
    params = parsed.parameters
    return domain.ViewRecord(
        id=parsed.id,
        amount=params.amount,
        type=params.type,
        category=params.category,
        date=params.date,
        description=params.description,
    )


def view_record_to_dict(record: domain.ViewRecord) -> dict[str, Any]:
    """Convert a ViewRecord to the JSON object stored in the mirror."""
    return {
        "id": record.id,
        "amount": record.amount,
        "type": record.type,
        "category": record.category,
        "date": record.date,
        "description": record.description,
    }


def view_record_from_dict(data: Mapping[str, Any]) -> domain.ViewRecord:
    """Rebuild a ViewRecord from a mirror entry."""
    return domain.ViewRecord(
        id=data["id"],
        amount=float(data["amount"]),
        type=data["type"],
        category=data["category"],
        date=data["date"],
        description=data.get("description"),
    )


def _wire_number(data: Mapping[str, Any], key: str, cast: Callable[[Any], Any]) -> Any:
    """Read a numeric wire field; missing or null counts as zero."""
    value = data.get(key)
    if value is None:
        return cast(0)
    try:
        if isinstance(value, bool):
            raise TypeError(value)
        return cast(value)
    except (TypeError, ValueError):
        problems = [(key, f"Expected a number, got {value!r}")]
        raise errors.ValidationError(errors.invalid_response(problems), problems) from None


def page_from_wire(data: Mapping[str, Any]) -> domain.Page[domain.ViewRecord]:
    """Convert a wire page object, mapping every raw transaction it holds."""
    return domain.Page(
        content=tuple(map_to_view_record(raw) for raw in data.get("content") or []),
        total_pages=_wire_number(data, "totalPages", int),
        total_elements=_wire_number(data, "totalElements", int),
        size=_wire_number(data, "size", int),
        number=_wire_number(data, "number", int),
    )


def statistics_from_wire(data: Mapping[str, Any]) -> domain.Statistics:
    """Convert the wire statistics object."""
    by_category = data.get("byCategory") or {}
    return domain.Statistics(
        total_balance=_wire_number(data, "totalBalance", float),
        total_income=_wire_number(data, "totalIncome", float),
        total_expenses=_wire_number(data, "totalExpenses", float),
        by_category={
            category: _wire_number(by_category, category, float)
            for category in by_category
        },
    )
