"""Aggregate calculations over view records.

All functions are pure: they read the records they are given and never
write back to any state.
"""

from datetime import date
from typing import Optional, Sequence

from fintrack.domain.entities import Summary, TransactionType, ViewRecord


def total_balance(records: Sequence[ViewRecord]) -> float:
    """Return income minus expenses."""
    if not records:
        return 0
    return sum(record.signed_amount for record in records)


def total_income(records: Sequence[ViewRecord]) -> float:
    """Return the sum of all income amounts."""
    if not records:
        return 0
    return sum(
        record.amount
        for record in records
        if record.type == TransactionType.INCOME.value
    )


def total_expenses(records: Sequence[ViewRecord]) -> float:
    """Return the sum of all expense amounts."""
    if not records:
        return 0
    return sum(
        record.amount
        for record in records
        if record.type == TransactionType.EXPENSE.value
    )


def totals_by_category(records: Sequence[ViewRecord]) -> dict[str, float]:
    """Return the net amount (income minus expenses) per category.

    Categories appear in the order they are first seen.
    """
    categories: dict[str, float] = {}
    for record in records:
        categories[record.category] = (
            categories.get(record.category, 0) + record.signed_amount
        )
    return categories


def record_date(record: ViewRecord) -> Optional[date]:
    """Return the calendar date of a record, or None if it is not a real date.

    Record dates are ISO-8601 strings, either date-only or full datetimes;
    the leading YYYY-MM-DD part is the calendar date in both cases. Date-only
    strings are only shape-checked on ingress, so "2024-02-30" can get here.
    """
    try:
        return date.fromisoformat(record.date[:10])
    except (ValueError, TypeError):
        return None


def filter_records(
    records: Sequence[ViewRecord],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    category: Optional[str] = None,
    kind: Optional[str] = None,
) -> list[ViewRecord]:
    """Filter records by inclusive date range, category and type.

    Args:
        records: Records to filter
        start_date: Optional first date to include
        end_date: Optional last date to include
        category: Optional exact category name
        kind: Optional transaction type ("income" or "expense")

    Returns:
        Matching records in their original order
    """
    result = []
    for record in records:
        if category is not None and record.category != category:
            continue
        if kind is not None and record.type != kind:
            continue
        if start_date is not None or end_date is not None:
            day = record_date(record)
            # records without a usable date never match a date bound
            if day is None:
                continue
            if start_date is not None and day < start_date:
                continue
            if end_date is not None and day > end_date:
                continue
        result.append(record)
    return result


def build_summary(records: Sequence[ViewRecord]) -> Summary:
    """Bundle every aggregate for display."""
    return Summary(
        total_balance=total_balance(records),
        total_income=total_income(records),
        total_expenses=total_expenses(records),
        by_category=totals_by_category(records),
        transaction_count=len(records),
    )
