"""Shared domain error messages and error types."""

from typing import Iterable


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    Attributes:
        errors: (field, message) pairs, one per violated constraint
    """

    def __init__(self, message: str, errors: Iterable[tuple[str, str]] = ()):
        super().__init__(message)
        self.errors = list(errors)


def invalid_transaction(errors: list[tuple[str, str]]) -> str:
    """Return message listing every field that failed validation."""
    details = "; ".join(f"{field}: {message}" for field, message in errors)
    return f"Invalid transaction payload ({details})"


def invalid_amount(value: object) -> str:
    """Return message for an amount that is not a finite number."""
    return f"Amount must be a valid number, got {value!r}"


def invalid_date(value: object) -> str:
    """Return message for an unsupported date value."""
    return (
        f"Date must be an ISO-8601 datetime, a YYYY-MM-DD string or a date, got {value!r}"
    )


def invalid_response(errors: list[tuple[str, str]]) -> str:
    """Return message listing every malformed field of a service response."""
    details = "; ".join(f"{field}: {message}" for field, message in errors)
    return f"Invalid response payload ({details})"
