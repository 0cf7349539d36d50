"""Validation schema for raw transaction payloads.

The parameter bag is an open record: unknown keys are accepted and kept on
the validated model, but only the known fields are ever projected into a
:class:`~fintrack.domain.entities.ViewRecord`.
"""

import math
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, field_validator

from fintrack.domain import errors

DATE_ONLY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _is_iso_datetime(value: str) -> bool:
    if "T" not in value:
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


class TransactionParametersSchema(BaseModel):
    """Schema for the ``parameters`` object of a raw transaction."""

    model_config = ConfigDict(extra="allow")

    amount: float
    type: Literal["income", "expense"]
    category: str
    date: str
    description: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> float:
        # bool is an int subclass but never a meaningful amount
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
            raise ValueError(errors.invalid_amount(value))
        try:
            amount = float(value)
        except ValueError:
            raise ValueError(errors.invalid_amount(value)) from None
        if not math.isfinite(amount):
            raise ValueError(errors.invalid_amount(value))
        return amount

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value: Any) -> str:
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        if isinstance(value, str) and (
            DATE_ONLY_PATTERN.fullmatch(value) or _is_iso_datetime(value)
        ):
            return value
        raise ValueError(errors.invalid_date(value))


class RawTransactionSchema(BaseModel):
    """Schema for a whole raw transaction as returned by the service."""

    id: str
    parameters: TransactionParametersSchema


def _format_location(loc: tuple) -> str:
    if not loc:
        return "<root>"
    return ".".join(str(part) for part in loc)


def _format_message(error: dict) -> str:
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error["msg"]


def validate_raw_transaction(raw: Any) -> RawTransactionSchema:
    """Validate a raw transaction payload.

    Args:
        raw: Arbitrary value, usually a dict decoded from JSON

    Returns:
        Validated RawTransactionSchema instance

    Raises:
        ValidationError: If any field is missing or has the wrong shape. The
            exception lists every offending field.
    """
    try:
        return RawTransactionSchema.model_validate(raw)
    except pydantic.ValidationError as e:
        problems = [
            (_format_location(error["loc"]), _format_message(error))
            for error in e.errors()
        ]
        raise errors.ValidationError(
            errors.invalid_transaction(problems), problems
        ) from e
