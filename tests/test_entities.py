"""Tests for domain entities."""

import pytest

from fintrack.domain.entities import TransactionParameters, TransactionType, ViewRecord


class TestViewRecord:
    """Tests for ViewRecord entity."""

    def test_view_record_immutability(self):
        record = ViewRecord(id="1", amount=1.0, type="income", category="A", date="2024-01-01")
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            record.amount = 2.0

    def test_signed_amount(self):
        income = ViewRecord(id="1", amount=10.0, type="income", category="A", date="2024-01-01")
        expense = ViewRecord(id="2", amount=10.0, type="expense", category="A", date="2024-01-01")

        assert income.is_income
        assert income.signed_amount == 10.0
        assert not expense.is_income
        assert expense.signed_amount == -10.0

    def test_view_record_equality(self):
        a = ViewRecord(id="1", amount=1.0, type="income", category="A", date="2024-01-01")
        b = ViewRecord(id="1", amount=1.0, type="income", category="A", date="2024-01-01")
        c = ViewRecord(id="2", amount=1.0, type="income", category="A", date="2024-01-01")

        assert a == b
        assert a != c


class TestTransactionParameters:
    """Tests for TransactionParameters entity."""

    def test_payload_includes_description(self):
        params = TransactionParameters(
            amount=12.5,
            type=TransactionType.EXPENSE.value,
            category="Groceries",
            date="2024-01-15",
            description="Market",
        )
        assert params.to_payload() == {
            "amount": 12.5,
            "type": "expense",
            "category": "Groceries",
            "date": "2024-01-15",
            "description": "Market",
        }

    def test_payload_omits_missing_description(self):
        params = TransactionParameters(
            amount=1, type="income", category="Salary", date="2024-01-15"
        )
        assert "description" not in params.to_payload()


def test_transaction_type_values():
    assert [t.value for t in TransactionType] == ["income", "expense"]
