"""Tests for the transaction store."""

import json

import pytest

from fintrack.domain.entities import TransactionParameters
from fintrack.domain.errors import ValidationError
from fintrack.domain.store import (
    CREATE_FAILED,
    DEFAULT_CATEGORIES,
    DELETE_FAILED,
    LOAD_FAILED,
    TransactionStore,
)
from fintrack.gateway.errors import AuthError, TransportError
from fintrack.storage.base import TRANSACTIONS_KEY

from conftest import make_record


def _mirror_ids(storage):
    return [item["id"] for item in json.loads(storage.get(TRANSACTIONS_KEY))]


def _params(**overrides):
    values = {"amount": 25.0, "type": "expense", "category": "Transport", "date": "2024-03-01"}
    values.update(overrides)
    return TransactionParameters(**values)


def test_initial_state(store):
    assert store.transactions == []
    assert store.categories == DEFAULT_CATEGORIES
    assert not store.is_loading
    assert not store.has_error
    assert not store.is_initialized
    assert store.total_balance == 0
    assert store.transactions_by_category == {}


def test_load_transactions_replaces_state(store, fake_gateway):
    store.transactions = [make_record("old")]

    store.load_transactions()

    assert [t.id for t in store.transactions] == ["1", "2"]
    assert store.error is None
    assert not store.is_loading


def test_derived_aggregates(store):
    store.load_transactions()

    assert store.total_balance == 60
    assert store.income == 100
    assert store.expenses == 40
    assert store.transactions_by_category == {"Salary": 100.0, "Groceries": -40.0}


def test_initialize_loads_once(store, fake_gateway):
    store.initialize()
    assert store.is_initialized
    assert len(store.transactions) == 2

    fake_gateway.records.append(make_record("3"))
    store.initialize()

    assert len(store.transactions) == 2


def test_initialize_failure_sets_error_without_fallback(store, fake_gateway, memory_storage):
    memory_storage.set(TRANSACTIONS_KEY, json.dumps([]))
    fake_gateway.fail("list")

    store.initialize()

    assert store.error == LOAD_FAILED
    assert not store.is_initialized
    assert not store.is_loading


def test_load_failure_falls_back_to_mirror(store, fake_gateway, memory_storage):
    memory_storage.set(
        TRANSACTIONS_KEY,
        json.dumps(
            [
                {
                    "id": "m1",
                    "amount": 12.0,
                    "type": "expense",
                    "category": "Other",
                    "date": "2024-01-01",
                    "description": None,
                }
            ]
        ),
    )
    fake_gateway.fail("list")

    store.load_transactions()

    assert store.has_error
    assert store.error == LOAD_FAILED
    assert [t.id for t in store.transactions] == ["m1"]
    assert store.expenses == 12.0


def test_load_failure_without_mirror_keeps_state(store, fake_gateway):
    store.transactions = [make_record("kept")]
    fake_gateway.fail("list")

    store.load_transactions()

    assert [t.id for t in store.transactions] == ["kept"]


def test_load_failure_with_corrupt_mirror_keeps_state(store, fake_gateway, memory_storage):
    memory_storage.set(TRANSACTIONS_KEY, "{not json")
    store.transactions = [make_record("kept")]
    fake_gateway.fail("list")

    store.load_transactions()

    assert [t.id for t in store.transactions] == ["kept"]
    assert store.error == LOAD_FAILED


def test_load_uses_server_message(store, fake_gateway):
    fake_gateway.fail(
        "list", TransportError("500", status=500, server_message="Database unavailable")
    )

    store.load_transactions()

    assert store.error == "Database unavailable"


def test_load_validation_failure_fails_whole_batch(store, fake_gateway):
    fake_gateway.fail("list", ValidationError("bad payload", [("parameters.amount", "bad")]))

    store.load_transactions()

    assert store.error == LOAD_FAILED
    assert store.transactions == []


def test_auth_error_uses_its_own_message(store, fake_gateway):
    fake_gateway.fail("list", AuthError("Authentication required; log in again", status=401))

    store.load_transactions()

    assert store.error == "Authentication required; log in again"


def test_add_transaction_appends_and_mirrors(store, memory_storage):
    store.load_transactions()

    record = store.add_transaction(_params(description="Bus"))

    assert record is not None
    assert record.description == "Bus"
    assert store.transactions[-1] == record
    assert _mirror_ids(memory_storage) == ["1", "2", record.id]
    assert store.expenses == 65.0


def test_add_transaction_failure(store, fake_gateway, memory_storage):
    fake_gateway.fail("create")

    assert store.add_transaction(_params()) is None
    assert store.error == CREATE_FAILED
    assert store.transactions == []
    assert memory_storage.get(TRANSACTIONS_KEY) is None


def test_add_transaction_clears_previous_error(store, fake_gateway):
    fake_gateway.fail("list")
    store.load_transactions()
    assert store.has_error

    store.add_transaction(_params())

    assert not store.has_error


def test_delete_transaction(store, fake_gateway, memory_storage):
    store.load_transactions()

    store.delete_transaction("1")

    assert fake_gateway.deleted == ["1"]
    assert [t.id for t in store.transactions] == ["2"]
    assert _mirror_ids(memory_storage) == ["2"]
    assert store.error is None


def test_delete_failure_still_removes_locally(store, fake_gateway, memory_storage):
    store.load_transactions()
    store.save_to_mirror()
    fake_gateway.fail("delete")

    store.delete_transaction("2")

    assert store.error == DELETE_FAILED
    assert [t.id for t in store.transactions] == ["1"]
    assert _mirror_ids(memory_storage) == ["1"]
    assert not store.is_loading


def test_mirror_round_trip(fake_gateway, memory_storage):
    first = TransactionStore(fake_gateway, memory_storage)
    first.load_transactions()
    first.save_to_mirror()

    second = TransactionStore(fake_gateway, memory_storage)
    second.load_from_mirror()

    assert second.transactions == first.transactions


def test_clear_error(store, fake_gateway):
    fake_gateway.fail("list")
    store.load_transactions()

    store.clear_error()

    assert store.error is None
    assert not store.has_error


@pytest.mark.parametrize("operation", ["list", "create", "delete"])
def test_loading_flag_is_reset_after_failure(store, fake_gateway, operation):
    fake_gateway.fail(operation)

    if operation == "list":
        store.load_transactions()
    elif operation == "create":
        store.add_transaction(_params())
    else:
        store.delete_transaction("1")

    assert not store.is_loading
