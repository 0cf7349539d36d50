"""Shared pytest fixtures for fintrack tests."""

import email.message
import io
import json
import os
import tempfile
import urllib.error

import pytest

from fintrack.domain.entities import Page, Statistics, ViewRecord
from fintrack.domain.store import TransactionStore
from fintrack.gateway.client import TransactionGateway
from fintrack.gateway.errors import TransportError
from fintrack.storage.factories import create_sqlite_storage
from fintrack.storage.memory import InMemoryStorage


def make_raw(transaction_id="1", **parameters):
    """Build a raw transaction payload with sensible defaults."""
    params = {
        "amount": "100.00",
        "type": "income",
        "category": "Salary",
        "date": "2024-01-15",
        "description": "January salary",
    }
    params.update(parameters)
    return {"id": transaction_id, "parameters": params}


def make_record(transaction_id="1", **fields):
    """Build a ViewRecord with sensible defaults."""
    values = {
        "amount": 100.0,
        "type": "income",
        "category": "Salary",
        "date": "2024-01-15",
        "description": None,
    }
    values.update(fields)
    return ViewRecord(id=transaction_id, **values)


class FakeResponse:
    """Minimal stand-in for the object returned by urlopen."""

    def __init__(self, body: bytes):
        self._body = body
        self.status = 200

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class FakeOpener:
    """Replays queued responses in place of urllib.request.urlopen."""

    def __init__(self):
        self.requests = []
        self.timeouts = []
        self._responses = []

    def add_json(self, payload):
        self._responses.append(json.dumps(payload).encode("utf-8"))

    def add_body(self, body: bytes):
        self._responses.append(body)

    def add_http_error(self, status, payload=None, reason="Error"):
        body = json.dumps(payload).encode("utf-8") if payload is not None else b""
        self._responses.append(
            urllib.error.HTTPError(
                "http://test/api", status, reason, email.message.Message(), io.BytesIO(body)
            )
        )

    def add_exception(self, error: Exception):
        self._responses.append(error)

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return FakeResponse(response)

    @property
    def last_request(self):
        return self.requests[-1]


class FakeGateway:
    """In-memory gateway used to exercise the store without HTTP."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.failures = {}
        self.deleted = []
        self._next_id = 100

    def fail(self, operation, error=None):
        self.failures[operation] = error or TransportError("connection refused")

    def _check(self, operation):
        if operation in self.failures:
            raise self.failures[operation]

    def list_transactions(self):
        self._check("list")
        return list(self.records)

    def create_transaction(self, params):
        self._check("create")
        self._next_id += 1
        record = ViewRecord(
            id=str(self._next_id),
            amount=float(params.amount),
            type=params.type,
            category=params.category,
            date=params.date,
            description=params.description,
        )
        self.records.append(record)
        return record

    def delete_transaction(self, transaction_id):
        self._check("delete")
        self.deleted.append(transaction_id)
        self.records = [r for r in self.records if r.id != transaction_id]

    def get_transaction(self, transaction_id):
        self._check("get")
        for record in self.records:
            if record.id == transaction_id:
                return record
        raise TransportError("Not found", status=404, server_message="Transaction not found")

    def update_transaction(self, transaction_id, changes):
        self._check("update")
        record = self.get_transaction(transaction_id)
        updated = ViewRecord(**{**record.__dict__, **changes.get("parameters", {})})
        self.records = [updated if r.id == transaction_id else r for r in self.records]
        return updated

    def get_transactions_page(self, page=0, size=20):
        self._check("page")
        content = tuple(self.records[page * size:(page + 1) * size])
        total_pages = (len(self.records) + size - 1) // size
        return Page(
            content=content,
            total_pages=total_pages,
            total_elements=len(self.records),
            size=size,
            number=page,
        )

    def get_statistics(self):
        self._check("statistics")
        return Statistics(
            total_balance=60.0,
            total_income=100.0,
            total_expenses=40.0,
            by_category={"Salary": 100.0, "Groceries": -40.0},
        )


@pytest.fixture
def memory_storage():
    """Create an empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite storage for testing."""
    fd, state_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(state_path=state_path)
    storage.state_path = state_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    storage.disconnect()
    if os.path.exists(state_path):
        os.unlink(state_path)


@pytest.fixture
def opener():
    """Create a fake HTTP opener."""
    return FakeOpener()


@pytest.fixture
def gateway(memory_storage, opener):
    """Create a TransactionGateway wired to the fake opener."""
    return TransactionGateway(
        memory_storage, base_url="http://test/api", timeout=5, opener=opener
    )


@pytest.fixture
def fake_gateway():
    """Create a FakeGateway with two transactions."""
    return FakeGateway(
        [
            make_record("1", amount=100.0, type="income", category="Salary"),
            make_record("2", amount=40.0, type="expense", category="Groceries", date="2024-01-20"),
        ]
    )


@pytest.fixture
def store(fake_gateway, memory_storage):
    """Create a TransactionStore backed by the fake gateway."""
    return TransactionStore(fake_gateway, memory_storage)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_obj(fake_gateway, memory_storage, store):
    """Context object injecting fakes into the CLI."""
    return {"gateway": fake_gateway, "storage": memory_storage, "store": store}
