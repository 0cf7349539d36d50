"""Thin client for the remote transactions API.

Every response is validated through :mod:`fintrack.domain.mappers` before it
is returned, so callers only ever see domain entities.
"""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Optional

from fintrack.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from fintrack.domain.entities import Page, Statistics, TransactionParameters, ViewRecord
from fintrack.domain.mappers import map_to_view_record, page_from_wire, statistics_from_wire
from fintrack.gateway.errors import AuthError, TransportError
from fintrack.logging_setup import get_logger
from fintrack.storage.base import AUTH_TOKEN_KEY, KeyValueStorage

logger = get_logger(__name__)


class TransactionGateway:
    """HTTP operations on the ``/transactions`` resource."""

    def __init__(
        self,
        storage: KeyValueStorage,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        opener: Optional[Callable[..., Any]] = None,
    ):
        """Initialize the gateway.

        Args:
            storage: Storage holding the optional bearer token
            base_url: API base URL, e.g. 'http://localhost:8080/api'
            timeout: Request timeout in seconds
            opener: Callable with the signature of urllib.request.urlopen
        """
        self.storage = storage
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.opener = opener or urllib.request.urlopen

    def list_transactions(self) -> list[ViewRecord]:
        """Get all transactions.

        Raises:
            GatewayError: If the request fails
            ValidationError: If any transaction in the response is malformed
        """
        body = self._request("GET", "/transactions")
        if not isinstance(body, list):
            raise TransportError("Expected a JSON array of transactions")
        return [map_to_view_record(raw) for raw in body]

    def get_transactions_page(self, page: int = 0, size: int = 20) -> Page[ViewRecord]:
        """Get one page of transactions."""
        query = urllib.parse.urlencode({"page": page, "size": size})
        data = self._unwrap(self._request("GET", f"/transactions?{query}"))
        if not isinstance(data, dict):
            raise TransportError("Expected a page object")
        return page_from_wire(data)

    def get_transaction(self, transaction_id: str) -> ViewRecord:
        """Get a single transaction by ID."""
        data = self._unwrap(self._request("GET", self._item_path(transaction_id)))
        return map_to_view_record(data)

    def create_transaction(self, params: TransactionParameters) -> ViewRecord:
        """Create a transaction and return the stored record."""
        body = self._request("POST", "/transactions", params.to_payload())
        return map_to_view_record(body)

    def update_transaction(self, transaction_id: str, changes: dict[str, Any]) -> ViewRecord:
        """Update a transaction with a partial raw transaction body."""
        data = self._unwrap(
            self._request("PUT", self._item_path(transaction_id), changes)
        )
        return map_to_view_record(data)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        self._request("DELETE", self._item_path(transaction_id))

    def get_statistics(self) -> Statistics:
        """Get server-side aggregates."""
        data = self._unwrap(self._request("GET", "/transactions/statistics"))
        if not isinstance(data, dict):
            raise TransportError("Expected a statistics object")
        return statistics_from_wire(data)

    def _item_path(self, transaction_id: str) -> str:
        return f"/transactions/{urllib.parse.quote(str(transaction_id), safe='')}"

    def _unwrap(self, body: Any) -> Any:
        """Return the ``data`` member of an ApiResponse envelope."""
        if not isinstance(body, dict) or "data" not in body:
            raise TransportError("Malformed response envelope: missing 'data'")
        return body["data"]

    def _request(self, method: str, path: str, payload: Any = None) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        url = f"{self.base_url}{path}"
        data = json.dumps(payload).encode("utf-8") if payload is not None else None
        req = urllib.request.Request(url, data=data, method=method)
        req.add_header("Content-Type", "application/json")
        req.add_header("Accept", "application/json")

        token = self.storage.get(AUTH_TOKEN_KEY)
        if token:
            req.add_header("Authorization", f"Bearer {token}")

        logger.debug("%s %s", method, url)
        try:
            with self.opener(req, timeout=self.timeout) as resp:
                body = resp.read()
        except urllib.error.HTTPError as e:
            raise self._http_error(method, url, e) from e
        except (urllib.error.URLError, OSError) as e:
            reason = getattr(e, "reason", e)
            raise TransportError(f"{method} {url} failed: {reason}") from e

        if not body:
            return None
        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TransportError(f"{method} {url} returned invalid JSON") from e

    def _http_error(
        self, method: str, url: str, error: urllib.error.HTTPError
    ) -> TransportError | AuthError:
        server_message = None
        try:
            err_body = json.loads(error.read().decode("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            err_body = None
        if isinstance(err_body, dict) and isinstance(err_body.get("message"), str):
            server_message = err_body["message"]

        if error.code == 401:
            self.storage.delete(AUTH_TOKEN_KEY)
            logger.warning("Authentication rejected; cleared stored token")
            return AuthError(
                "Authentication required; log in again",
                status=401,
                server_message=server_message,
            )

        return TransportError(
            f"{method} {url} failed: {error.code} {error.reason}",
            status=error.code,
            server_message=server_message,
        )
