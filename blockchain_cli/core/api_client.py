"""API Client for the blockchain.info public REST API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from blockchain_cli import __version__
from blockchain_cli.core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from blockchain_cli.core.errors import ApiError, RequestError

logger = logging.getLogger(__name__)

DEFAULT_POOLS_TIMESPAN = "5days"


class APIClient:
    """HTTP client for the blockchain.info API.

    Every public method maps to exactly one GET request and returns the
    decoded JSON body unchanged. Failures raise ``ApiError`` when the API
    sent a structured message, ``RequestError`` otherwise.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                transport=self.transport,
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": f"blockchain-cli/{__version__}",
                },
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make an HTTP request to the API.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            params: Query parameters; ``None`` values are dropped
        """
        url = f"{self.base_url}{endpoint}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug("%s %s params=%s", method, url, params or {})

        try:
            response = self.client.request(method, url, params=params or None)
        except httpx.TimeoutException as e:
            raise RequestError(f"Request timed out after {self.timeout:g}s: {e}") from e
        except httpx.HTTPError as e:
            raise RequestError(str(e) or type(e).__name__) from e

        logger.debug("%s %s -> HTTP %s", method, response.url, response.status_code)

        if response.status_code >= 400:
            message = _error_message(response)
            if message:
                raise ApiError(message, status_code=response.status_code)
            detail = response.text.strip() or response.reason_phrase
            raise RequestError(
                f"HTTP {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RequestError(f"Invalid JSON in response: {e}") from e

    # Addresses
    def get_balance(self, address: str) -> Any:
        """Get the balance summary for an address, keyed by address."""
        return self._request("GET", "/balance", {"active": address})

    def get_address_info(
        self,
        address: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Any:
        """Get address details including its most recent transactions."""
        return self._request("GET", f"/rawaddr/{address}", {"limit": limit, "offset": offset})

    def list_transactions(
        self,
        address: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Any:
        """List transactions for an address (same endpoint as address info)."""
        return self._request("GET", f"/rawaddr/{address}", {"limit": limit, "offset": offset})

    # Blocks
    def get_block(self, block_hash: str) -> Any:
        return self._request("GET", f"/rawblock/{block_hash}")

    def get_block_by_height(self, height: int) -> Any:
        """Get all blocks at a height (more than one during a fork)."""
        return self._request("GET", f"/block-height/{height}", {"format": "json"})

    def get_latest_block(self) -> Any:
        return self._request("GET", "/latestblock")

    # Transactions
    def get_unconfirmed_transactions(self) -> Any:
        return self._request("GET", "/unconfirmed-transactions", {"format": "json"})

    def get_transaction(self, tx_hash: str) -> Any:
        return self._request("GET", f"/rawtx/{tx_hash}")

    # Market & network
    def get_exchange_rates(self) -> Any:
        return self._request("GET", "/ticker")

    def convert_to_btc(self, currency: str, value: str | float) -> Any:
        """Convert an amount of a fiat currency to BTC."""
        return self._request("GET", "/tobtc", {"currency": currency, "value": value})

    def get_stats(self) -> Any:
        return self._request("GET", "/stats", {"format": "json"})

    def get_pools(self, timespan: str = DEFAULT_POOLS_TIMESPAN) -> Any:
        """Get blocks mined per pool over a timespan such as ``5days``."""
        return self._request("GET", "/pools", {"timespan": timespan, "format": "json"})


def _error_message(response: httpx.Response) -> Optional[str]:
    """Pull the ``message`` field out of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return None
