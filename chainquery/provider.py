"""
Blockchain data provider — Noves Translate and Pricing API client.

Fetches human-readable ("translated") transactions and token prices.

API docs: https://docs.noves.fi
Translate API: GET /evm/{chain}/txs/{address}, GET /evm/{chain}/tx/{hash}
Pricing API:   GET /evm/{chain}/price/{token}?timestamp=

Design decisions:
- Uses async httpx for all HTTP calls.
- Does not rate limit itself; callers acquire the shared RateLimiter first.
- 404 means "not found" and returns None/[] rather than raising.
- Every other failure is raised as a ChainqueryError subclass.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from chainquery.config import ProviderConfig
from chainquery.exceptions import (
    APIError,
    ConnectionFailedError,
    InvalidAPIKeyError,
    NetworkTimeoutError,
    RateLimitError,
)
from chainquery.models import PriceInfo, TokenPriceParams, Transaction

logger = logging.getLogger(__name__)

# Canonical chain name → Noves chain slug
NOVES_CHAIN_SLUGS = {
    "ethereum": "eth",
}


@runtime_checkable
class IntentProvider(Protocol):
    """
    Protocol for the external blockchain-data provider.

    Implementations return None or an empty list for well-formed input
    that matches nothing, and raise ChainqueryError subclasses for
    transport or upstream failures.
    """

    async def get_recent_txs(self, chain: str, address: str) -> list[Transaction]:
        """Recent transactions for a wallet, newest first."""
        ...

    async def get_translated_tx(self, chain: str, tx_hash: str) -> Transaction | None:
        """A single classified transaction, or None if unknown."""
        ...

    async def get_token_price(self, params: TokenPriceParams) -> PriceInfo | None:
        """Current or historical token price, or None if unavailable."""
        ...


class NovesClient:
    """
    Async Noves API client.

    No API key is required for basic use; when one is configured it is
    sent in the `apiKey` header.
    """

    def __init__(
        self,
        config: ProviderConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or ProviderConfig()
        headers = {"accept": "application/json"}
        if self._config.api_key:
            headers["apiKey"] = self._config.api_key
        self._client = client or httpx.AsyncClient(
            timeout=self._config.timeout_seconds, headers=headers
        )

    async def get_recent_txs(self, chain: str, address: str) -> list[Transaction]:
        url = f"{self._translate_base(chain)}/txs/{address}"
        data = await self._get_json(url)
        if data is None:
            return []
        items = data.get("items", []) if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise APIError(f"Unexpected Noves response shape for {url}")
        return [Transaction.from_dict(item) for item in items if isinstance(item, dict)]

    async def get_translated_tx(self, chain: str, tx_hash: str) -> Transaction | None:
        url = f"{self._translate_base(chain)}/tx/{tx_hash}"
        data = await self._get_json(url)
        if not data:
            return None
        if not isinstance(data, dict):
            raise APIError(f"Unexpected Noves response shape for {url}")
        return Transaction.from_dict(data)

    async def get_token_price(self, params: TokenPriceParams) -> PriceInfo | None:
        slug = NOVES_CHAIN_SLUGS.get(params.chain, params.chain)
        url = f"{self._config.pricing_url.rstrip('/')}/evm/{slug}/price/{params.token_address}"
        data = await self._get_json(url, params=params.to_query())
        if not data:
            return None
        if not isinstance(data, dict):
            raise APIError(f"Unexpected Noves response shape for {url}")
        return PriceInfo.from_dict(data)

    async def close(self) -> None:
        await self._client.aclose()

    # ──────────────────────────────────────────────────────────────
    # Private helpers
    # ──────────────────────────────────────────────────────────────

    def _translate_base(self, chain: str) -> str:
        slug = NOVES_CHAIN_SLUGS.get(chain, chain)
        return f"{self._config.translate_url.rstrip('/')}/evm/{slug}"

    async def _get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        """GET url and decode JSON. Returns None on 404."""
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = await self._client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise NetworkTimeoutError(f"Noves timeout: {e}") from e
        except httpx.ConnectError as e:
            raise ConnectionFailedError(f"Cannot connect to Noves: {e}") from e

        if resp.status_code == 404:
            return None
        if resp.status_code == 429:
            header = resp.headers.get("retry-after", "")
            retry_after = int(header) if header.isdigit() else 60
            raise RateLimitError("Noves rate limit exceeded", retry_after=retry_after)
        if resp.status_code in (401, 403):
            raise InvalidAPIKeyError("Noves rejected the API key")
        if resp.status_code >= 400:
            raise APIError(
                f"Noves returned HTTP {resp.status_code}",
                details={"status": resp.status_code, "url": url},
            )

        try:
            return resp.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON from Noves: {e}") from e
