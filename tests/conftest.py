"""Pytest fixtures shared across all chainquery tests."""

from __future__ import annotations

import pytest

from chainquery.config import (
    ChainqueryConfig,
    DisplayConfig,
    LoggingConfig,
    ProviderConfig,
    RateLimitConfig,
)
from chainquery.models import PriceInfo, TokenPriceParams, Transaction
from chainquery.ratelimit import RateLimiter
from chainquery.runtime import Response

ADDRESS = "0x625758C705bf970375fF780f3544C1ddc8eeb6Ab"
TOKEN_ADDRESS = "0xae7ab96520de3a18e5e111b5eaab095312d7fe84"
TX_HASH = "0x700d06dc473f95530a0dfa04c1fe679aecd722d2a14e07170704fb7a8d2381f6"


# ── Time ──────────────────────────────────────────────────────────────────────


class FakeClock:
    """Monotonic clock whose sleep() advances time instantly."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += max(seconds, 0.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rate_limiter(clock: FakeClock) -> RateLimiter:
    """Default limits (30/60s, 2s spacing) driven by the fake clock."""
    return RateLimiter(clock=clock, sleep=clock.sleep)


# ── Host side ─────────────────────────────────────────────────────────────────


class RecordingCallback:
    """HandlerCallback that stores every Response it receives."""

    def __init__(self) -> None:
        self.responses: list[Response] = []

    async def __call__(self, response: Response) -> None:
        self.responses.append(response)

    @property
    def text(self) -> str:
        return self.responses[-1].text


@pytest.fixture
def callback() -> RecordingCallback:
    return RecordingCallback()


# ── Provider ──────────────────────────────────────────────────────────────────


class FakeProvider:
    """In-memory IntentProvider. Set `error` to make every call raise it."""

    def __init__(self) -> None:
        self.recent_txs: list[Transaction] = []
        self.translated_tx: Transaction | None = None
        self.price: PriceInfo | None = None
        self.error: Exception | None = None
        self.calls: list[tuple] = []

    async def get_recent_txs(self, chain: str, address: str) -> list[Transaction]:
        self.calls.append(("get_recent_txs", chain, address))
        if self.error:
            raise self.error
        return self.recent_txs

    async def get_translated_tx(self, chain: str, tx_hash: str) -> Transaction | None:
        self.calls.append(("get_translated_tx", chain, tx_hash))
        if self.error:
            raise self.error
        return self.translated_tx

    async def get_token_price(self, params: TokenPriceParams) -> PriceInfo | None:
        self.calls.append(("get_token_price", params))
        if self.error:
            raise self.error
        return self.price


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


def make_tx(
    description: str | None = "Swapped 1.5 ETH for 3,240 USDC",
    tx_hash: str | None = TX_HASH,
    timestamp: int | None = 1_765_636_245,  # 2025-12-13 14:30:45 UTC
    gas_used: str | None = "21000",
    gas_price: str | None = "20000000000",
    tx_type: str | None = "swap",
) -> Transaction:
    return Transaction(
        description=description,
        tx_type=tx_type,
        tx_hash=tx_hash,
        timestamp=timestamp,
        gas_used=gas_used,
        gas_price=gas_price,
    )


def make_price(**overrides) -> PriceInfo:
    fields = {
        "amount": "3245.67",
        "currency": "USD",
        "symbol": "stETH",
        "name": "Lido Staked ETH",
        "liquidity": "1250000.5",
        "exchange_name": "Uniswap V3",
    }
    fields.update(overrides)
    return PriceInfo(**fields)


# ── Config ────────────────────────────────────────────────────────────────────


@pytest.fixture
def sample_config() -> ChainqueryConfig:
    """Minimal valid ChainqueryConfig for tests."""
    return ChainqueryConfig(
        provider=ProviderConfig(
            api_key="test_noves_key_12345",
            translate_url="https://translate.example.test",
            pricing_url="https://pricing.example.test",
            timeout_seconds=5.0,
        ),
        rate_limit=RateLimitConfig(
            max_requests=30,
            window_seconds=60.0,
            min_interval_seconds=2.0,
        ),
        display=DisplayConfig(max_recent_txs=5),
        logging=LoggingConfig(level="DEBUG", color=False),
    )
