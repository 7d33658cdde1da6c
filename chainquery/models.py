"""
Shared data models for chainquery.

These dataclasses are the canonical data shapes used across all modules:
the extractor produces ExtractedData, the provider client produces
Transaction and PriceInfo, and output.py renders them.

Provider payloads are parsed leniently: every field the provider may omit
is optional here, so rendering never has to guess at missing keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ExtractedData:
    """Candidate values found in free text, in order of first appearance."""

    addresses: list[str] = field(default_factory=list)
    tx_hashes: list[str] = field(default_factory=list)
    chains: list[str] = field(default_factory=list)

    def first_address(self) -> str | None:
        return self.addresses[0] if self.addresses else None

    def first_chain(self) -> str | None:
        return self.chains[0] if self.chains else None


@dataclass
class TokenPriceParams:
    """Request parameters for a token price lookup."""

    chain: str
    token_address: str
    timestamp: str | None = None    # Unix seconds; None = current price

    def to_query(self) -> dict[str, str]:
        """Query string parameters; the timestamp is omitted when unset."""
        return {"timestamp": self.timestamp} if self.timestamp else {}


@dataclass
class Transaction:
    """A provider-classified transaction."""

    description: str | None = None
    tx_type: str | None = None
    tx_hash: str | None = None
    timestamp: int | None = None    # Unix timestamp (UTC seconds)
    gas_used: str | None = None
    gas_price: str | None = None    # wei

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Transaction:
        """Build from a Translate API item (classificationData + rawTransactionData)."""
        classification = raw.get("classificationData") or {}
        raw_tx = raw.get("rawTransactionData") or {}
        timestamp = raw_tx.get("timestamp")
        return cls(
            description=classification.get("description"),
            tx_type=classification.get("type"),
            tx_hash=raw_tx.get("transactionHash"),
            timestamp=int(timestamp) if timestamp is not None else None,
            gas_used=_as_str(raw_tx.get("gasUsed")),
            gas_price=_as_str(raw_tx.get("gasPrice")),
        )


@dataclass
class PriceInfo:
    """Token price from the Pricing API."""

    amount: str | None = None
    currency: str | None = None
    symbol: str | None = None
    name: str | None = None
    liquidity: str | None = None
    exchange_name: str | None = None

    @property
    def has_price(self) -> bool:
        return self.amount is not None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> PriceInfo:
        price = raw.get("price") or {}
        token = raw.get("token") or {}
        priced_by = raw.get("pricedBy") or {}
        exchange = priced_by.get("exchange") or {}
        return cls(
            amount=_as_str(price.get("amount")),
            currency=price.get("currency"),
            symbol=token.get("symbol"),
            name=token.get("name"),
            liquidity=_as_str(priced_by.get("liquidity")),
            exchange_name=exchange.get("name"),
        )


def _as_str(value: Any) -> str | None:
    """Numeric fields arrive as strings or numbers; normalise to str."""
    if value is None or value == "":
        return None
    return str(value)
