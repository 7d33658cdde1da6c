"""Response text for the three actions.

Every optional provider field degrades to a placeholder; none of these
functions raise on missing data. Malformed numeric fields do raise
(decimal.InvalidOperation) and are reported by the action's error path.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from chainquery.models import PriceInfo, Transaction

PLACEHOLDER = "N/A"
UNKNOWN_TX = "Unknown transaction"
WEI_PER_ETH = Decimal(10**18)


def format_timestamp(ts: int | None) -> str:
    """Unix seconds → '2025-12-13 14:30:45 UTC'."""
    if ts is None:
        return PLACEHOLDER
    return datetime.fromtimestamp(ts, tz=UTC).strftime("%Y-%m-%d %H:%M:%S UTC")


def short_hash(tx_hash: str | None) -> str:
    """Return truncated hash for display: 0x12345678..."""
    if not tx_hash:
        return PLACEHOLDER
    return f"{tx_hash[:10]}..."


def format_amount(value: Decimal) -> str:
    """Thousands separators; 2 decimals for >= 1, up to 8 below that."""
    if abs(value) >= 1:
        return f"{value:,.2f}"
    text = f"{value:,.8f}".rstrip("0").rstrip(".")
    return text or "0"


def gas_cost_eth(tx: Transaction) -> Decimal | None:
    if not tx.gas_used or not tx.gas_price:
        return None
    return Decimal(tx.gas_used) * Decimal(tx.gas_price) / WEI_PER_ETH


def format_recent_txs(
    address: str, chain: str, txs: list[Transaction], limit: int = 5
) -> str:
    lines = [f"🔍 **Recent activity for {address} on {chain}:**", ""]
    for index, tx in enumerate(txs[:limit], start=1):
        lines.append(f"{index}. **{tx.description or UNKNOWN_TX}**")
        lines.append(f"   • Hash: {short_hash(tx.tx_hash)}")
        lines.append(f"   • Time: {format_timestamp(tx.timestamp)}")
        lines.append("")
    if len(txs) > limit:
        lines.append(f"... and {len(txs) - limit} more transactions.")
    return "\n".join(lines)


def format_translated_tx(tx_hash: str, chain: str, tx: Transaction) -> str:
    lines = [
        f"🔍 **Transaction Analysis for {tx_hash}**",
        "",
        f"📋 **Description:** {tx.description or UNKNOWN_TX}",
        f"⏰ **Time:** {format_timestamp(tx.timestamp)}",
        f"⛓️ **Chain:** {chain}",
    ]
    gas = gas_cost_eth(tx)
    if gas is not None:
        lines.append(f"⛽ **Gas Cost:** {gas:.6f} ETH")
    if tx.tx_type:
        lines.append(f"🏷️ **Type:** {tx.tx_type}")
    return "\n".join(lines)


def format_token_price(
    token_address: str, chain: str, info: PriceInfo, timestamp: str | None = None
) -> str:
    price = Decimal(info.amount) if info.amount is not None else Decimal(0)
    currency = info.currency or "USD"
    symbol = info.symbol or "Unknown Token"
    name = info.name or token_address

    lines = [
        "💰 **Token Price Information**",
        "",
        f"🏷️ **Token:** {name} ({symbol})",
        f"📍 **Address:** {token_address}",
        f"⛓️ **Chain:** {chain}",
        f"💵 **Price:** ${format_amount(price)} {currency}",
    ]
    if timestamp:
        day = datetime.fromtimestamp(int(timestamp), tz=UTC).strftime("%Y-%m-%d")
        lines.append(f"📅 **Date:** {day} (Historical)")
    else:
        lines.append("⏰ **Updated:** Just now (Current)")
    if info.liquidity:
        lines.append(f"💧 **Liquidity:** ${format_amount(Decimal(info.liquidity))}")
    if info.exchange_name:
        lines.append(f"🏪 **Exchange:** {info.exchange_name}")
    return "\n".join(lines)
