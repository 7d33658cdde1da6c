"""GET_RECENT_TXS — recent wallet activity with human-readable descriptions."""

from __future__ import annotations

import logging

from chainquery.actions.base import ProviderAction
from chainquery.models import ExtractedData
from chainquery.output import format_recent_txs
from chainquery.runtime import Message, Response
from chainquery.validate import ValidationResult, validate_address

logger = logging.getLogger(__name__)


class GetRecentTxsAction(ProviderAction):
    """Handles: "what was the activity of 0x6257...b6Ab on ethereum?" """

    name = "GET_RECENT_TXS"
    similes = ("WALLET_ACTIVITY", "RECENT_TRANSACTIONS", "WALLET_HISTORY")
    description = "Gets recent transactions for a wallet address with human-readable descriptions"
    keywords = ("activity", "transactions", "recent", "history", "wallet", "happened")
    target_option = "address"

    missing_text = (
        "I need a valid wallet address and chain to check recent transactions. "
        "Please provide an address like 0x... and specify the chain (ethereum, polygon, etc.)"
    )
    invalid_text = (
        "Invalid address or chain. Please provide a valid Ethereum address (0x...) and "
        "supported chain (ethereum, polygon, base, arbitrum, optimism, bsc)."
    )

    examples = [
        [
            {
                "name": "User",
                "content": {
                    "text": "what was the activity of "
                    "0x625758C705bf970375fF780f3544C1ddc8eeb6Ab on ethereum?",
                },
            },
            {
                "name": "Assistant",
                "content": {
                    "text": "🔍 **Recent activity for "
                    "0x625758C705bf970375fF780f3544C1ddc8eeb6Ab on ethereum:**\n\n"
                    "1. **Swapped ETH for USDC**\n"
                    "   • Hash: 0x12345678...\n"
                    "   • Time: 2025-12-13 14:30:45 UTC",
                    "actions": ["GET_RECENT_TXS"],
                },
            },
        ],
    ]

    def targets(self, data: ExtractedData) -> list[str]:
        return data.addresses

    def validate_target(self, value: str) -> ValidationResult:
        return validate_address(value)

    async def fetch(self, target: str, chain: str, message: Message) -> Response:
        logger.info("[%s] Getting recent transactions for %s on %s", self.name, target, chain)
        await self.acquire()
        txs = await self.provider.get_recent_txs(chain, target)
        logger.info("[%s] API response received: %d transactions", self.name, len(txs or []))

        if not txs:
            logger.warning("[%s] No transactions found", self.name)
            return self.reply(f"No recent transactions found for {target} on {chain}.", message)

        text = format_recent_txs(target, chain, txs, limit=self.display.max_recent_txs)
        return self.reply(text, message)

    def error_text(self, error: Exception, data: ExtractedData) -> str:
        address = data.first_address() or "the address"
        chain = data.first_chain() or "the chain"
        return (
            f"Sorry, I encountered an error while fetching recent transactions for {address} "
            f"on {chain}. This could be due to API rate limiting, network issues, or missing "
            f"API credentials. Error: {error}"
        )
