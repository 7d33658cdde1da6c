"""GET_TRANSLATED_TX — explain a single transaction."""

from __future__ import annotations

import logging

from chainquery.actions.base import ProviderAction
from chainquery.models import ExtractedData
from chainquery.output import format_translated_tx
from chainquery.runtime import Message, Response
from chainquery.validate import ValidationResult, validate_tx_hash

logger = logging.getLogger(__name__)


class GetTranslatedTxAction(ProviderAction):
    """Handles: "what happened in 0x700d...81f6 on ethereum?" """

    name = "GET_TRANSLATED_TX"
    similes = ("EXPLAIN_TRANSACTION", "TRANSACTION_DETAILS", "WHAT_HAPPENED")
    description = "Gets detailed human-readable information about a specific transaction"
    keywords = ("transaction", "happened", "understand", "explain", "details")
    target_option = "tx_hash"

    missing_text = (
        "I need a valid transaction hash and chain to explain the transaction. "
        "Please provide a transaction hash like 0x... and specify the chain."
    )
    invalid_text = (
        "Invalid transaction hash or chain. Please provide a valid transaction hash "
        "(0x...) and supported chain."
    )

    examples = [
        [
            {
                "name": "User",
                "content": {
                    "text": "what happened in 0x700d06dc473f95530a0dfa04c1fe679aecd722d2"
                    "a14e07170704fb7a8d2381f6 on ethereum?",
                },
            },
            {
                "name": "Assistant",
                "content": {
                    "text": "🔍 **Transaction Analysis for 0x700d06dc473f95530a0dfa04c1fe679a"
                    "ecd722d2a14e07170704fb7a8d2381f6**\n\n"
                    "📋 **Description:** Swapped 1.5 ETH for 3,240 USDC\n"
                    "⏰ **Time:** 2025-12-13 14:30:45 UTC",
                    "actions": ["GET_TRANSLATED_TX"],
                },
            },
        ],
    ]

    def targets(self, data: ExtractedData) -> list[str]:
        return data.tx_hashes

    def validate_target(self, value: str) -> ValidationResult:
        return validate_tx_hash(value)

    async def fetch(self, target: str, chain: str, message: Message) -> Response:
        logger.info("[%s] Getting transaction details for %s on %s", self.name, target, chain)
        await self.acquire()
        tx = await self.provider.get_translated_tx(chain, target)
        logger.info("[%s] API response received: %s", self.name, tx)

        if tx is None:
            logger.warning("[%s] Transaction not found", self.name)
            return self.reply(f"Transaction {target} not found on {chain}.", message)

        return self.reply(format_translated_tx(target, chain, tx), message)

    def error_text(self, error: Exception, data: ExtractedData) -> str:
        return f"Sorry, I encountered an error while analyzing the transaction: {error}"
