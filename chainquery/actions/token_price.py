"""GET_TOKEN_PRICE — current or historical token price."""

from __future__ import annotations

import logging
import time
from typing import Callable

from chainquery.actions.base import ProviderAction
from chainquery.config import DisplayConfig
from chainquery.extract import contains_any
from chainquery.models import ExtractedData, TokenPriceParams
from chainquery.output import format_token_price
from chainquery.provider import IntentProvider
from chainquery.ratelimit import RateLimiter
from chainquery.runtime import Message, Response
from chainquery.validate import ValidationResult, validate_address

logger = logging.getLogger(__name__)

HISTORICAL_KEYWORDS = ("ago", "was", "month", "week", "day")
HISTORICAL_LOOKBACK_SECONDS = 30 * 24 * 60 * 60


class GetTokenPriceAction(ProviderAction):
    """Handles: "what is the price of the 0xae7a...fe84 token on ethereum?" """

    name = "GET_TOKEN_PRICE"
    similes = ("TOKEN_PRICE", "PRICE_CHECK", "TOKEN_VALUE")
    description = "Gets current or historical price information for a token"
    keywords = ("price", "value", "cost", "worth", "usd")
    target_option = "address"

    missing_text = (
        "I need a valid token address and chain to check the price. "
        "Please provide a token address like 0x... and specify the chain."
    )
    invalid_text = (
        "Invalid token address or chain. Please provide a valid token address "
        "and supported chain."
    )

    examples = [
        [
            {
                "name": "User",
                "content": {
                    "text": "what is the price of the "
                    "0xae7ab96520de3a18e5e111b5eaab095312d7fe84 token on ethereum?",
                },
            },
            {
                "name": "Assistant",
                "content": {
                    "text": "💰 **Token Price Information**\n\n"
                    "🏷️ **Token:** Lido Staked ETH (stETH)\n"
                    "📍 **Address:** 0xae7ab96520de3a18e5e111b5eaab095312d7fe84\n"
                    "⛓️ **Chain:** ethereum\n"
                    "💵 **Price:** $3,245.67 USD",
                    "actions": ["GET_TOKEN_PRICE"],
                },
            },
        ],
    ]

    def __init__(
        self,
        provider: IntentProvider,
        rate_limiter: RateLimiter,
        display: DisplayConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(provider, rate_limiter, display)
        self._clock = clock

    def targets(self, data: ExtractedData) -> list[str]:
        return data.addresses

    def validate_target(self, value: str) -> ValidationResult:
        return validate_address(value)

    def historical_timestamp(self, text: str) -> str | None:
        """Unix seconds 30 days ago when the text asks about the past, else None."""
        if not contains_any(text, HISTORICAL_KEYWORDS):
            return None
        return str(int(self._clock() - HISTORICAL_LOOKBACK_SECONDS))

    async def fetch(self, target: str, chain: str, message: Message) -> Response:
        timestamp = self.historical_timestamp(message.text)
        logger.info(
            "[%s] Getting %s price for %s on %s",
            self.name, "historical" if timestamp else "current", target, chain,
        )
        await self.acquire()
        params = TokenPriceParams(chain=chain, token_address=target, timestamp=timestamp)
        info = await self.provider.get_token_price(params)

        if info is None or not info.has_price:
            logger.warning("[%s] Price data not available", self.name)
            return self.reply(
                f"Price data not available for token {target} on {chain}.", message
            )

        return self.reply(format_token_price(target, chain, info, timestamp), message)

    def error_text(self, error: Exception, data: ExtractedData) -> str:
        return f"Sorry, I encountered an error while fetching token price: {error}"
