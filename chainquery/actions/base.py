"""
Shared shape of the three provider-backed actions.

Every action follows the same steps:
1. re-extract candidates from the message text (validate() and handler()
   do not share extraction results)
2. pick the first target (address or hash) and first chain; structured
   values in `options` take precedence over extracted ones
3. run the validators
4. acquire the shared rate limiter
5. call the provider
6. render the result

Missing, invalid, and not-found outcomes are ordinary replies. Any
exception raised in steps 4-6 becomes an apologetic reply that embeds the
error text. The callback fires exactly once per handler call.
"""

from __future__ import annotations

import logging
from typing import Any

from chainquery.config import DisplayConfig
from chainquery.extract import contains_any, extract_blockchain_data
from chainquery.models import ExtractedData
from chainquery.provider import IntentProvider
from chainquery.ratelimit import RateLimiter
from chainquery.runtime import HandlerCallback, Message, Response
from chainquery.validate import ValidationResult, validate_chain

logger = logging.getLogger(__name__)


class ProviderAction:
    """Base class for GET_RECENT_TXS, GET_TRANSLATED_TX and GET_TOKEN_PRICE."""

    name: str = ""
    similes: tuple[str, ...] = ()
    description: str = ""
    keywords: tuple[str, ...] = ()
    # options key for a host-supplied target ("address" or "tx_hash")
    target_option: str = "address"
    examples: list[list[dict[str, Any]]] = []

    missing_text: str = ""
    invalid_text: str = ""

    def __init__(
        self,
        provider: IntentProvider,
        rate_limiter: RateLimiter,
        display: DisplayConfig | None = None,
    ) -> None:
        self.provider = provider
        self.rate_limiter = rate_limiter
        self.display = display or DisplayConfig()

    # ── Host contract ─────────────────────────────────────────────────────────

    async def validate(self, runtime: Any, message: Message, state: Any = None) -> bool:
        return self.matches(message.text)

    async def handler(
        self,
        runtime: Any,
        message: Message,
        state: Any,
        options: dict[str, Any] | None,
        callback: HandlerCallback,
        responses: list[Message] | None = None,
    ) -> None:
        logger.info("[%s] Starting handler", self.name)
        response = await self.respond(message, options or {})
        await callback(response)
        logger.info("[%s] Callback completed", self.name)

    # ── Per-action hooks ──────────────────────────────────────────────────────

    def matches(self, text: str) -> bool:
        """Intent keywords present and the needed values extractable."""
        data = extract_blockchain_data(text)
        return (
            contains_any(text, self.keywords)
            and bool(self.targets(data))
            and bool(data.chains)
        )

    def targets(self, data: ExtractedData) -> list[str]:
        raise NotImplementedError

    def validate_target(self, value: str) -> ValidationResult:
        raise NotImplementedError

    async def fetch(self, target: str, chain: str, message: Message) -> Response:
        """Acquire the limiter, call the provider, and render a Response."""
        raise NotImplementedError

    def error_text(self, error: Exception, data: ExtractedData) -> str:
        raise NotImplementedError

    # ── Orchestration ─────────────────────────────────────────────────────────

    async def respond(self, message: Message, options: dict[str, Any]) -> Response:
        data = extract_blockchain_data(message.text)
        logger.info(
            "[%s] Extracted data - addresses: %s, tx_hashes: %s, chains: %s",
            self.name, data.addresses, data.tx_hashes, data.chains,
        )

        targets = self.targets(data)
        target = options.get(self.target_option) or (targets[0] if targets else None)
        chain = options.get("chain") or data.first_chain()
        if not target or not chain:
            logger.warning("[%s] Missing %s or chain", self.name, self.target_option)
            return Response(text=self.missing_text, source=message.source)

        valid_target = self.validate_target(str(target))
        valid_chain = validate_chain(str(chain))
        logger.info(
            "[%s] Validation results - %s: %s, chain: %s",
            self.name, self.target_option, valid_target.success, valid_chain.success,
        )
        if not valid_target.success or not valid_chain.success:
            logger.warning(
                "[%s] Validation failed - %s: %s, chain: %s",
                self.name, self.target_option, valid_target.error, valid_chain.error,
            )
            return Response(text=self.invalid_text, source=message.source)

        try:
            return await self.fetch(valid_target.value, valid_chain.value, message)
        except Exception as e:
            logger.exception("[%s] Error in action", self.name)
            return Response(text=self.error_text(e, data), source=message.source)

    async def acquire(self) -> None:
        logger.info("[%s] Waiting for rate limiter...", self.name)
        await self.rate_limiter.acquire()
        logger.info("[%s] Rate limiter passed", self.name)

    def reply(self, text: str, message: Message) -> Response:
        """Response tagged with this action's name."""
        return Response(text=text, actions=[self.name], source=message.source)
