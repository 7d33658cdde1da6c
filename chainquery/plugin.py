"""
Plugin composition root.

build_plugin() wires one RateLimiter and one provider client into the
three actions and returns the Plugin the host registers. Each call builds
a fresh limiter; a process should build the plugin once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chainquery.actions import (
    GetRecentTxsAction,
    GetTokenPriceAction,
    GetTranslatedTxAction,
    ProviderAction,
)
from chainquery.config import ChainqueryConfig
from chainquery.provider import IntentProvider, NovesClient
from chainquery.ratelimit import (
    MAX_REQUESTS,
    MIN_INTERVAL_SECONDS,
    WINDOW_SECONDS,
    RateLimiter,
)

logger = logging.getLogger(__name__)

PLUGIN_NAME = "plugin-noves"
PLUGIN_DESCRIPTION = "Agent plugin for blockchain data using Noves Intents"


@dataclass
class Plugin:
    """What the host runtime registers: metadata plus the action list."""

    name: str
    description: str
    actions: list[ProviderAction] = field(default_factory=list)
    rate_limiter: RateLimiter | None = None

    def action_names(self) -> list[str]:
        return [action.name for action in self.actions]

    def get_action(self, name: str) -> ProviderAction | None:
        for action in self.actions:
            if action.name == name or name in action.similes:
                return action
        return None

    async def init(self) -> None:
        logger.info("Noves blockchain plugin initialized successfully")
        logger.info("Available actions: %s", ", ".join(self.action_names()))
        if self.rate_limiter is not None:
            limits = (
                self.rate_limiter.max_requests,
                self.rate_limiter.window_seconds,
                self.rate_limiter.min_interval_seconds,
            )
        else:
            limits = (MAX_REQUESTS, WINDOW_SECONDS, MIN_INTERVAL_SECONDS)
        logger.info("Rate limiting: %d requests per %gs, %gs intervals", *limits)


def build_plugin(
    config: ChainqueryConfig | None = None,
    provider: IntentProvider | None = None,
    rate_limiter: RateLimiter | None = None,
) -> Plugin:
    """Create the plugin with a shared provider and rate limiter."""
    config = config or ChainqueryConfig()
    if rate_limiter is None:
        rate_limiter = RateLimiter(
            max_requests=config.rate_limit.max_requests,
            window_seconds=config.rate_limit.window_seconds,
            min_interval_seconds=config.rate_limit.min_interval_seconds,
        )
    if provider is None:
        provider = NovesClient(config.provider)

    actions: list[ProviderAction] = [
        GetRecentTxsAction(provider, rate_limiter, config.display),
        GetTranslatedTxAction(provider, rate_limiter, config.display),
        GetTokenPriceAction(provider, rate_limiter, config.display),
    ]
    return Plugin(
        name=PLUGIN_NAME,
        description=PLUGIN_DESCRIPTION,
        actions=actions,
        rate_limiter=rate_limiter,
    )
