"""Tests for chainquery/plugin.py and chainquery/log.py."""

from __future__ import annotations

import logging

import pytest

from chainquery.config import LoggingConfig
from chainquery.log import configure_logging
from chainquery.plugin import Plugin, build_plugin
from chainquery.provider import NovesClient
from chainquery.ratelimit import RateLimiter
from chainquery.runtime import Message, Response
from conftest import ADDRESS, FakeProvider, RecordingCallback


def test_build_plugin_defaults() -> None:
    plugin = build_plugin()
    assert plugin.name == "plugin-noves"
    assert plugin.action_names() == ["GET_RECENT_TXS", "GET_TRANSLATED_TX", "GET_TOKEN_PRICE"]
    assert isinstance(plugin.actions[0].provider, NovesClient)
    assert plugin.rate_limiter.max_requests == 30


def test_actions_share_one_limiter_and_provider(provider: FakeProvider) -> None:
    plugin = build_plugin(provider=provider)
    limiters = {id(action.rate_limiter) for action in plugin.actions}
    providers = {id(action.provider) for action in plugin.actions}
    assert limiters == {id(plugin.rate_limiter)}
    assert providers == {id(provider)}


def test_build_plugin_uses_config(sample_config) -> None:
    sample_config.rate_limit.max_requests = 7
    sample_config.display.max_recent_txs = 2
    plugin = build_plugin(sample_config, provider=FakeProvider())
    assert plugin.rate_limiter.max_requests == 7
    assert plugin.actions[0].display.max_recent_txs == 2


def test_get_action_by_name_or_simile(provider: FakeProvider) -> None:
    plugin = build_plugin(provider=provider)
    assert plugin.get_action("GET_TOKEN_PRICE").name == "GET_TOKEN_PRICE"
    assert plugin.get_action("WALLET_HISTORY").name == "GET_RECENT_TXS"
    assert plugin.get_action("NOPE") is None


@pytest.mark.asyncio
async def test_init_logs_three_lines(caplog: pytest.LogCaptureFixture) -> None:
    plugin = build_plugin(provider=FakeProvider())
    with caplog.at_level(logging.INFO, logger="chainquery.plugin"):
        await plugin.init()
    messages = [r.getMessage() for r in caplog.records if r.name == "chainquery.plugin"]
    assert len(messages) == 3
    assert "initialized" in messages[0]
    assert "GET_RECENT_TXS, GET_TRANSLATED_TX, GET_TOKEN_PRICE" in messages[1]
    assert "30 requests per 60s, 2s intervals" in messages[2]


@pytest.mark.asyncio
async def test_end_to_end_through_plugin(clock) -> None:
    provider = FakeProvider()
    limiter = RateLimiter(clock=clock, sleep=clock.sleep)
    plugin = build_plugin(provider=provider, rate_limiter=limiter)
    message = Message.from_dict(
        {"content": {"text": f"wallet history for {ADDRESS} on eth", "source": "telegram"}}
    )

    matching = [a for a in plugin.actions if await a.validate(None, message, None)]
    assert [a.name for a in matching] == ["GET_RECENT_TXS"]

    callback = RecordingCallback()
    await matching[0].handler(None, message, None, None, callback)
    assert callback.responses == [
        Response(
            text=f"No recent transactions found for {ADDRESS} on ethereum.",
            actions=["GET_RECENT_TXS"],
            source="telegram",
        )
    ]
    assert limiter.request_timestamps == [clock.now]


def test_message_from_dict_tolerates_missing_content() -> None:
    assert Message.from_dict({}) == Message(text="", source=None)


def test_response_to_dict() -> None:
    assert Response(text="hi", source="x").to_dict() == {"text": "hi", "source": "x"}
    assert Response(text="hi", actions=["A"]).to_dict()["actions"] == ["A"]


def test_configure_logging_plain_and_rich() -> None:
    logger = configure_logging(LoggingConfig(level="DEBUG", color=False))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler

    logger = configure_logging(LoggingConfig(level="INFO", color=True))
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]).__name__ == "RichHandler"
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.mark.asyncio
async def test_init_logs_default_limits_without_limiter(
    caplog: pytest.LogCaptureFixture,
) -> None:
    plugin = Plugin(name="plugin-noves", description="test")
    with caplog.at_level(logging.INFO, logger="chainquery.plugin"):
        await plugin.init()
    messages = [r.getMessage() for r in caplog.records if r.name == "chainquery.plugin"]
    assert len(messages) == 3
    assert "30 requests per 60s, 2s intervals" in messages[2]
