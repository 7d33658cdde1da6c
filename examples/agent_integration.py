"""Agent integration example for chainquery.

This script plays the part of a host runtime: it builds the plugin,
routes each user message to every action whose validate() accepts it,
and prints whatever the handler sends back.
"""

import asyncio

from chainquery import Message, Response, build_plugin, load_config
from chainquery.log import configure_logging

QUESTIONS = [
    "what was the activity of 0x625758C705bf970375fF780f3544C1ddc8eeb6Ab on ethereum?",
    "what happened in 0x700d06dc473f95530a0dfa04c1fe679aecd722d2a14e07170704fb7a8d2381f6 on ethereum?",
    "what is the price of the 0xae7ab96520de3a18e5e111b5eaab095312d7fe84 token on ethereum?",
    "show me recent activity",
]


async def print_reply(response: Response) -> None:
    print(response.text)
    print("-" * 60)


async def main() -> None:
    config = load_config()
    configure_logging(config.logging)
    plugin = build_plugin(config)
    await plugin.init()

    for question in QUESTIONS:
        message = Message(text=question, source="example")
        matched = False
        for action in plugin.actions:
            if await action.validate(None, message, None):
                matched = True
                await action.handler(None, message, None, None, print_reply)
        if not matched:
            print(f"No action matched: {question!r}")


if __name__ == "__main__":
    asyncio.run(main())
