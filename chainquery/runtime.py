"""
Narrow interface to the host agent runtime.

Only the pieces the actions actually touch are modelled: the message
text and its source tag going in, a Response delivered through an async
callback coming out. Host objects of any other shape are adapted with
Message.from_dict().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable


@dataclass
class Message:
    """An incoming user message."""

    text: str
    source: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Message:
        """Adapt a host memory dict: {"content": {"text": ..., "source": ...}}."""
        content = raw.get("content") or {}
        return cls(text=str(content.get("text") or ""), source=content.get("source"))


@dataclass
class Response:
    """A reply handed back to the host through the callback."""

    text: str
    actions: list[str] = field(default_factory=list)
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"text": self.text, "source": self.source}
        if self.actions:
            d["actions"] = list(self.actions)
        return d


HandlerCallback = Callable[[Response], Awaitable[Any]]
