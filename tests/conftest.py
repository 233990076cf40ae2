"""Pytest configuration and shared fixtures."""
import asyncio
from collections.abc import Sequence
from unittest.mock import AsyncMock

import pytest

from advanced_ai.conversation import ConversationController, Message, Settings
from advanced_ai.llm import LLMProvider, LLMResponse


class FakeRelay:
    """Relay transport double that records every call.

    Replies with `reply`, or raises `error` when set. When `gate` is set the
    call blocks until the gate is released, which keeps a request in flight.
    """

    def __init__(self, reply: str = "Hi there!", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple[tuple[Message, ...], Settings]] = []

    async def send(self, messages: Sequence[Message], settings: Settings) -> str:
        self.calls.append((tuple(messages), settings))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_relay():
    """Return a relay double that answers "Hi there!"."""
    return FakeRelay()


@pytest.fixture
def controller(fake_relay):
    """Return a controller in its initial state, wired to fake_relay."""
    return ConversationController(fake_relay)


@pytest.fixture
def mock_llm():
    """Return a provider mock whose completions answer "Hi there!"."""
    llm = AsyncMock(spec=LLMProvider)
    llm.chat_completion.return_value = LLMResponse(
        content="Hi there!",
        model="gpt-4o-mini",
        usage={"prompt_tokens": 10, "completion_tokens": 3, "total_tokens": 13},
    )
    return llm
