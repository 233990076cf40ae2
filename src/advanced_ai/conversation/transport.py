"""HTTP transport from the client to the completion relay.

Hides the wire format and the HTTP client. Every failure mode (connection
error, non-2xx status, undecodable body) surfaces as a single RelayError.
"""

from collections.abc import Sequence
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from ..relay.models import ChatRequest, ChatResponse, RelayMessage, RelaySettings
from .models import Message, Settings


class RelayError(Exception):
    """The relay could not produce a reply."""


class RelayTransport(Protocol):
    """What the controller needs from a transport."""

    async def send(self, messages: Sequence[Message], settings: Settings) -> str: ...


def build_request(messages: Sequence[Message], settings: Settings) -> ChatRequest:
    """Serialize a conversation snapshot and the current settings."""
    return ChatRequest(
        messages=[RelayMessage(text=msg.text, sender=msg.sender) for msg in messages],
        settings=RelaySettings(
            model=settings.model,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        ),
    )


class RelayClient:
    """Async client for POST /chat.

    Usage:
        async with RelayClient("http://127.0.0.1:8000") as relay:
            reply = await relay.send(messages, settings)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = 60.0,
        **client_kwargs: Any
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Relay root URL
            timeout: Request timeout in seconds (None disables it)
            **client_kwargs: Additional kwargs for httpx.AsyncClient (e.g. transport)
        """
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **client_kwargs)

    async def send(self, messages: Sequence[Message], settings: Settings) -> str:
        """Post one snapshot and return the reply text.

        Raises:
            RelayError: On any network, status or decoding failure
        """
        body = build_request(messages, settings).model_dump(mode="json", by_alias=True, exclude_none=True)
        try:
            response = await self._client.post("/chat", json=body)
            response.raise_for_status()
            return ChatResponse.model_validate_json(response.content).response
        except httpx.HTTPError as e:
            raise RelayError(f"Relay request failed: {e}") from e
        except ValidationError as e:
            raise RelayError("Relay returned an invalid response body") from e

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RelayClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
