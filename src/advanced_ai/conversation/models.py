"""Data models for the conversation state machine.

Hides the representation of messages, settings and the application state
that the UI projects onto the screen. Every model here is immutable;
the controller swaps whole values instead of mutating them.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..relay.models import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    MAX_TOKENS_MAX,
    MAX_TOKENS_MIN,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    ModelName,
    Sender,
)
from .config import PLACEHOLDER_TEXT, WELCOME_MESSAGE_ID, WELCOME_TEXT


class Theme(str, Enum):
    """Color scheme of the chat window."""

    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True)
class Message:
    """A chat message in the conversation."""

    id: int  # strictly increasing in insertion order
    text: str
    sender: Sender

    @property
    def is_generating(self) -> bool:
        """True for the transient placeholder shown while a reply is pending."""
        return self.sender == Sender.SYSTEM and self.text == PLACEHOLDER_TEXT


def _coerce_number(value: Any) -> float | None:
    """Parse a slider value; None when it is not a finite number."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


class Settings(BaseModel):
    """Model settings chosen in the settings panel."""

    model_config = ConfigDict(frozen=True)

    model: ModelName = Field(default=DEFAULT_MODEL, description="Completion model")
    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        ge=MAX_TOKENS_MIN,
        le=MAX_TOKENS_MAX,
        description="Maximum tokens to generate"
    )
    temperature: float = Field(
        default=DEFAULT_TEMPERATURE,
        ge=TEMPERATURE_MIN,
        le=TEMPERATURE_MAX,
        description="Sampling temperature (shown as Creativity)"
    )

    def merge(self, name: str, value: Any) -> "Settings":
        """Return a copy with one setting changed.

        Input is coerced, never rejected: numbers arrive as strings from
        the UI, out-of-range numbers are clamped, and values that cannot be
        parsed leave the setting unchanged.

        Args:
            name: "model", "maxTokens"/"max_tokens" or "temperature"
            value: Raw value from the settings panel

        Raises:
            ValueError: If name is not a known setting
        """
        if name in ("maxTokens", "max_tokens"):
            number = _coerce_number(value)
            if number is None:
                return self
            tokens = min(max(round(number), MAX_TOKENS_MIN), MAX_TOKENS_MAX)
            return self.model_copy(update={"max_tokens": tokens})

        if name == "temperature":
            number = _coerce_number(value)
            if number is None:
                return self
            temperature = min(max(number, TEMPERATURE_MIN), TEMPERATURE_MAX)
            return self.model_copy(update={"temperature": temperature})

        if name == "model":
            try:
                return self.model_copy(update={"model": ModelName(str(value))})
            except ValueError:
                return self

        raise ValueError(f"Unknown setting: {name}")


def _welcome() -> tuple[Message, ...]:
    return (Message(id=WELCOME_MESSAGE_ID, text=WELCOME_TEXT, sender=Sender.SYSTEM),)


@dataclass(frozen=True)
class AppState:
    """Everything the chat window shows, as one immutable value."""

    messages: tuple[Message, ...] = field(default_factory=_welcome)
    input: str = ""
    loading: bool = False
    theme: Theme = Theme.DARK
    settings: Settings = field(default_factory=Settings)
    show_settings: bool = False

    def evolve(self, **changes: Any) -> "AppState":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
