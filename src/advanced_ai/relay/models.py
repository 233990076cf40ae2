"""Wire schemas for the /chat endpoint.

Shared by the relay (request parsing) and the client transport
(request building), so both ends agree on one contract.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who produced a message."""

    USER = "user"
    AI = "ai"
    SYSTEM = "system"


class ModelName(str, Enum):
    """Completion models selectable from the settings panel."""

    GPT_4O_MINI = "gpt-4o-mini"
    GPT_35_TURBO = "gpt-3.5-turbo"


DEFAULT_MODEL = ModelName.GPT_4O_MINI
DEFAULT_MAX_TOKENS = 300
DEFAULT_TEMPERATURE = 0.7

MAX_TOKENS_MIN = 50
MAX_TOKENS_MAX = 500
TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 1.0


class RelayMessage(BaseModel):
    """One entry of the conversation snapshot.

    Extra keys (the client-side id, for instance) are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str = Field(description="Message text")
    sender: Sender = Field(description="Message author: user, ai or system")


class RelaySettings(BaseModel):
    """Per-request model settings. Absent fields fall back to relay defaults."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    model: ModelName | None = Field(default=None, description="Completion model")
    max_tokens: int | None = Field(
        default=None,
        alias="maxTokens",
        ge=MAX_TOKENS_MIN,
        le=MAX_TOKENS_MAX,
        description="Maximum tokens to generate"
    )
    temperature: float | None = Field(
        default=None,
        ge=TEMPERATURE_MIN,
        le=TEMPERATURE_MAX,
        description="Sampling temperature"
    )


class ChatRequest(BaseModel):
    """Body of POST /chat."""

    messages: list[RelayMessage] = Field(description="Conversation snapshot, oldest first")
    settings: RelaySettings | None = Field(
        default=None,
        description="Model settings; omitted means all defaults"
    )


class ChatResponse(BaseModel):
    """Successful reply from POST /chat."""

    response: str = Field(description="Generated reply text")


class ErrorResponse(BaseModel):
    """Structured error body for rejected or failed requests."""

    error: str = Field(description="Error kind: invalid_request, upstream_error or not_found")
    detail: list | str | None = Field(default=None, description="Validation details, if any")
