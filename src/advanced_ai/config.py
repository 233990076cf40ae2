"""Process configuration loaded from environment variables.

Keeps every credential and endpoint setting in one place. A `.env` file in
the working directory is read first.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class AppConfig(BaseModel):
    """Environment-derived settings for the relay server and the client."""

    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    openai_base_url: str | None = Field(default=None, description="Custom OpenAI-compatible base URL")
    openai_organization: str | None = Field(default=None, description="OpenAI organization ID")
    relay_host: str = Field(default="127.0.0.1", description="Interface the relay binds to")
    relay_port: int = Field(default=8000, description="Port the relay listens on")
    relay_url: str = Field(default="http://127.0.0.1:8000", description="Relay base URL used by the client")
    log_level: str = Field(default="info", description="debug, info, warning or error")
    client_bundle_url: str = Field(
        default="/static/client.js",
        description="Script URL embedded in the HTML shell"
    )
    static_dir: str | None = Field(default=None, description="Directory served under /static (holds the client bundle)")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from the current environment.

        Environment variables:
            OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_ORGANIZATION
            RELAY_HOST (default: 127.0.0.1), RELAY_PORT (default: 8000)
            RELAY_URL (default: http://127.0.0.1:8000)
            LOG_LEVEL (default: info)
            CLIENT_BUNDLE_URL (default: /static/client.js)
            STATIC_DIR (optional)

        A non-numeric RELAY_PORT falls back to 8000.
        """
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
            openai_organization=os.getenv("OPENAI_ORGANIZATION") or None,
            relay_host=os.getenv("RELAY_HOST", "127.0.0.1"),
            relay_port=_env_int("RELAY_PORT", 8000),
            relay_url=os.getenv("RELAY_URL", "http://127.0.0.1:8000"),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            client_bundle_url=os.getenv("CLIENT_BUNDLE_URL", "/static/client.js"),
            static_dir=os.getenv("STATIC_DIR") or None,
        )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return AppConfig.from_env()
