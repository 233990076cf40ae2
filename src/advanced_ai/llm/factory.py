from ..config import AppConfig, get_config
from .base import LLMProvider
from .providers import OpenAIProvider


def create_llm_provider(config: AppConfig | None = None) -> LLMProvider:
    """Create the completion provider from configuration.

    Args:
        config: Configuration to read credentials from (None uses get_config())

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If OPENAI_API_KEY is not set
    """
    config = config or get_config()
    if not config.openai_api_key:
        raise ValueError("OPENAI_API_KEY is not set")
    return OpenAIProvider(
        api_key=config.openai_api_key,
        base_url=config.openai_base_url,
        organization=config.openai_organization,
    )
