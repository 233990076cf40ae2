"""Tests for the LLM provider abstraction."""
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from advanced_ai.config import AppConfig
from advanced_ai.llm import ChatMessage, LLMProvider, OpenAIProvider, create_llm_provider


def _completion(content="Hi there!", usage=True):
    return SimpleNamespace(
        model="gpt-4o-mini-2024-07-18",
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=3, total_tokens=13) if usage else None,
    )


@pytest.fixture
def provider():
    """Return an OpenAIProvider whose API client is mocked out."""
    llm = OpenAIProvider(api_key="sk-test")
    llm._client = AsyncMock()
    llm._client.chat.completions.create = AsyncMock(return_value=_completion())
    return llm


class TestFactory:
    """Tests for create_llm_provider."""

    def test_openai_from_config(self):
        config = AppConfig(openai_api_key="sk-test", openai_base_url="http://llm.local/v1")

        llm = create_llm_provider(config)

        assert isinstance(llm, OpenAIProvider)
        assert str(llm._client.base_url).startswith("http://llm.local/v1")

    def test_missing_api_key(self):
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            create_llm_provider(AppConfig())

    def test_server_and_cli_share_the_factory(self, monkeypatch):
        """Both entry points build the provider through create_llm_provider."""
        from advanced_ai.cli import providers
        from advanced_ai.relay import server

        sentinel = object()
        monkeypatch.setattr(providers, "create_llm_provider", lambda: sentinel)

        assert server.create_app.__defaults__[0] is create_llm_provider
        assert providers.get_llm() is sentinel

    def test_cli_warns_without_key(self, monkeypatch):
        from advanced_ai.cli import providers

        def missing_key():
            raise ValueError("OPENAI_API_KEY is not set")

        monkeypatch.setattr(providers, "create_llm_provider", missing_key)

        assert providers.get_llm() is None


class TestLLMProvider:
    """Tests for the abstract base class."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            LLMProvider()

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, provider):
        async with provider as entered:
            assert entered is provider

        provider._client.close.assert_awaited_once()


class TestOpenAIProvider:
    """Tests for OpenAIProvider.chat_completion."""

    @pytest.mark.asyncio
    async def test_request_parameters(self, provider):
        messages = [
            ChatMessage(role="system", content="Be brief."),
            ChatMessage(role="user", content="Hello"),
        ]

        await provider.chat_completion(
            messages, model="gpt-3.5-turbo", temperature=0.2, max_tokens=120
        )

        provider._client.chat.completions.create.assert_awaited_once_with(
            model="gpt-3.5-turbo",
            messages=[
                {"role": "system", "content": "Be brief."},
                {"role": "user", "content": "Hello"},
            ],
            temperature=0.2,
            max_tokens=120,
        )

    @pytest.mark.asyncio
    async def test_max_tokens_omitted_when_unset(self, provider):
        await provider.chat_completion([ChatMessage(role="user", content="Hi")])

        kwargs = provider._client.chat.completions.create.call_args.kwargs
        assert "max_tokens" not in kwargs
        assert kwargs["model"] == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_response_mapping(self, provider):
        result = await provider.chat_completion([ChatMessage(role="user", content="Hi")])

        assert result.content == "Hi there!"
        assert result.model == "gpt-4o-mini-2024-07-18"
        assert result.usage == {"prompt_tokens": 10, "completion_tokens": 3, "total_tokens": 13}

    @pytest.mark.asyncio
    async def test_null_content_and_usage(self, provider):
        provider._client.chat.completions.create.return_value = _completion(content=None, usage=False)

        result = await provider.chat_completion([ChatMessage(role="user", content="Hi")])

        assert result.content == ""
        assert result.usage is None
