"""Tests for the OpenAI provider and its error mapping."""

from types import SimpleNamespace

import httpx
import openai
import pytest

from core.config import OpenAISettings
from core.exceptions import ApiConfigurationError, ProviderError
from services.providers import (
    OpenAIProvider,
    UnconfiguredProvider,
    create_provider,
    is_auth_failure,
)

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        choices = []
        if self.content is not None:
            choices = [SimpleNamespace(message=SimpleNamespace(content=self.content))]
        return SimpleNamespace(choices=choices)


def _client(completions: FakeCompletions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def _status_error(cls, status: int, message: str):
    return cls(message, response=httpx.Response(status, request=_REQUEST), body=None)


class TestOpenAIProvider:
    @pytest.mark.asyncio
    async def test_generate_sends_prompt_with_settings(self):
        completions = FakeCompletions(content='{"summary": "ok"}')
        provider = OpenAIProvider(
            api_key="sk-test",
            model="gpt-test",
            temperature=0.1,
            max_tokens=50,
            client=_client(completions),
        )

        assert await provider.generate("hello") == '{"summary": "ok"}'
        call = completions.calls[0]
        assert call["model"] == "gpt-test"
        assert call["temperature"] == 0.1
        assert call["max_tokens"] == 50
        assert call["messages"] == [{"role": "user", "content": "hello"}]

    @pytest.mark.asyncio
    async def test_no_choices_returns_empty(self):
        provider = OpenAIProvider(api_key="k", client=_client(FakeCompletions()))
        assert await provider.generate("hello") == ""

    @pytest.mark.asyncio
    async def test_authentication_error_flagged(self):
        error = _status_error(openai.AuthenticationError, 401, "Incorrect API key provided")
        provider = OpenAIProvider(api_key="bad", client=_client(FakeCompletions(error=error)))

        with pytest.raises(ProviderError) as exc_info:
            await provider.generate("hello")
        assert exc_info.value.auth_failure is True
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_other_api_error_not_auth(self):
        error = _status_error(openai.RateLimitError, 429, "Rate limit reached")
        provider = OpenAIProvider(api_key="k", client=_client(FakeCompletions(error=error)))

        with pytest.raises(ProviderError) as exc_info:
            await provider.generate("hello")
        assert exc_info.value.auth_failure is False
        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    async def test_connection_error(self):
        error = openai.APIConnectionError(request=_REQUEST)
        provider = OpenAIProvider(api_key="k", client=_client(FakeCompletions(error=error)))

        with pytest.raises(ProviderError) as exc_info:
            await provider.generate("hello")
        assert exc_info.value.auth_failure is False


class TestAuthFailureDetection:
    @pytest.mark.parametrize(
        "message",
        ["Error code: 401", "invalid_api_key", "Incorrect API key provided: sk-***"],
    )
    def test_markers(self, message):
        assert is_auth_failure(Exception(message)) is True

    def test_unrelated_message(self):
        assert is_auth_failure(Exception("Error code: 500 - server error")) is False


class TestProviderFactory:
    def test_missing_key_gives_unconfigured_provider(self):
        provider = create_provider(OpenAISettings())
        assert isinstance(provider, UnconfiguredProvider)
        assert provider.name == "unconfigured"

    def test_from_settings_requires_key(self):
        with pytest.raises(ApiConfigurationError):
            OpenAIProvider.from_settings(OpenAISettings(api_key="   "))

    def test_configured_key(self):
        provider = create_provider(OpenAISettings(api_key="sk-test", model="gpt-4o"))
        assert isinstance(provider, OpenAIProvider)
        assert provider.name == "openai"
        assert provider.model == "gpt-4o"

    @pytest.mark.asyncio
    async def test_unconfigured_provider_raises_on_use(self):
        with pytest.raises(ApiConfigurationError, match="not configured"):
            await UnconfiguredProvider("OpenAI API key is not configured").generate("x")
