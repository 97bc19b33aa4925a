"""LLM provider abstraction for summary generation."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import openai
from openai import AsyncOpenAI

from core.config import OpenAISettings
from core.exceptions import ApiConfigurationError, ProviderError

logger = logging.getLogger(__name__)

_AUTH_MARKERS = ("401", "invalid_api_key", "Incorrect API key")


def is_auth_failure(exc: BaseException) -> bool:
    """Whether a provider error means our credentials were rejected."""
    if isinstance(exc, openai.AuthenticationError):
        return True
    message = str(exc)
    return any(marker in message for marker in _AUTH_MARKERS)


class SummaryProvider(ABC):
    """Abstract base class for summary LLM providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for identification."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate a response for the given prompt.

        Args:
            prompt: Input prompt

        Returns:
            Generated text (may be empty)

        Raises:
            ProviderError: The upstream API failed or rejected the request
        """


class OpenAIProvider(SummaryProvider):
    """OpenAI chat completions provider.

    Works with any OpenAI-compatible endpoint via ``base_url``. The client is
    built with ``max_retries=0``: a failed call surfaces immediately.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 1000,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model identifier (gpt-4o-mini, gpt-4o, etc.)
            temperature: Sampling temperature
            max_tokens: Max tokens in response
            base_url: Alternate OpenAI-compatible API root
            timeout: Request timeout in seconds
            client: Pre-built client (tests)
        """
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    @classmethod
    def from_settings(cls, settings: OpenAISettings) -> "OpenAIProvider":
        api_key = (settings.api_key or "").strip()
        if not api_key:
            raise ApiConfigurationError("OpenAI API key is not configured")
        return cls(
            api_key=api_key,
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @property
    def name(self) -> str:
        return "openai"

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str) -> str:
        """Generate single response via the Chat Completions API."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except openai.APIError as e:
            auth = is_auth_failure(e)
            logger.error(
                "OpenAI generation failed",
                extra={"model": self._model, "auth_failure": auth, "error": str(e)},
            )
            raise ProviderError(
                str(e),
                auth_failure=auth,
                status_code=getattr(e, "status_code", None),
            ) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


class UnconfiguredProvider(SummaryProvider):
    """Stand-in used when no API key is set; every call reports the gap."""

    def __init__(self, reason: str):
        self._reason = reason

    @property
    def name(self) -> str:
        return "unconfigured"

    async def generate(self, prompt: str) -> str:
        raise ApiConfigurationError(self._reason)


def create_provider(settings: OpenAISettings) -> SummaryProvider:
    """Build the configured provider, deferring config errors to call time."""
    try:
        return OpenAIProvider.from_settings(settings)
    except ApiConfigurationError as e:
        logger.warning("Summarization provider unavailable: %s", e)
        return UnconfiguredProvider(str(e))
