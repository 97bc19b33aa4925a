"""Exception taxonomy shared by services and the HTTP layer.

Services raise these; ``api.errors`` turns each into a ``{message, details}``
response with the matching status code.
"""

from __future__ import annotations

from typing import Optional


class SummarizerError(Exception):
    """Base class for errors the API knows how to report."""


class InvalidRequestError(SummarizerError):
    """Request body is missing required content or is malformed."""


class ArticleScrapingError(SummarizerError):
    """Fetching or extracting article content failed.

    The message is user-facing input to ``describe_scraping_error``, so keep
    the phrases it looks for ("Failed to connect", "Invalid URL", "paywall").
    """


class SummarizationError(SummarizerError):
    """LLM output could not be turned into a summary."""


class ApiConfigurationError(SummarizerError):
    """Summarization provider is not configured (e.g. missing API key)."""


class ProviderError(SummarizerError):
    """Upstream LLM provider rejected or failed the request."""

    def __init__(self, message: str, *, auth_failure: bool = False, status_code: Optional[int] = None):
        super().__init__(message)
        self.auth_failure = auth_failure
        self.status_code = status_code


class AuthenticationError(SummarizerError):
    """Bad credentials or a registration conflict."""


class NotAuthenticatedError(SummarizerError):
    """Endpoint requires a valid bearer token."""


class NotFoundError(SummarizerError):
    """Record does not exist or is not owned by the caller."""
