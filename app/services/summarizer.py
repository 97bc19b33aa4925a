from __future__ import annotations

import logging
from typing import Optional

from core.exceptions import ApiConfigurationError, ProviderError, SummarizationError
from core.text import compression_ratio, count_words
from models import Article, SummarizationResponse, Summary
from services.providers import SummaryProvider
from services.summarization import PromptBuilder, ResponseParser

logger = logging.getLogger(__name__)


class SummaryService:
    """Turn article text into a summary with key points via an LLM provider.

    One provider call per article; nothing is chunked or retried.
    """

    def __init__(
        self,
        provider: SummaryProvider,
        prompt_builder: Optional[PromptBuilder] = None,
        parser: Optional[ResponseParser] = None,
    ):
        self.provider = provider
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.parser = parser or ResponseParser()

    async def summarize(self, content: str, title: str) -> SummarizationResponse:
        """Summarize ``content`` and compute word and compression figures.

        Raises:
            ProviderError: Upstream API failure, passed through for 502/503
            ApiConfigurationError: No provider configured
            SummarizationError: Anything else that went wrong
        """
        original_word_count = count_words(content)
        prompt = self.prompt_builder.build(content)

        try:
            logger.info(
                "Requesting summary",
                extra={"provider": self.provider.name, "word_count": original_word_count},
            )
            raw = await self.provider.generate(prompt)
            parsed = self.parser.parse(raw)

            summary_word_count = count_words(parsed.summary)
            ratio = compression_ratio(original_word_count, summary_word_count)
        except (ProviderError, ApiConfigurationError):
            raise
        except Exception as e:
            logger.error("Summarization failed", exc_info=True)
            raise SummarizationError("Failed to summarize the article.") from e

        logger.info(
            "Summary generated",
            extra={
                "summary_words": summary_word_count,
                "key_points": len(parsed.key_points),
                "compression_ratio": ratio,
            },
        )
        return SummarizationResponse(
            article=Article(title=title, content=content, word_count=original_word_count),
            summary=Summary(
                content=parsed.summary,
                key_points=parsed.key_points,
                word_count=summary_word_count,
                compression_ratio=ratio,
            ),
        )
