"""Prompt building for summary generation."""
from __future__ import annotations

import logging
from textwrap import dedent
from typing import Optional

logger = logging.getLogger(__name__)


DEFAULT_TEMPLATE = dedent(
    """
    Please analyze and summarize the following article. Provide:
    1. A concise summary that captures the main points and essence
    2. Key takeaways as bullet points
    3. Maintain professional tone and accuracy

    Article content:
    {content}

    Please respond in JSON format with the following structure:
    {{
      "summary": "concise summary paragraph",
      "keyPoints": ["key point 1", "key point 2", "key point 3", "key point 4"]
    }}
    """
).strip()


class PromptBuilder:
    """Formats article content into the summarization prompt."""

    def __init__(self, template: Optional[str] = None):
        """Initialize prompt builder.

        Args:
            template: ``str.format`` template with a ``{content}`` field.
                If None, uses the default summary/key-points template.
        """
        self._template = template or DEFAULT_TEMPLATE

    def build(self, content: str) -> str:
        prompt = self._template.format(content=content)
        logger.debug("Summary prompt built", extra={"prompt_chars": len(prompt)})
        return prompt
