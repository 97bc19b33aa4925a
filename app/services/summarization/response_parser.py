"""Response parsing for summary generation."""
from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

_SUMMARY_RE = re.compile(r'"summary":\s*"(.*?)"', re.DOTALL)
_KEY_POINTS_RE = re.compile(r'"keyPoints":\s*\[(.*?)\]', re.DOTALL)


class SummaryLLMOutput(BaseModel):
    """Structured output from the summary LLM."""

    summary: str = ""
    key_points: list[str] = Field(default_factory=list)


class ResponseParser:
    """Parses LLM responses into structured summary outputs.

    JSON is tried first; text that does not decode falls back to regex
    extraction of the ``summary`` and ``keyPoints`` fields.
    """

    def parse(self, raw: str) -> SummaryLLMOutput:
        """Parse raw LLM response into structured output.

        Args:
            raw: Raw text from LLM

        Returns:
            Parsed output; fields the response lacks come back empty
        """
        text = raw or ""
        logger.debug("Model output received", extra={"output": text})
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Model output is not valid JSON; falling back to regex extraction")
            return self._parse_with_regex(text)
        return self._from_json(data)

    def _from_json(self, data: Any) -> SummaryLLMOutput:
        if not isinstance(data, dict):
            return SummaryLLMOutput()

        summary = data.get("summary")
        key_points = data.get("keyPoints")
        points = [self._as_text(p) for p in key_points] if isinstance(key_points, list) else []
        return SummaryLLMOutput(
            summary=self._as_text(summary),
            key_points=[p for p in points if p],
        )

    def _parse_with_regex(self, text: str) -> SummaryLLMOutput:
        summary_match = _SUMMARY_RE.search(text)
        summary = summary_match.group(1) if summary_match else ""

        points_match = _KEY_POINTS_RE.search(text)
        points_raw = points_match.group(1) if points_match else ""
        key_points = []
        for piece in points_raw.split(","):
            point = re.sub(r'^"|"$', "", piece.strip())
            if point:
                key_points.append(point)

        return SummaryLLMOutput(summary=summary, key_points=key_points)

    @staticmethod
    def _as_text(value: Any) -> str:
        """Render a JSON scalar as plain text; null, objects and arrays are empty."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return ""
