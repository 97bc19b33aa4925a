"""Prompt construction and response parsing for the summarizer."""

from .prompt_builder import PromptBuilder
from .response_parser import ResponseParser, SummaryLLMOutput

__all__ = ["PromptBuilder", "ResponseParser", "SummaryLLMOutput"]
