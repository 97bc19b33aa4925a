"""
Fake implementations for testing.

Fakes implement the same interface as the real components but never touch
the network, so API and service tests stay fast and deterministic.

Key fakes:
- FakeProvider: LLM provider returning a canned completion (or raising)
- FakeScraper: Article scraper returning a fixed article (or raising)
"""

from .llm import DEFAULT_COMPLETION, FakeProvider
from .scraper import FakeScraper

__all__ = [
    "DEFAULT_COMPLETION",
    "FakeProvider",
    "FakeScraper",
]
