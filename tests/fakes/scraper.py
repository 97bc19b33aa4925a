"""
Fake article scraper for testing.
"""

from __future__ import annotations

from typing import Optional

from models import Article

DEFAULT_CONTENT = " ".join(["Scraped article body sentence."] * 40)


class FakeScraper:
    """Stands in for ``ArticleScraper``; no HTTP requests are made."""

    def __init__(self, article: Optional[Article] = None, error: Optional[BaseException] = None):
        self.article = article or Article(
            title="Scraped Technology Article",
            content=DEFAULT_CONTENT,
            word_count=len(DEFAULT_CONTENT.split()),
        )
        self.error = error
        self.urls: list[str] = []

    def scrape(self, url: str) -> Article:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.article
