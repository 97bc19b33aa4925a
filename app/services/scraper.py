"""Fetch a web page and pull out the readable article text."""
from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from core.config import ScraperSettings
from core.exceptions import ArticleScrapingError
from core.text import count_words
from models import Article

logger = logging.getLogger(__name__)

UNTITLED = "Untitled Article"

# Page chrome stripped before looking for content
NOISE_SELECTOR = "script, style, nav, header, footer, aside, .advertisement, .ads, .social-share"

# Tried in order; the first one whose text is long enough wins
CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    "[role=main]",
    ".post-content",
    ".article-content",
    ".entry-content",
    ".content",
    "main",
    ".post-body",
    ".article-body",
)

INSUFFICIENT_CONTENT_MESSAGE = (
    "Unable to extract sufficient content from the URL. "
    "The article may be behind a paywall or require JavaScript."
)

_WS_RE = re.compile(r"\s+")


def _normalize(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def extract_title(soup: BeautifulSoup) -> str:
    """Document title, then og:title, then a placeholder."""
    title = soup.title.get_text(" ", strip=True) if soup.title else ""
    if not title.strip():
        og = soup.select_one("meta[property='og:title']")
        if og is not None:
            title = (og.get("content") or "").strip()
    return title if title.strip() else UNTITLED


def extract_content(soup: BeautifulSoup, min_content_length: int = 500) -> str:
    """Main text of the page.

    Mutates ``soup``: noise elements are removed first.
    """
    for element in soup.select(NOISE_SELECTOR):
        element.decompose()

    content = ""
    for selector in CONTENT_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        content = _normalize(element.get_text(" ", strip=True))
        if len(content) > min_content_length:
            break

    if len(content) < min_content_length:
        content = " ".join(p.get_text(" ", strip=True) for p in soup.find_all("p"))

    return _normalize(content)


class ArticleScraper:
    """Downloads a URL and extracts title, text and word count."""

    def __init__(self, settings: Optional[ScraperSettings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or ScraperSettings()
        self.session = session or requests.Session()

    def scrape(self, url: str) -> Article:
        """Fetch ``url`` and return the extracted article.

        Raises:
            ArticleScrapingError: Invalid URL, unreachable page, or too little text
        """
        self._validate_url(url)
        logger.info("Scraping article | url=%s", url)

        html = self._fetch(url)
        soup = parse_html(html)
        title = extract_title(soup)
        content = extract_content(soup, self.settings.min_content_length)

        if len(content) < self.settings.min_fallback_content_length:
            logger.warning(
                "Insufficient content extracted | url=%s chars=%d", url, len(content)
            )
            raise ArticleScrapingError(INSUFFICIENT_CONTENT_MESSAGE)

        word_count = count_words(content)
        logger.info("Scraped article | url=%s title=%r words=%d", url, title, word_count)
        return Article(title=title, content=content, word_count=word_count)

    def _validate_url(self, url: Optional[str]) -> None:
        raw = (url or "").strip()
        try:
            parsed = urlparse(raw)
        except ValueError as e:
            raise ArticleScrapingError(f"Invalid URL: {url}") from e
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ArticleScrapingError(f"Invalid URL: {url}")

    def _fetch(self, url: str) -> str:
        headers = {"User-Agent": self.settings.user_agent}
        try:
            response = self.session.get(url, headers=headers, timeout=self.settings.timeout)
            response.raise_for_status()
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as e:
            raise ArticleScrapingError(f"Invalid URL: {url}") from e
        except requests.RequestException as e:
            logger.warning("Fetch failed | url=%s error=%s", url, e)
            raise ArticleScrapingError(f"Failed to connect to the URL: {url}") from e
        return response.text
