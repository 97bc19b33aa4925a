"""Public, anonymized feed of recent summaries."""
from __future__ import annotations

import random
from typing import Optional

from core.text import make_snippet, split_key_points
from db import UserSummaryRepository, UserSummarySchema
from models import ShowcasePage, ShowcaseSummaryDTO, SummaryStats
from services.user_summaries import clamp_page

MAX_SHOWCASE_SIZE = 50

# Only this many pages' worth of the newest summaries are eligible
OVERFETCH_MULTIPLIER = 3

# First match wins; checked against the lowercased title
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Technology", ("technology", "tech", "ai", "software")),
    ("Business", ("business", "economy", "finance", "market")),
    ("Science", ("science", "research", "study")),
    ("Health", ("health", "medical", "wellness")),
)
DEFAULT_CATEGORY = "General"


def determine_category(title: Optional[str]) -> str:
    """Keyword guess at a category. Plain substring match, so "said" is AI."""
    lowered = (title or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


class ShowcaseService:
    def __init__(
        self,
        repository: Optional[UserSummaryRepository] = None,
        rng: Optional[random.Random] = None,
    ):
        self.repository = repository or UserSummaryRepository()
        self.rng = rng or random.Random()

    def get_showcase(
        self, page: int = 0, size: int = 3, category: Optional[str] = None
    ) -> ShowcasePage:
        page, size = clamp_page(page, size, max_size=MAX_SHOWCASE_SIZE)
        if category:
            result = self.repository.list_by_title_keyword(category, page=page, size=size)
        else:
            result = self.repository.list_recent(
                page=page, size=size, pool_limit=size * OVERFETCH_MULTIPLIER
            )
        return ShowcasePage(
            summaries=[self._to_dto(row) for row in result.items],
            current_page=result.page,
            total_pages=result.total_pages,
        )

    def _to_dto(self, row: UserSummarySchema) -> ShowcaseSummaryDTO:
        # Owner identity never leaves this method
        return ShowcaseSummaryDTO(
            id=str(row.id),
            title=row.title,
            snippet=make_snippet(row.summary_content),
            key_points=split_key_points(row.key_points),
            stats=SummaryStats(
                original_words=row.original_word_count,
                summary_words=row.summary_word_count,
                compression_ratio=row.compression_ratio,
            ),
            category=determine_category(row.title),
            # No engagement data is tracked; this is a display value only
            popularity=self.rng.randint(80, 99),
        )
