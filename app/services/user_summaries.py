from __future__ import annotations

import logging
from typing import Optional

from core.exceptions import NotFoundError
from core.text import join_key_points, split_key_points
from db import SortField, UserSchema, UserSummaryRepository, UserSummarySchema
from models import SummarizationResponse, UserSummaryDTO, UserSummaryPage
from services.stats import invalidate_user_stats

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100

# Offsets must fit a 32-bit INTEGER on every backend
MAX_OFFSET = 2**31 - 1

_SORT_KEYS = {
    "title": SortField.TITLE,
    "wordcount": SortField.ORIGINAL_WORD_COUNT,
    "createdat": SortField.CREATED_AT,
}


def resolve_sort(sort_by: Optional[str], sort_order: Optional[str]) -> tuple[SortField, bool]:
    """Map API sort parameters to a column and direction.

    Unknown keys fall back to creation time; anything but "asc" is descending.
    """
    field = _SORT_KEYS.get((sort_by or "createdat").lower(), SortField.CREATED_AT)
    descending = (sort_order or "desc").lower() != "asc"
    return field, descending


def clamp_page(page: int, size: int, max_size: int = MAX_PAGE_SIZE) -> tuple[int, int]:
    size = min(max(1, size), max_size)
    return min(max(0, page), MAX_OFFSET // size), size


def to_dto(row: UserSummarySchema) -> UserSummaryDTO:
    return UserSummaryDTO(
        id=row.id,
        title=row.title,
        summary_content=row.summary_content,
        key_points=split_key_points(row.key_points),
        original_word_count=row.original_word_count,
        summary_word_count=row.summary_word_count,
        compression_ratio=row.compression_ratio,
        saved=row.saved,
        created_at=row.created_at,
    )


class UserSummaryService:
    """Stores and retrieves the summaries a user has generated."""

    def __init__(self, repository: Optional[UserSummaryRepository] = None):
        self.repository = repository or UserSummaryRepository()

    def create_user_summary(
        self, user: UserSchema, response: SummarizationResponse, original_content: str
    ) -> UserSummaryDTO:
        row = self.repository.create_summary(
            user_id=user.id,
            title=response.article.title,
            original_content=original_content,
            summary_content=response.summary.content,
            key_points=join_key_points(response.summary.key_points),
            original_word_count=response.article.word_count,
            summary_word_count=response.summary.word_count,
            compression_ratio=response.summary.compression_ratio,
        )
        invalidate_user_stats()
        logger.info("Created summary | id=%s user=%s", row.id, user.username)
        return to_dto(row)

    def get_user_summaries(
        self,
        user: UserSchema,
        *,
        page: int = 0,
        size: int = 10,
        saved: Optional[bool] = None,
        sort_by: Optional[str] = "createdAt",
        sort_order: Optional[str] = "desc",
    ) -> UserSummaryPage:
        page, size = clamp_page(page, size)
        field, descending = resolve_sort(sort_by, sort_order)
        result = self.repository.list_for_user(
            user.id,
            page=page,
            size=size,
            saved=saved,
            sort_field=field,
            descending=descending,
        )
        return UserSummaryPage(
            summaries=[to_dto(row) for row in result.items],
            current_page=result.page,
            total_pages=result.total_pages,
            total_count=result.total,
        )

    def get_user_summary(self, user: UserSchema, summary_id: int) -> UserSummaryDTO:
        row = self.repository.get_for_user(summary_id, user.id)
        if row is None:
            raise NotFoundError(f"Summary {summary_id} not found")
        return to_dto(row)

    def toggle_saved(self, user: UserSchema, summary_id: int, saved: bool) -> None:
        """Set the saved flag; someone else's summary reads as missing."""
        if not self.repository.set_saved(summary_id, user.id, saved):
            raise NotFoundError(f"Summary {summary_id} not found")
        invalidate_user_stats()
