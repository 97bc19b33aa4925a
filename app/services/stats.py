"""Per-user reading statistics with a small in-process cache."""
from __future__ import annotations

from functools import lru_cache

from db import UserSummaryRepository
from models import UserStats

WORDS_PER_MINUTE = 200

_summaries = UserSummaryRepository()


@lru_cache(maxsize=1024)
def _stats_for_user(user_id: int) -> UserStats:
    total = _summaries.count_for_user(user_id)
    original, summary = _summaries.sum_word_counts_for_user(user_id)
    words_saved = original - summary
    return UserStats(
        total_summaries=total,
        words_saved=words_saved,
        time_saved=words_saved // WORDS_PER_MINUTE,
    )


def get_user_stats(user_id: int) -> UserStats:
    """Summary count, words saved, and minutes saved at 200 wpm."""
    return _stats_for_user(user_id).model_copy()


def invalidate_user_stats() -> None:
    """Drop cached stats; called whenever a user's summaries change."""
    _stats_for_user.cache_clear()
