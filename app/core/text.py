"""Word counting and key-point helpers shared by the pipeline and storage."""

from __future__ import annotations

from typing import Iterable, Optional

KEY_POINT_DELIMITER = "|"
SNIPPET_LENGTH = 150
TEXT_TITLE_LENGTH = 100


def count_words(text: Optional[str]) -> int:
    """Count whitespace-delimited, non-empty tokens."""
    if not text:
        return 0
    return len(text.split())


def compression_ratio(original_words: int, summary_words: int) -> int:
    """Percentage reduction from original to summary, truncated toward zero."""
    if original_words <= 0:
        return 0
    return int((original_words - summary_words) / original_words * 100)


def join_key_points(points: Optional[Iterable[str]]) -> str:
    # The delimiter is not escaped: a point containing "|" splits on read.
    if not points:
        return ""
    return KEY_POINT_DELIMITER.join(point.strip() for point in points)


def split_key_points(blob: Optional[str]) -> list[str]:
    if not blob:
        return []
    return [p.strip() for p in blob.split(KEY_POINT_DELIMITER) if p.strip()]


def make_snippet(text: Optional[str], limit: int = SNIPPET_LENGTH) -> str:
    """Trim ``text`` to ``limit`` characters, ellipsis included."""
    s = text or ""
    if len(s) > limit:
        return s[: limit - 3] + "..."
    return s


def text_title(content: str, limit: int = TEXT_TITLE_LENGTH) -> str:
    """Title for raw-text submissions: the leading characters of the text."""
    return content[:limit]
