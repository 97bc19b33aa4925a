from __future__ import annotations

import re
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ApiModel(BaseModel):
    """Base for JSON bodies: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Summarization
# ---------------------------------------------------------------------------


class SummarizeRequest(ApiModel):
    content: Optional[str] = None
    url: Optional[str] = None


class Article(ApiModel):
    title: str
    content: str
    word_count: int


class Summary(ApiModel):
    content: str
    key_points: List[str] = Field(default_factory=list)
    word_count: int = 0
    compression_ratio: int = 0


class SummarizationResponse(ApiModel):
    article: Article
    summary: Summary


# ---------------------------------------------------------------------------
# User summaries, stats, showcase
# ---------------------------------------------------------------------------


class UserSummaryDTO(ApiModel):
    id: int
    title: str
    summary_content: str
    key_points: List[str] = Field(default_factory=list)
    original_word_count: int
    summary_word_count: int
    compression_ratio: int
    saved: bool
    created_at: Optional[datetime] = None


class UserSummaryPage(ApiModel):
    summaries: List[UserSummaryDTO]
    current_page: int
    total_pages: int
    total_count: int


class UserStats(ApiModel):
    total_summaries: int
    words_saved: int
    time_saved: int


class SummaryStats(ApiModel):
    original_words: int
    summary_words: int
    compression_ratio: int


class ShowcaseSummaryDTO(ApiModel):
    id: str
    title: str
    snippet: str
    key_points: List[str] = Field(default_factory=list)
    stats: SummaryStats
    category: str
    popularity: int


class ShowcasePage(ApiModel):
    summaries: List[ShowcaseSummaryDTO]
    current_page: int
    total_pages: int


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


class RegisterRequest(ApiModel):
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(max_length=255)
    password: str = Field(min_length=6, max_length=128)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        stripped = value.strip()
        if len(stripped) < 3:
            raise ValueError("username must be at least 3 characters")
        return stripped

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        email = value.strip()
        if not _EMAIL_RE.match(email):
            raise ValueError("email must be a valid address")
        return email


class AuthRequest(ApiModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AuthResponse(ApiModel):
    token: str
    username: str
    email: str
    role: str


class CurrentUser(ApiModel):
    username: str
    email: str
    role: str


class ErrorResponse(ApiModel):
    message: str
    details: str
