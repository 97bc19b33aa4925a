"""Pydantic schemas for database repository responses.

These schemas provide type-safe, validated responses from repository functions
and decouple the API layer from ORM models.
"""

from datetime import datetime
from enum import Enum
from math import ceil
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    """Roles a user account can hold."""

    USER = "USER"
    ADMIN = "ADMIN"


class SortField(str, Enum):
    """Columns a user's summary list can be ordered by."""

    CREATED_AT = "created_at"
    TITLE = "title"
    ORIGINAL_WORD_COUNT = "original_word_count"


class UserSchema(BaseModel):
    """User account without credentials."""

    id: int
    username: str
    email: str
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserSummarySchema(BaseModel):
    """Stored summary row."""

    id: int
    user_id: int
    title: str
    original_content: str
    summary_content: str
    key_points: Optional[str] = None
    original_word_count: int = 0
    summary_word_count: int = 0
    compression_ratio: int = 0
    saved: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


ItemT = TypeVar("ItemT")


class Page(BaseModel, Generic[ItemT]):
    """One page of an offset-paginated query."""

    items: list[ItemT] = Field(default_factory=list)
    page: int = 0
    size: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return ceil(self.total / self.size)
