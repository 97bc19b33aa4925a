"""DB package assembling models, session helpers, and repository classes.

    from db import UserRepository, UserSummaryRepository
"""

from .repositories import UserRepository, UserSummaryRepository
from .schemas import Page, SortField, UserRole, UserSchema, UserSummarySchema
from .base_repository import BaseRepository
from .session import get_session, init_db

__all__ = [
    # Repositories
    "UserRepository",
    "UserSummaryRepository",
    # Schemas
    "Page",
    "SortField",
    "UserRole",
    "UserSchema",
    "UserSummarySchema",
    # Base
    "BaseRepository",
    # Session
    "get_session",
    "init_db",
]
