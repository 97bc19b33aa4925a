"""Specialized repository classes for the summarizer domain models.

Each repository extends BaseRepository and adds domain-specific query methods.
Read methods return pydantic schemas so callers never hold detached ORM rows.
"""

from typing import Optional

from sqlalchemy import asc, desc, func, select

from .base_repository import BaseRepository
from .models import User, UserSummary
from .schemas import Page, SortField, UserSchema, UserSummarySchema


class UserRepository(BaseRepository[User]):
    """Repository for user accounts."""

    model_class = User

    def get_by_username(self, username: str) -> Optional[User]:
        """Get a user (including password hash) by username.

        Args:
            username: Username to look up

        Returns:
            User or None if not found
        """
        with self._get_session() as session:
            return (
                session.execute(select(User).where(User.username == username))
                .scalars()
                .first()
            )

    def exists_by_username(self, username: str) -> bool:
        with self._get_session() as session:
            stmt = select(func.count()).select_from(User).where(User.username == username)
            return session.execute(stmt).scalar_one() > 0

    def exists_by_email(self, email: str) -> bool:
        with self._get_session() as session:
            stmt = select(func.count()).select_from(User).where(User.email == email)
            return session.execute(stmt).scalar_one() > 0

    def create_user(
        self, *, username: str, email: str, password_hash: str, role: str = "USER"
    ) -> UserSchema:
        """Insert a new account and return it without the password hash."""
        user = self.create(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
        )
        return UserSchema.model_validate(user)


# Matches the user_summaries.title column width
TITLE_MAX_LENGTH = 255

_SORT_COLUMNS = {
    SortField.CREATED_AT: UserSummary.created_at,
    SortField.TITLE: UserSummary.title,
    SortField.ORIGINAL_WORD_COUNT: UserSummary.original_word_count,
}


class UserSummaryRepository(BaseRepository[UserSummary]):
    """Repository for per-user summary records."""

    model_class = UserSummary

    def create_summary(
        self,
        *,
        user_id: int,
        title: str,
        original_content: str,
        summary_content: str,
        key_points: str,
        original_word_count: int,
        summary_word_count: int,
        compression_ratio: int,
    ) -> UserSummarySchema:
        """Persist a summary row; new rows always start unsaved."""
        row = self.create(
            user_id=user_id,
            title=title[:TITLE_MAX_LENGTH],
            original_content=original_content,
            summary_content=summary_content,
            key_points=key_points,
            original_word_count=original_word_count,
            summary_word_count=summary_word_count,
            compression_ratio=compression_ratio,
            saved=False,
        )
        return UserSummarySchema.model_validate(row)

    def list_for_user(
        self,
        user_id: int,
        *,
        page: int = 0,
        size: int = 10,
        saved: Optional[bool] = None,
        sort_field: SortField = SortField.CREATED_AT,
        descending: bool = True,
    ) -> Page[UserSummarySchema]:
        """List a user's summaries with optional saved filter and ordering.

        Args:
            user_id: Owner of the summaries
            page: Zero-based page index
            size: Page size
            saved: Only rows with this saved flag when not None
            sort_field: Column to order by
            descending: Order direction

        Returns:
            Page of summaries plus the total row count for the filter
        """
        conditions = [UserSummary.user_id == user_id]
        if saved is not None:
            conditions.append(UserSummary.saved == saved)

        column = _SORT_COLUMNS[sort_field]
        direction = desc if descending else asc

        with self._get_session() as session:
            total = session.execute(
                select(func.count()).select_from(UserSummary).where(*conditions)
            ).scalar_one()
            stmt = (
                select(UserSummary)
                .where(*conditions)
                .order_by(direction(column), direction(UserSummary.id))
                .limit(size)
                .offset(page * size)
            )
            rows = session.execute(stmt).scalars().all()
            return Page[UserSummarySchema](
                items=[UserSummarySchema.model_validate(r) for r in rows],
                page=page,
                size=size,
                total=int(total),
            )

    def get_for_user(self, summary_id: int, user_id: int) -> Optional[UserSummarySchema]:
        """Get a summary only when it belongs to ``user_id``."""
        with self._get_session() as session:
            row = (
                session.execute(
                    select(UserSummary).where(
                        UserSummary.id == summary_id,
                        UserSummary.user_id == user_id,
                    )
                )
                .scalars()
                .first()
            )
            return UserSummarySchema.model_validate(row) if row is not None else None

    def set_saved(self, summary_id: int, user_id: int, saved: bool) -> bool:
        """Set the saved flag on an owned summary.

        Returns:
            True if updated, False if missing or owned by someone else
        """
        with self._get_session() as session:
            row = (
                session.execute(
                    select(UserSummary).where(
                        UserSummary.id == summary_id,
                        UserSummary.user_id == user_id,
                    )
                )
                .scalars()
                .first()
            )
            if row is None:
                return False
            row.saved = saved
            session.flush()
            return True

    def count_for_user(self, user_id: int) -> int:
        with self._get_session() as session:
            stmt = select(func.count()).select_from(UserSummary).where(
                UserSummary.user_id == user_id
            )
            return int(session.execute(stmt).scalar_one())

    def sum_word_counts_for_user(self, user_id: int) -> tuple[int, int]:
        """Total (original, summary) word counts; missing sums read as 0."""
        with self._get_session() as session:
            original, summary = session.execute(
                select(
                    func.sum(UserSummary.original_word_count),
                    func.sum(UserSummary.summary_word_count),
                ).where(UserSummary.user_id == user_id)
            ).one()
            return int(original or 0), int(summary or 0)

    def list_recent(
        self, *, page: int = 0, size: int = 3, pool_limit: Optional[int] = None
    ) -> Page[UserSummarySchema]:
        """Newest summaries across all users.

        Args:
            page: Zero-based page index
            size: Page size
            pool_limit: Only the ``pool_limit`` newest rows are eligible

        Returns:
            Page cut from the eligible pool
        """
        with self._get_session() as session:
            total = int(
                session.execute(select(func.count()).select_from(UserSummary)).scalar_one()
            )
            if pool_limit is not None:
                total = min(total, pool_limit)

            start = page * size
            limit = max(0, min(size, total - start))
            rows: list = []
            if limit:
                stmt = (
                    select(UserSummary)
                    .order_by(desc(UserSummary.created_at), desc(UserSummary.id))
                    .limit(limit)
                    .offset(start)
                )
                rows = list(session.execute(stmt).scalars().all())
            return Page[UserSummarySchema](
                items=[UserSummarySchema.model_validate(r) for r in rows],
                page=page,
                size=size,
                total=total,
            )

    def list_by_title_keyword(
        self, keyword: str, *, page: int = 0, size: int = 3
    ) -> Page[UserSummarySchema]:
        """Newest summaries whose title contains ``keyword`` (case-insensitive)."""
        pattern = f"%{keyword}%"
        condition = UserSummary.title.ilike(pattern)
        with self._get_session() as session:
            total = session.execute(
                select(func.count()).select_from(UserSummary).where(condition)
            ).scalar_one()
            stmt = (
                select(UserSummary)
                .where(condition)
                .order_by(desc(UserSummary.created_at), desc(UserSummary.id))
                .limit(size)
                .offset(page * size)
            )
            rows = session.execute(stmt).scalars().all()
            return Page[UserSummarySchema](
                items=[UserSummarySchema.model_validate(r) for r in rows],
                page=page,
                size=size,
                total=int(total),
            )
