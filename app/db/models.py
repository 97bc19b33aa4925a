from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship


Base = declarative_base()


def utcnow() -> datetime:
    # Naive UTC so values compare the same on Postgres and SQLite
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(length=50), nullable=False, unique=True)
    email = Column(String(length=255), nullable=False, unique=True)
    password_hash = Column(String(length=255), nullable=False)
    role = Column(String(length=16), nullable=False, default="USER")
    created_at = Column(DateTime, nullable=False, default=utcnow)

    summaries = relationship(
        "UserSummary",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserSummary(Base):
    __tablename__ = "user_summaries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    title = Column(String(length=255), nullable=False)
    original_content = Column(Text, nullable=False)
    summary_content = Column(Text, nullable=False)
    # Pipe-joined; see core.text.join_key_points
    key_points = Column(Text, nullable=True)
    original_word_count = Column(Integer, nullable=False, default=0)
    summary_word_count = Column(Integer, nullable=False, default=0)
    compression_ratio = Column(Integer, nullable=False, default=0)
    saved = Column("is_saved", Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="summaries")

    __table_args__ = (
        Index("idx_user_summaries_user_id", "user_id"),
        Index("idx_user_summaries_created_at", "created_at"),
    )
