"""users and user summaries

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-18

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False, server_default=sa.text("'USER'")),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "user_summaries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("original_content", sa.Text(), nullable=False),
        sa.Column("summary_content", sa.Text(), nullable=False),
        sa.Column("key_points", sa.Text(), nullable=True),
        sa.Column("original_word_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("summary_word_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("compression_ratio", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("is_saved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("idx_user_summaries_user_id", "user_summaries", ["user_id"], unique=False)
    op.create_index("idx_user_summaries_created_at", "user_summaries", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_user_summaries_created_at", table_name="user_summaries")
    op.drop_index("idx_user_summaries_user_id", table_name="user_summaries")
    op.drop_table("user_summaries")
    op.drop_table("users")
