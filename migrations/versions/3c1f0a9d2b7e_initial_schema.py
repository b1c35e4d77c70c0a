"""initial_schema

Create the quiz schema:
- Users (email/password accounts with a diamond balance)
- User scores (append-only quiz history)
- User favourites (bookmarked questions, de-duplicated per user)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("diamonds", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.CheckConstraint("diamonds >= 0", name="ck_users_diamonds_non_negative"),
    )

    # ========================================================================
    # USER_SCORES table
    # ========================================================================
    op.create_table(
        "user_scores",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(length=255), nullable=False),
        sa.Column(
            "correct_answers", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column(
            "recorded_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "correct_answers >= 0",
            name="ck_user_scores_correct_answers_non_negative",
        ),
    )
    op.create_index(
        "idx_user_scores_user_id", "user_scores", ["user_id", "id"]
    )

    # ========================================================================
    # USER_FAVOURITES table
    # ========================================================================
    op.create_table(
        "user_favourites",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column(
            "options",
            postgresql.ARRAY(sa.Text()),
            server_default="{}",
            nullable=False,
        ),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("external_id", sa.String(length=255), nullable=True),
        sa.Column(
            "added_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "idx_user_favourites_user_id", "user_favourites", ["user_id", "id"]
    )
    op.create_index(
        "uq_user_favourites_external_id",
        "user_favourites",
        ["user_id", "external_id"],
        unique=True,
        postgresql_where=sa.text("external_id IS NOT NULL"),
    )
    op.create_index(
        "uq_user_favourites_question",
        "user_favourites",
        ["user_id", "question"],
        unique=True,
        postgresql_where=sa.text("external_id IS NULL"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("uq_user_favourites_question", table_name="user_favourites")
    op.drop_index("uq_user_favourites_external_id", table_name="user_favourites")
    op.drop_index("idx_user_favourites_user_id", table_name="user_favourites")
    op.drop_table("user_favourites")
    op.drop_index("idx_user_scores_user_id", table_name="user_scores")
    op.drop_table("user_scores")
    op.drop_table("users")
