"""SQLAlchemy table definitions for the quiz backend.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Scores and favourites belong to exactly one user and live in child tables;
their ``id`` is an identity column used only to keep insertion order.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column("email", String(255), nullable=False, unique=True),
    Column("full_name", String(255), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("diamonds", BigInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint("diamonds >= 0", name="ck_users_diamonds_non_negative"),
)

# ============================================================================
# USER SCORES TABLE (append-only quiz history)
# ============================================================================
user_scores_table = Table(
    "user_scores",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("score", Integer, nullable=False),
    Column("category", String(255), nullable=False),
    Column("correct_answers", Integer, nullable=False, server_default="0"),
    Column(
        "recorded_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint(
        "correct_answers >= 0", name="ck_user_scores_correct_answers_non_negative"
    ),
)

Index("idx_user_scores_user_id", user_scores_table.c.user_id, user_scores_table.c.id)

# ============================================================================
# USER FAVOURITES TABLE
# ============================================================================
user_favourites_table = Table(
    "user_favourites",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("question", Text, nullable=False),
    Column("options", ARRAY(Text), nullable=False, server_default="{}"),
    Column("answer", Text, nullable=False),
    Column("external_id", String(255), nullable=True),
    Column(
        "added_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index(
    "idx_user_favourites_user_id",
    user_favourites_table.c.user_id,
    user_favourites_table.c.id,
)
# De-duplication backstop for concurrent adds
Index(
    "uq_user_favourites_external_id",
    user_favourites_table.c.user_id,
    user_favourites_table.c.external_id,
    unique=True,
    postgresql_where=user_favourites_table.c.external_id.isnot(None),
)
Index(
    "uq_user_favourites_question",
    user_favourites_table.c.user_id,
    user_favourites_table.c.question,
    unique=True,
    postgresql_where=user_favourites_table.c.external_id.is_(None),
)
