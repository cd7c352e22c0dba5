"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
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
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (identity projection, accounts are managed elsewhere)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email, unique=True)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(20), nullable=False),  # First spelling stored
    Column("name_key", String(20), nullable=False),  # lower(name)
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tags_name_key", tags_table.c.name_key, unique=True)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(100), nullable=False),
    Column("text", Text, nullable=False),
    Column("asked_by", String(255), nullable=False),
    Column("asked_at", TIMESTAMP(timezone=True), nullable=False),
    Column("views", Integer, nullable=False, server_default="0"),
    CheckConstraint("views >= 0", name="views_non_negative"),
)

Index("idx_questions_asked_at", questions_table.c.asked_at.desc())

# ============================================================================
# QUESTION_TAGS TABLE (ordered many-to-many)
# ============================================================================
question_tags_table = Table(
    "question_tags",
    metadata,
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False),
    Column("position", Integer, nullable=False),
    PrimaryKeyConstraint("question_id", "tag_id", name="pk_question_tags"),
)

Index("idx_question_tags_tag_id", question_tags_table.c.tag_id)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column("answered_by", String(255), nullable=False),
    Column("answered_at", TIMESTAMP(timezone=True), nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),
    CheckConstraint("votes >= 0", name="votes_non_negative"),
)

# ============================================================================
# QUESTION_ANSWERS TABLE (append-only, ordered by position)
# ============================================================================
question_answers_table = Table(
    "question_answers",
    metadata,
    Column("position", BigInteger, Identity(), primary_key=True),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=False
    ),
    UniqueConstraint("question_id", "answer_id", name="uq_question_answer"),
)

Index("idx_question_answers_question_id", question_answers_table.c.question_id)

# ============================================================================
# ANSWER_VOTES TABLE (one row per voter)
# ============================================================================
answer_votes_table = Table(
    "answer_votes",
    metadata,
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("answer_id", "user_id", name="pk_answer_votes"),
)

# ============================================================================
# ANSWER_COMMENTS TABLE (append-only, ordered by position)
# ============================================================================
answer_comments_table = Table(
    "answer_comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("position", BigInteger, Identity(), nullable=False, unique=True),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    # No foreign key: comments outlive their author's account
    Column("commented_by", UUID, nullable=False),
    Column("commented_at", TIMESTAMP(timezone=True), nullable=False),
)

Index(
    "idx_answer_comments_answer_id",
    answer_comments_table.c.answer_id,
    answer_comments_table.c.position,
)
