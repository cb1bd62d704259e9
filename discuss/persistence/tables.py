"""SQLAlchemy table definitions for snippet comments.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# SNIPPETS TABLE (owned by the snippet service; read-only here)
# ============================================================================
snippets_table = Table(
    "snippets",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),  # Snippet owner
    Column("is_public", Boolean, nullable=False, server_default="false"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "snippet_id",
        UUID,
        ForeignKey("snippets.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, nullable=True),  # NULL once the author is removed
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("body", Text, nullable=False),
    Column(
        "status",
        postgresql.ENUM(
            "visible", "hidden", "flagged", name="comment_status", create_type=False
        ),
        nullable=False,
        server_default="visible",
    ),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reply_count >= 0", name="reply_count_non_negative"),
    CheckConstraint("char_length(body) BETWEEN 1 AND 5000", name="body_length"),
)

# Feed and reply expansion both filter by snippet/parent and sort by created_at
Index(
    "idx_comments_snippet_created_at",
    comments_table.c.snippet_id,
    comments_table.c.created_at,
)
Index(
    "idx_comments_parent_created_at",
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_status", comments_table.c.status)
Index(
    "idx_comments_live",
    comments_table.c.snippet_id,
    postgresql_where=comments_table.c.deleted_at.is_(None),
)

# ============================================================================
# COMMENT FLAGS TABLE
# ============================================================================
comment_flags_table = Table(
    "comment_flags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reporter_id", UUID, nullable=False),
    Column(
        "reason",
        postgresql.ENUM(
            "spam", "abuse", "off-topic", "other", name="flag_reason", create_type=False
        ),
        nullable=False,
    ),
    Column("message", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "comment_id", "reporter_id", "reason", name="uq_comment_flag_reporter_reason"
    ),
)

Index("idx_comment_flags_comment_id", comment_flags_table.c.comment_id)
