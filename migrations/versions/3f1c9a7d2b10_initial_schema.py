"""initial_schema

Create the schema for snippet comments:
- Snippets (visibility facts, owned by the snippet service)
- Comments (single-level threads with reply counts and tombstones)
- Comment flags (one per comment, reporter and reason)

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_status AS ENUM ('visible', 'hidden', 'flagged');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE flag_reason AS ENUM ('spam', 'abuse', 'off-topic', 'other');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # SNIPPETS table (shared with the snippet service)
    # ========================================================================
    op.create_table(
        "snippets",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
        if_not_exists=True,
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("snippet_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=True),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "visible", "hidden", "flagged", name="comment_status", create_type=False
            ),
            nullable=False,
            server_default="visible",
        ),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["snippet_id"], ["snippets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("reply_count >= 0", name="reply_count_non_negative"),
        sa.CheckConstraint("char_length(body) BETWEEN 1 AND 5000", name="body_length"),
    )

    op.create_index(
        "idx_comments_snippet_created_at", "comments", ["snippet_id", "created_at"]
    )
    op.create_index(
        "idx_comments_parent_created_at", "comments", ["parent_id", "created_at"]
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_status", "comments", ["status"])
    op.create_index(
        "idx_comments_live",
        "comments",
        ["snippet_id"],
        postgresql_where=sa.text("deleted_at IS NULL"),
    )

    # ========================================================================
    # COMMENT_FLAGS table
    # ========================================================================
    op.create_table(
        "comment_flags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column(
            "reason",
            postgresql.ENUM(
                "spam",
                "abuse",
                "off-topic",
                "other",
                name="flag_reason",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "comment_id",
            "reporter_id",
            "reason",
            name="uq_comment_flag_reporter_reason",
        ),
    )

    op.create_index("idx_comment_flags_comment_id", "comment_flags", ["comment_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comment_flags")
    op.drop_table("comments")
    # snippets is shared with the snippet service and left in place

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS flag_reason")
    op.execute("DROP TYPE IF EXISTS comment_status")
