"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import asc, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, SnippetId, SortOrder
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment and return the stored row."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def update_body(
        self, comment_id: CommentId, body: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the body of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(body=body, edited_at=edited_at, updated_at=edited_at)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def mark_deleted(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at, updated_at=deleted_at)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reply_count=comments_table.c.reply_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    def _scope(self, snippet_id: SnippetId, parent_id: Optional[CommentId]):
        if parent_id is None:
            parent_filter = comments_table.c.parent_id.is_(None)
        else:
            parent_filter = comments_table.c.parent_id == parent_id
        return (comments_table.c.snippet_id == snippet_id, parent_filter)

    async def find_by_snippet(
        self,
        snippet_id: SnippetId,
        parent_id: Optional[CommentId],
        order: SortOrder,
        limit: int,
        offset: int,
    ) -> Tuple[List[Comment], int]:
        """Find one page of comments with the total from the same statement."""
        direction = desc if order == SortOrder.DESC else asc
        conditions = self._scope(snippet_id, parent_id)

        stmt = (
            select(comments_table, func.count().over().label("total_count"))
            .where(*conditions)
            .order_by(
                direction(comments_table.c.created_at), direction(comments_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]

        if rows:
            return [row_to_comment(row) for row in rows], rows[0]["total_count"]

        if offset == 0:
            return [], 0

        # Past the last page: window total is unavailable without rows
        count_stmt = select(func.count()).select_from(comments_table).where(*conditions)
        count_result = await self.session.execute(count_stmt)
        return [], count_result.scalar() or 0
