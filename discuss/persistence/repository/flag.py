"""PostgreSQL implementation of CommentFlag repository."""

from typing import List

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import CommentFlag
from discuss.domain.repository import FlagRepository
from discuss.domain.value import CommentId, FlagReason, UserId
from discuss.persistence.mappers import flag_to_dict, row_to_flag
from discuss.persistence.tables import comment_flags_table


class PostgresFlagRepository(FlagRepository):
    """PostgreSQL implementation of FlagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, flag: CommentFlag) -> bool:
        """Insert a flag, ignoring duplicates via the unique constraint."""
        stmt = (
            insert(comment_flags_table)
            .values(**flag_to_dict(flag))
            .on_conflict_do_nothing(
                index_elements=["comment_id", "reporter_id", "reason"]
            )
            .returning(comment_flags_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.scalar_one_or_none()
        await self.session.flush()
        return inserted is not None

    async def remove(
        self, comment_id: CommentId, reporter_id: UserId, reason: FlagReason
    ) -> bool:
        """Delete a flag by comment, reporter and reason."""
        stmt = delete(comment_flags_table).where(
            and_(
                comment_flags_table.c.comment_id == comment_id,
                comment_flags_table.c.reporter_id == reporter_id,
                comment_flags_table.c.reason == reason.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_comment(self, comment_id: CommentId) -> List[CommentFlag]:
        """Find all flags on a comment, oldest first."""
        stmt = (
            select(comment_flags_table)
            .where(comment_flags_table.c.comment_id == comment_id)
            .order_by(comment_flags_table.c.created_at, comment_flags_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_flag(row._asdict()) for row in result.fetchall()]
