"""PostgreSQL implementation of snippet read access."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.repository import SnippetAccess
from discuss.domain.value import Requester, SnippetId
from discuss.persistence.tables import snippets_table


class PostgresSnippetAccess(SnippetAccess):
    """Reads snippet visibility from the shared snippets table.

    A snippet is readable when it is public, owned by the requester, or the
    requester holds an admin-equivalent role.
    """

    def __init__(self, session: AsyncSession, admin_roles: list[str]) -> None:
        self.session = session
        self.admin_roles = set(admin_roles)

    async def can_read(
        self, snippet_id: SnippetId, requester: Optional[Requester]
    ) -> bool:
        """Check whether the requester may read the snippet."""
        stmt = select(snippets_table.c.user_id, snippets_table.c.is_public).where(
            snippets_table.c.id == snippet_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return False
        if row.is_public:
            return True
        if requester is None:
            return False
        if requester.role.value in self.admin_roles:
            return True
        return str(row.user_id) == str(requester.user_id)
