"""In-memory snippet read access for testing."""

from typing import Optional

from discuss.domain.repository.snippet_access import SnippetAccess
from discuss.domain.value import Requester, SnippetId

from .store import InMemoryStore


class InMemorySnippetAccess(SnippetAccess):
    """Answers read access from snippets registered on the store."""

    def __init__(self, store: InMemoryStore, admin_roles: list[str]) -> None:
        self._store = store
        self._admin_roles = set(admin_roles)

    async def can_read(
        self, snippet_id: SnippetId, requester: Optional[Requester]
    ) -> bool:
        """Check whether the requester may read the snippet."""
        snippet = self._store.snippets.get(snippet_id)
        if snippet is None:
            return False
        if snippet.is_public:
            return True
        if requester is None:
            return False
        return (
            requester.role.value in self._admin_roles
            or snippet.user_id == requester.user_id
        )
