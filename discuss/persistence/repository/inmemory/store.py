"""Shared in-memory state for the in-memory repositories.

Repositories are request-scoped; the store outlives them so that state
survives across requests within one test.
"""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.model import Comment, CommentFlag
from discuss.domain.value import CommentId, SnippetId, UserId


class StoredSnippet(BaseModel):
    """Visibility facts about a snippet owned elsewhere."""

    id: SnippetId
    user_id: UserId
    is_public: bool = True


class InMemoryStore:
    """Tables held as plain collections."""

    def __init__(self) -> None:
        self.snippets: dict[UUID, StoredSnippet] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.flags: list[CommentFlag] = []

    def add_snippet(
        self, snippet_id: SnippetId, owner_id: UserId, is_public: bool = True
    ) -> StoredSnippet:
        snippet = StoredSnippet(id=snippet_id, user_id=owner_id, is_public=is_public)
        self.snippets[snippet_id] = snippet
        return snippet
