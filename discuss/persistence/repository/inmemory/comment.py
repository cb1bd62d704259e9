"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, SnippetId, SortOrder

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mutations replace the stored model without awaiting in between, so each
    one is atomic with respect to other coroutines.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def update_body(
        self, comment_id: CommentId, body: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the body of a live comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        updated = comment.model_copy(
            update={"body": body, "edited_at": edited_at, "updated_at": edited_at}
        )
        self._store.comments[comment_id] = updated
        return updated

    async def mark_deleted(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a live comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        deleted = comment.model_copy(
            update={"deleted_at": deleted_at, "updated_at": deleted_at}
        )
        self._store.comments[comment_id] = deleted
        return deleted

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        comment = self._store.comments.get(comment_id)
        if comment:
            self._store.comments[comment_id] = comment.model_copy(
                update={"reply_count": comment.reply_count + 1}
            )

    async def find_by_snippet(
        self,
        snippet_id: SnippetId,
        parent_id: Optional[CommentId],
        order: SortOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[Comment], int]:
        """Find one page of comments and the total number of matches."""
        comments = [
            c
            for c in self._store.comments.values()
            if c.snippet_id == snippet_id and c.parent_id == parent_id
        ]

        # Sort by created_at, ties broken by id
        comments.sort(
            key=lambda c: (c.created_at, c.id), reverse=order == SortOrder.DESC
        )

        return comments[offset : offset + limit], len(comments)
