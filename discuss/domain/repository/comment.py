"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, SnippetId, SortOrder


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found (tombstoned or not), None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The comment as stored
        """
        pass

    @abstractmethod
    async def update_body(
        self, comment_id: CommentId, body: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the body of a live comment and stamp edited_at.

        Args:
            comment_id: Comment ID
            body: New (already validated) body
            edited_at: Edit timestamp, also used as updated_at

        Returns:
            The updated comment, or None if missing or tombstoned
        """
        pass

    @abstractmethod
    async def mark_deleted(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a live comment.

        Args:
            comment_id: Comment ID
            deleted_at: Tombstone timestamp

        Returns:
            The tombstoned comment, or None if missing or already tombstoned
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically add one to a comment's reply count.

        Must be a single store-level mutation (no read-modify-write) so
        concurrent replies never lose updates.

        Args:
            comment_id: Top-level comment ID
        """
        pass

    @abstractmethod
    async def find_by_snippet(
        self,
        snippet_id: SnippetId,
        parent_id: Optional[CommentId],
        order: SortOrder,
        limit: int,
        offset: int,
    ) -> Tuple[List[Comment], int]:
        """Find one page of comments and the total number of matches.

        Tombstoned comments are included in both the page and the total.

        Args:
            snippet_id: Snippet the comments belong to
            parent_id: None for top-level comments, otherwise the parent ID
            order: Direction on created_at (ties broken by id)
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Tuple of (comments on the page, total matching comments)
        """
        pass
