"""Denormalized reply counter."""

import logfire

from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId

from .base import Service


class ReplyCounter(Service):
    """Maintains reply_count on top-level comments.

    Counts only ever go up: tombstoning a reply leaves its parent's
    count unchanged.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize reply counter.

        Args:
            comment_repository: Comment repository (shares the insert's transaction)
        """
        self.comment_repository = comment_repository

    async def increment(self, parent_id: CommentId) -> None:
        """Atomically increment a top-level comment's reply count.

        Uses a store-level increment to avoid lost updates under
        concurrent replies.

        Args:
            parent_id: Top-level comment ID
        """
        with logfire.span("reply_counter.increment", parent_id=str(parent_id)):
            await self.comment_repository.increment_reply_count(parent_id)
            logfire.info("Reply count incremented", parent_id=str(parent_id))
