"""Thread shape decisions for new comments."""

import logfire

from discuss.domain.error import NotFoundError
from discuss.domain.model.thread import Reply, ThreadPlacement, TopLevel
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, SnippetId

from .base import Service


class ThreadService(Service):
    """Keeps threads at most one level deep.

    Replies to a reply are reparented to the reply's top-level ancestor,
    so stored parents are always top-level comments.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def classify(
        self, snippet_id: SnippetId, parent_id: CommentId | None = None
    ) -> ThreadPlacement:
        """Decide where a new comment goes in the thread.

        Args:
            snippet_id: Snippet the new comment is written on
            parent_id: Comment the client replied to, if any

        Returns:
            TopLevel, or Reply pointing at a top-level comment

        Raises:
            NotFoundError: If the parent is missing or on another snippet
        """
        if parent_id is None:
            return TopLevel()

        with logfire.span(
            "thread_service.classify",
            snippet_id=str(snippet_id),
            parent_id=str(parent_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None or parent.snippet_id != snippet_id:
                logfire.warn(
                    "Parent comment not found on snippet",
                    parent_id=str(parent_id),
                    snippet_id=str(snippet_id),
                )
                raise NotFoundError("Comment", str(parent_id))

            if parent.parent_id is not None:
                # Flatten: reply to the reply's top-level ancestor
                logfire.info(
                    "Reply reparented to top-level ancestor",
                    requested_parent_id=str(parent_id),
                    parent_id=str(parent.parent_id),
                )
                return Reply(parent_id=parent.parent_id)

            return Reply(parent_id=parent.id)
