"""Comment listing (read model) service."""

import logfire

from discuss.config import CommentSettings
from discuss.domain.error import NotFoundError
from discuss.domain.model.page import CommentPage, PaginationMeta
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, SnippetId, SortOrder

from .base import Service


class CommentQueryService(Service):
    """Serves the two listing shapes.

    - Top-level feed: open-ended, paginated, newest first by default.
    - Reply expansion: one parent's replies, chronological by default.

    Both include tombstoned comments so totals and page boundaries do not
    shift when comments are deleted.
    """

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment query service.

        Args:
            comment_repository: Comment repository
            settings: Listing defaults and limits
        """
        self.comment_repository = comment_repository
        self.settings = settings

    def _clamp_limit(self, limit: int | None, default: int) -> int:
        if limit is None:
            return default
        return max(1, min(limit, self.settings.max_limit))

    def _clamp_page(self, page: int | None) -> int:
        return max(1, min(page or 1, self.settings.max_page))

    async def list_top_level(
        self,
        snippet_id: SnippetId,
        page: int | None = None,
        limit: int | None = None,
        order: SortOrder | None = None,
    ) -> CommentPage:
        """List top-level comments of a snippet.

        Args:
            snippet_id: Snippet ID
            page: 1-based page number, clamped to 1..max_page (default 1)
            limit: Page size, clamped to 1..max_limit (default feed_default_limit)
            order: Direction on created_at (default desc)

        Returns:
            One page of top-level comments with pagination metadata
        """
        page = self._clamp_page(page)
        limit = self._clamp_limit(limit, self.settings.feed_default_limit)
        order = order or SortOrder.DESC

        with logfire.span(
            "comment_query_service.list_top_level",
            snippet_id=str(snippet_id),
            page=page,
            limit=limit,
            order=order.value,
        ):
            items, total = await self.comment_repository.find_by_snippet(
                snippet_id=snippet_id,
                parent_id=None,
                order=order,
                limit=limit,
                offset=(page - 1) * limit,
            )
            logfire.info(
                "Top-level comments listed", count=len(items), total=total
            )
            return CommentPage(
                items=items, meta=PaginationMeta.build(page, limit, total)
            )

    async def list_replies(
        self,
        snippet_id: SnippetId,
        parent_id: CommentId,
        page: int | None = None,
        limit: int | None = None,
        order: SortOrder | None = None,
    ) -> CommentPage:
        """List replies to one top-level comment.

        Args:
            snippet_id: Snippet ID
            parent_id: Top-level comment whose replies are expanded
            page: 1-based page number, clamped to 1..max_page (default 1)
            limit: Page size, clamped to 1..max_limit (default replies_default_limit)
            order: Direction on created_at (default asc)

        Returns:
            One page of replies with pagination metadata

        Raises:
            NotFoundError: If the parent is missing or on another snippet
        """
        page = self._clamp_page(page)
        limit = self._clamp_limit(limit, self.settings.replies_default_limit)
        order = order or SortOrder.ASC

        with logfire.span(
            "comment_query_service.list_replies",
            snippet_id=str(snippet_id),
            parent_id=str(parent_id),
            page=page,
            limit=limit,
            order=order.value,
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None or parent.snippet_id != snippet_id:
                logfire.warn(
                    "Reply expansion for unknown parent", parent_id=str(parent_id)
                )
                raise NotFoundError("Comment", str(parent_id))

            items, total = await self.comment_repository.find_by_snippet(
                snippet_id=snippet_id,
                parent_id=parent_id,
                order=order,
                limit=limit,
                offset=(page - 1) * limit,
            )
            logfire.info("Replies listed", count=len(items), total=total)
            return CommentPage(
                items=items, meta=PaginationMeta.build(page, limit, total)
            )
