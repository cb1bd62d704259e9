"""List comments use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import CamelModel
from discuss.domain.service import CommentQueryService, SnippetGuard
from discuss.domain.value import CommentId, Requester, SnippetId, SortOrder

from .view import CommentItem, PaginationMetaItem


class ListCommentsRequest(BaseModel):
    """List comments request.

    Without parent_id this is the top-level feed; with it, the reply
    expansion of that comment.
    """

    snippet_id: SnippetId
    requester: Requester | None = None  # Anonymous reads allowed
    parent_id: CommentId | None = None
    page: int | None = None
    limit: int | None = None
    order: SortOrder | None = None


class ListCommentsResponse(CamelModel):
    """List comments response."""

    items: list[CommentItem]
    meta: PaginationMetaItem


class ListCommentsUseCase:
    """Use case for the top-level feed and reply expansion."""

    def __init__(
        self, snippet_guard: SnippetGuard, comment_query_service: CommentQueryService
    ) -> None:
        """Initialize list comments use case.

        Args:
            snippet_guard: Snippet read guard
            comment_query_service: Comment listing service
        """
        self.snippet_guard = snippet_guard
        self.comment_query_service = comment_query_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            NotFoundError: If the snippet is unreadable, or the parent of a
                reply expansion is missing
        """
        await self.snippet_guard.assert_readable(request.snippet_id, request.requester)

        if request.parent_id is None:
            page = await self.comment_query_service.list_top_level(
                request.snippet_id,
                page=request.page,
                limit=request.limit,
                order=request.order,
            )
        else:
            page = await self.comment_query_service.list_replies(
                request.snippet_id,
                request.parent_id,
                page=request.page,
                limit=request.limit,
                order=request.order,
            )

        return ListCommentsResponse(
            items=[CommentItem.from_comment(c) for c in page.items],
            meta=PaginationMetaItem.from_meta(page.meta),
        )
