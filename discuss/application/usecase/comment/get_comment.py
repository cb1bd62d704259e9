"""Get single comment use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService, SnippetGuard
from discuss.domain.value import CommentId, Requester

from .view import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: CommentId
    requester: Requester | None = None  # Anonymous reads allowed


class GetCommentResponse(CommentItem):
    """Get comment response."""

    pass


class GetCommentUseCase:
    """Use case for reading one comment."""

    def __init__(
        self, snippet_guard: SnippetGuard, comment_service: CommentService
    ) -> None:
        """Initialize get comment use case.

        Args:
            snippet_guard: Snippet read guard
            comment_service: Comment service
        """
        self.snippet_guard = snippet_guard
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment is missing, hidden from the requester,
                or sits on a snippet the requester cannot read
        """
        comment = await self.comment_service.get_visible_comment(
            request.comment_id, request.requester
        )
        await self.snippet_guard.assert_comment_readable(comment, request.requester)
        return GetCommentResponse.from_comment(comment)
