"""Update comment use case."""

from pydantic import BaseModel

from discuss.domain.error import NotFoundError
from discuss.domain.service import CommentService, SnippetGuard
from discuss.domain.value import CommentId, Requester

from .view import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: CommentId
    body: str  # New text content
    requester: Requester  # Must be author or admin-equivalent


class UpdateCommentResponse(CommentItem):
    """Update comment response."""

    pass


class UpdateCommentUseCase:
    """Use case for replacing a comment's body."""

    def __init__(
        self, snippet_guard: SnippetGuard, comment_service: CommentService
    ) -> None:
        """Initialize update comment use case.

        Args:
            snippet_guard: Snippet read guard
            comment_service: Comment service
        """
        self.snippet_guard = snippet_guard
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, requester and new body

        Returns:
            Updated comment details

        Raises:
            ValidationError: If the body is blank or too long
            NotFoundError: If the comment doesn't exist or its snippet is not
                readable by the requester
            InvalidStateError: If the comment is deleted
            NotAuthorizedError: If the requester may not edit the comment
        """
        comment = await self.comment_service.get_comment_by_id(request.comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))
        await self.snippet_guard.assert_comment_readable(comment, request.requester)

        updated_comment = await self.comment_service.edit_comment(
            request.comment_id, request.requester, request.body
        )
        return UpdateCommentResponse.from_comment(updated_comment)
