"""Delete comment use case."""

from pydantic import BaseModel

from discuss.domain.error import NotFoundError
from discuss.domain.service import CommentService, SnippetGuard
from discuss.domain.value import CommentId, Requester


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: CommentId
    requester: Requester  # Must be author or admin-equivalent


class DeleteCommentUseCase:
    """Use case for tombstoning a comment."""

    def __init__(
        self, snippet_guard: SnippetGuard, comment_service: CommentService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            snippet_guard: Snippet read guard
            comment_service: Comment service
        """
        self.snippet_guard = snippet_guard
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Deleting an already deleted comment succeeds without changes.

        Raises:
            NotFoundError: If the comment doesn't exist or its snippet is not
                readable by the requester
            NotAuthorizedError: If the requester may not delete the comment
        """
        comment = await self.comment_service.get_comment_by_id(request.comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))
        await self.snippet_guard.assert_comment_readable(comment, request.requester)

        await self.comment_service.soft_delete_comment(
            request.comment_id, request.requester
        )
