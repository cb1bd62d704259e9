"""Create comment use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService, SnippetGuard, parse_value
from discuss.domain.value import CommentBody, CommentId, Requester, SnippetId

from .view import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    snippet_id: SnippetId
    body: str  # Untrusted, validated by the use case
    requester: Requester  # Authenticated author
    parent_id: CommentId | None = None  # Comment being replied to


class CreateCommentResponse(CommentItem):
    """Create comment response."""

    pass


class CreateCommentUseCase:
    """Use case for commenting on a snippet or replying to a comment."""

    def __init__(
        self,
        snippet_guard: SnippetGuard,
        comment_service: CommentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            snippet_guard: Snippet read guard
            comment_service: Comment domain service
        """
        self.snippet_guard = snippet_guard
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate the body (no store access yet)
        2. Verify the snippet is readable by the author
        3. Create the comment (places replies, bumps the parent's reply count)

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If the body is blank or too long
            NotFoundError: If the snippet is unreadable or the parent is invalid
        """
        parse_value(CommentBody, request.body, "body")

        await self.snippet_guard.assert_readable(request.snippet_id, request.requester)

        comment = await self.comment_service.create_comment(
            snippet_id=request.snippet_id,
            author_id=request.requester.user_id,
            body=request.body,
            parent_id=request.parent_id,
        )

        return CreateCommentResponse.from_comment(comment)
