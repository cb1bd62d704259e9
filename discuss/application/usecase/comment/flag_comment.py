"""Flag comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import CamelModel
from discuss.domain.error import NotFoundError
from discuss.domain.service import CommentService, FlagService, SnippetGuard, parse_value
from discuss.domain.value import CommentId, FlagMessage, FlagReason, Requester


class FlagCommentRequest(BaseModel):
    """Flag comment request."""

    comment_id: CommentId
    reporter: Requester
    reason: FlagReason
    message: str | None = None


class FlagCommentResponse(CamelModel):
    """Flag comment response."""

    created: bool  # False when the same flag already existed


class FlagCommentUseCase:
    """Use case for reporting a comment to moderators."""

    def __init__(
        self,
        snippet_guard: SnippetGuard,
        comment_service: CommentService,
        flag_service: FlagService,
    ) -> None:
        """Initialize flag comment use case.

        Args:
            snippet_guard: Snippet read guard
            comment_service: Comment service
            flag_service: Flag service
        """
        self.snippet_guard = snippet_guard
        self.comment_service = comment_service
        self.flag_service = flag_service

    async def execute(self, request: FlagCommentRequest) -> FlagCommentResponse:
        """Execute flag comment flow.

        Steps:
        1. Validate the message (no store access yet)
        2. Verify the comment exists on a snippet the reporter can read
        3. Record the flag (idempotent per comment/reporter/reason)

        Raises:
            ValidationError: If the message is too long
            NotFoundError: If the comment or its snippet is not found
            NotAuthorizedError: If the reporter wrote the comment
            InvalidStateError: If the comment is deleted
        """
        if request.message is not None:
            parse_value(FlagMessage, request.message, "message")

        comment = await self.comment_service.get_comment_by_id(request.comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        await self.snippet_guard.assert_comment_readable(comment, request.reporter)

        result = await self.flag_service.flag_comment(
            request.comment_id, request.reporter, request.reason, request.message
        )
        return FlagCommentResponse(created=result.created)
