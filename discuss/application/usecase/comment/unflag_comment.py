"""Unflag comment use case."""

from pydantic import BaseModel

from discuss.domain.service import FlagService
from discuss.domain.value import CommentId, FlagReason, Requester


class UnflagCommentRequest(BaseModel):
    """Unflag comment request."""

    comment_id: CommentId
    reporter: Requester
    reason: FlagReason


class UnflagCommentUseCase:
    """Use case for withdrawing one's own flag."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: UnflagCommentRequest) -> None:
        """Remove the reporter's flag; a missing flag is not an error."""
        await self.flag_service.unflag_comment(
            request.comment_id, request.reporter, request.reason
        )
