"""List comment flags use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import CamelModel
from discuss.domain.service import FlagService
from discuss.domain.value import CommentId, Requester

from .view import FlagItem


class ListFlagsRequest(BaseModel):
    """List flags request."""

    comment_id: CommentId
    requester: Requester  # Must be admin-equivalent


class ListFlagsResponse(CamelModel):
    """List flags response."""

    comment_id: str
    flags: list[FlagItem]
    total: int


class ListFlagsUseCase:
    """Use case for moderators reviewing the reports on a comment."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: ListFlagsRequest) -> ListFlagsResponse:
        """Execute list flags flow.

        Raises:
            NotAuthorizedError: If the requester is not admin-equivalent
            NotFoundError: If the comment doesn't exist
        """
        flags = await self.flag_service.list_flags(
            request.comment_id, request.requester
        )
        return ListFlagsResponse(
            comment_id=str(request.comment_id),
            flags=[FlagItem.from_flag(f) for f in flags],
            total=len(flags),
        )
