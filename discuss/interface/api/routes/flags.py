"""Comment flag (moderation report) routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status

from discuss.application.usecase.base import CamelModel
from discuss.application.usecase.comment import (
    CommentEngine,
    FlagCommentResponse,
    ListFlagsResponse,
)
from discuss.domain.service import JWTService
from discuss.domain.value import CommentId, FlagReason
from discuss.interface.api.auth import require_requester

router = APIRouter(prefix="/comments", tags=["flags"], route_class=DishkaRoute)


class FlagCommentAPIRequest(CamelModel):
    """API request for flagging a comment."""

    reason: FlagReason
    message: str | None = None


@router.post("/{comment_id}/flags", response_model=FlagCommentResponse)
async def flag_comment(
    comment_id: UUID,
    request: FlagCommentAPIRequest,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> FlagCommentResponse:
    """Flag a comment for moderation.

    Requires authentication. Submitting the same reason twice is a no-op
    reported as created=false.

    Args:
        comment_id: Comment UUID
        request: Reason and optional message
        engine: Comment engine from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Whether a new flag was recorded
    """
    reporter = require_requester(jwt_service, auth_token, authorization)
    return await engine.flag(
        CommentId(comment_id), reporter, request.reason, request.message
    )


@router.delete(
    "/{comment_id}/flags/{reason}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def unflag_comment(
    comment_id: UUID,
    reason: FlagReason,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Withdraw your own flag. Missing flags are ignored."""
    reporter = require_requester(jwt_service, auth_token, authorization)
    await engine.unflag(CommentId(comment_id), reporter, reason)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{comment_id}/flags", response_model=ListFlagsResponse)
async def list_flags(
    comment_id: UUID,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListFlagsResponse:
    """List flags on a comment. Moderators only."""
    requester = require_requester(jwt_service, auth_token, authorization)
    return await engine.list_flags(CommentId(comment_id), requester)
