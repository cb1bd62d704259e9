"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, Response, status

from discuss.application.usecase.base import CamelModel
from discuss.application.usecase.comment import (
    CommentEngine,
    CreateCommentResponse,
    GetCommentResponse,
    ListCommentsResponse,
    UpdateCommentResponse,
)
from discuss.domain.service import JWTService
from discuss.domain.value import CommentId, SnippetId, SortOrder
from discuss.interface.api.auth import optional_requester, require_requester

snippet_router = APIRouter(
    prefix="/snippets", tags=["comments"], route_class=DishkaRoute
)
router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment.

    Length and blankness of the body are checked by the domain so that
    failures carry field-level detail.
    """

    body: str
    parent_id: UUID | None = None  # Comment being replied to


class UpdateCommentAPIRequest(CamelModel):
    """API request for editing a comment."""

    body: str


@snippet_router.post(
    "/{snippet_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    snippet_id: UUID,
    request: CreateCommentAPIRequest,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a snippet or reply to a comment.

    Requires authentication. Replies to replies are attached to the
    top-level comment of the thread.

    Args:
        snippet_id: Snippet UUID
        request: Comment body and optional parent
        engine: Comment engine from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created comment
    """
    requester = require_requester(jwt_service, auth_token, authorization)
    return await engine.create(
        snippet_id=SnippetId(snippet_id),
        requester=requester,
        body=request.body,
        parent_id=CommentId(request.parent_id) if request.parent_id else None,
    )


@snippet_router.get("/{snippet_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    snippet_id: UUID,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    parent_id: UUID | None = Query(default=None, alias="parentId"),
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    order: SortOrder | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCommentsResponse:
    """List a snippet's comments.

    Without parentId: the top-level feed (newest first, 20 per page).
    With parentId: that comment's replies (oldest first, 50 per page).
    Deleted comments stay in the listing with their body withheld.

    Args:
        snippet_id: Snippet UUID
        engine: Comment engine from DI
        jwt_service: JWT service for token verification (injected)
        parent_id: Top-level comment whose replies to expand
        page: 1-based page number
        limit: Page size (clamped to 1..100)
        order: asc or desc on creation time
        auth_token: JWT token from cookie (optional)
        authorization: Bearer token header (optional)

    Returns:
        Page of comments with pagination metadata
    """
    return await engine.list(
        snippet_id=SnippetId(snippet_id),
        requester=optional_requester(jwt_service, auth_token, authorization),
        parent_id=CommentId(parent_id) if parent_id else None,
        page=page,
        limit=limit,
        order=order,
    )


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: UUID,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCommentResponse:
    """Get a single comment.

    Deleted or moderated comments are only visible to their author and
    moderators.
    """
    return await engine.get(
        CommentId(comment_id),
        optional_requester(jwt_service, auth_token, authorization),
    )


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's body.

    Only the author or a moderator can edit, and only while the comment
    is not deleted.

    Args:
        comment_id: Comment UUID
        request: New body
        engine: Comment engine from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Updated comment
    """
    requester = require_requester(jwt_service, auth_token, authorization)
    return await engine.edit(CommentId(comment_id), requester, request.body)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_comment(
    comment_id: UUID,
    engine: FromDishka[CommentEngine],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a comment.

    The comment is tombstoned rather than removed. Deleting twice succeeds.
    """
    requester = require_requester(jwt_service, auth_token, authorization)
    await engine.delete(CommentId(comment_id), requester)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
