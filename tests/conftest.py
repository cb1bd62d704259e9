"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from discuss.config import Settings
from discuss.domain.model import Comment
from discuss.domain.value import (
    CommentId,
    CommentStatus,
    Requester,
    Role,
    SnippetId,
    UserId,
)
from discuss.util.jwt import create_token

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_requester(role: Role = Role.USER) -> Requester:
    """Build a requester with a fresh user ID."""
    return Requester(user_id=UserId(uuid4()), role=role)


def make_comment(
    snippet_id: SnippetId,
    author_id: UserId | None = None,
    parent_id: CommentId | None = None,
    body: str = "Looks good to me",
    minutes: int = 0,
    deleted: bool = False,
    status: CommentStatus = CommentStatus.VISIBLE,
) -> Comment:
    """Build a stored-shape comment.

    Args:
        snippet_id: Snippet the comment belongs to
        author_id: Author (random when omitted)
        parent_id: Top-level parent, for replies
        body: Comment text
        minutes: Offset from BASE_TIME, used to control ordering
        deleted: Whether the comment is tombstoned
        status: Moderation status
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        snippet_id=snippet_id,
        author_id=author_id or UserId(uuid4()),
        parent_id=parent_id,
        body=body,
        status=status,
        reply_count=0,
        edited_at=None,
        deleted_at=created_at if deleted else None,
        created_at=created_at,
        updated_at=created_at,
    )


def make_token(requester: Requester) -> str:
    """Issue a token for the requester with the configured secret."""
    return create_token(str(requester.user_id), requester.role.value, Settings().auth)
