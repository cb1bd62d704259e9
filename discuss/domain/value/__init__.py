"""Domain value objects for comment threads."""

from discuss.domain.value.identifiers import (
    CommentId,
    FlagId,
    SnippetId,
    UserId,
)
from discuss.domain.value.types import (
    BODY_MAX_LENGTH,
    FLAG_MESSAGE_MAX_LENGTH,
    CommentBody,
    CommentStatus,
    FlagMessage,
    FlagReason,
    Requester,
    Role,
    SortOrder,
)

__all__ = [
    # Identifiers
    "UserId",
    "SnippetId",
    "CommentId",
    "FlagId",
    # Types
    "BODY_MAX_LENGTH",
    "FLAG_MESSAGE_MAX_LENGTH",
    "CommentBody",
    "CommentStatus",
    "FlagMessage",
    "FlagReason",
    "Requester",
    "Role",
    "SortOrder",
]
